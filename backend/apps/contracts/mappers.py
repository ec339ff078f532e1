"""
合同映射器
将持久化层的 Contract 记录转换为对外输出的 Schema

映射均为纯函数：不访问数据库，不修改输入对象
"""
from typing import Iterable, List

from apps.core.enums import ContractStatus
from apps.core.schemas import TimestampMixin
from .models import Contract
from .schemas import ContractOut, ContractReminderItem


def _status_label(status: str):
    try:
        return str(ContractStatus(status).label)
    except ValueError:
        return None


class ContractMapper(TimestampMixin):
    """合同映射器"""

    def to_contract_out(self, contract: Contract) -> ContractOut:
        """Contract -> ContractOut"""
        return ContractOut(
            id=contract.id,
            contract_number=contract.contract_number,
            contract_version=contract.contract_version,
            ukprn=contract.ukprn,
            title=contract.title,
            status=contract.status,
            status_label=_status_label(contract.status),
            funding_type=contract.funding_type,
            year=contract.year,
            start_date=contract.start_date,
            end_date=contract.end_date,
            signed_on=self._resolve_datetime(contract.signed_on),
            created_at=self._resolve_datetime(contract.created_at),
            last_updated_at=self._resolve_datetime(contract.last_updated_at),
            last_email_reminder_sent=self._resolve_datetime(contract.last_email_reminder_sent),
        )

    def to_contract_out_list(self, contracts: Iterable[Contract]) -> List[ContractOut]:
        return [self.to_contract_out(c) for c in contracts]

    def to_reminder_item(self, contract: Contract) -> ContractReminderItem:
        """Contract -> ContractReminderItem"""
        return ContractReminderItem(
            id=contract.id,
            contract_number=contract.contract_number,
            contract_version=contract.contract_version,
            ukprn=contract.ukprn,
            title=contract.title,
            status=contract.status,
            funding_type=contract.funding_type,
            last_email_reminder_sent=self._resolve_datetime(contract.last_email_reminder_sent),
        )

    def to_reminder_items(self, contracts: Iterable[Contract]) -> List[ContractReminderItem]:
        return [self.to_reminder_item(c) for c in contracts]
