"""
测试用 Mock 协作者

内存实现的合同仓储、URI 构建服务和审计服务，
用于在不访问数据库和网络的情况下测试 ContractService
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from apps.contracts.models import Contract
from apps.core.enums import ContractStatus
from apps.core.exceptions import ContractExceptions
from apps.core.interfaces import Audit, PagedResult, UpdatedContractStatusResponse

_DEFAULT_TIME = datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)


def build_contract(**overrides) -> Contract:
    """构建未保存的 Contract 实例"""
    data = {
        "id": 1,
        "contract_number": "CON-0001",
        "contract_version": 1,
        "ukprn": 10000001,
        "title": "测试合同",
        "status": ContractStatus.PUBLISHED_TO_PROVIDER,
        "funding_type": "AEB",
        "year": "2324",
        "created_at": _DEFAULT_TIME,
        "last_updated_at": _DEFAULT_TIME,
        "last_email_reminder_sent": None,
    }
    data.update(overrides)
    return Contract(**data)


class MockContractRepository:
    """内存合同仓储"""

    def __init__(self, contracts: Optional[List[Contract]] = None, paged_result: Optional[PagedResult] = None):
        self.contracts: Dict[int, Contract] = {c.id: c for c in contracts or []}
        self.paged_result = paged_result
        self.calls: List[tuple] = []

    async def get_by_id(self, contract_id: int) -> Contract:
        self.calls.append(("get_by_id", contract_id))
        try:
            return self.contracts[contract_id]
        except KeyError:
            raise ContractExceptions.contract_not_found(contract_id)

    async def get_by_contract_number(self, contract_number: str) -> List[Contract]:
        self.calls.append(("get_by_contract_number", contract_number))
        matches = [c for c in self.contracts.values() if c.contract_number == contract_number]
        return sorted(matches, key=lambda c: c.contract_version)

    async def get_by_contract_number_and_version(self, contract_number: str, version: int) -> Contract:
        self.calls.append(("get_by_contract_number_and_version", contract_number, version))
        for contract in self.contracts.values():
            if contract.contract_number == contract_number and contract.contract_version == version:
                return contract
        raise ContractExceptions.contract_version_not_found(contract_number, version)

    async def get_contract_reminders(self, cutoff, page_number, page_size, sort, order) -> PagedResult:
        self.calls.append(("get_contract_reminders", cutoff, page_number, page_size, sort, order))
        if self.paged_result is not None:
            return self.paged_result
        items = list(self.contracts.values())
        offset = (page_number - 1) * page_size
        return PagedResult.create(items[offset:offset + page_size], len(items), page_number, page_size)

    async def update_last_email_reminder_sent(self, contract_id: int) -> Contract:
        self.calls.append(("update_last_email_reminder_sent", contract_id))
        contract = await self.get_by_id(contract_id)
        now = datetime.now(timezone.utc)
        contract.last_email_reminder_sent = now
        contract.last_updated_at = now
        return contract

    async def update_contract_status(self, contract_id: int, required_status: str, new_status: str):
        self.calls.append(("update_contract_status", contract_id, required_status, new_status))
        contract = await self.get_by_id(contract_id)
        if contract.status != required_status:
            raise ContractExceptions.invalid_status(contract_id, str(contract.status), str(required_status))
        old_status = str(contract.status)
        contract.status = str(new_status)
        return UpdatedContractStatusResponse(
            id=contract.id,
            contract_number=contract.contract_number,
            contract_version=contract.contract_version,
            ukprn=contract.ukprn,
            status=old_status,
            new_status=str(new_status),
        )


class MockUriService:
    """记录调用的 URI 构建服务"""

    def __init__(self, base_url: str = "https://contracts.example.com"):
        self.base_url = base_url
        self.paths: List[str] = []

    def get_uri(self, path: str) -> str:
        self.paths.append(path)
        return self.base_url + path


class MockAuditService:
    """记录审计记录的审计服务，error 不为空时提交即抛出该异常"""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.audits: List[Audit] = []

    async def audit(self, audit: Audit) -> None:
        self.audits.append(audit)
        if self.error is not None:
            raise self.error
