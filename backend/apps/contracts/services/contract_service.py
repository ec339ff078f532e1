"""
合同服务层
在 API 层与合同仓储之间做映射、分页元数据组装和审计
"""
from datetime import datetime, time, timedelta, timezone as dt_timezone
from typing import List, Optional, TYPE_CHECKING
import logging

from django.utils import timezone

from apps.core.enums import (
    AuditActionType,
    AuditSeverity,
    ContractSortOptions,
    ContractStatus,
    SortDirection,
)
from apps.core.interfaces import Audit, UpdatedContractStatusResponse
from apps.core.schemas import PagingMetadata
from apps.core.services.audit_config import get_app_name
from ..mappers import ContractMapper
from ..schemas import ContractOut, ContractReminderResponse

if TYPE_CHECKING:
    from apps.core.interfaces import IAuditService, IContractRepository, IUriService

logger = logging.getLogger("apps.contracts")

PAGE_PLACEHOLDER = "{page}"


def get_reminder_cutoff(reminder_interval: int, now: Optional[datetime] = None) -> datetime:
    """
    计算合同提醒截止时间

    当前 UTC 日期减去 reminder_interval 天，时间固定为 23:59

    Args:
        reminder_interval: 提醒间隔（天）
        now: 当前时间，默认 timezone.now()

    Returns:
        UTC 时区的截止时间
    """
    now = now or timezone.now()
    if timezone.is_aware(now):
        now = now.astimezone(dt_timezone.utc)
    cutoff_date = now.date() - timedelta(days=reminder_interval)
    return datetime.combine(cutoff_date, time(23, 59), tzinfo=dt_timezone.utc)


def set_page_value(templated_query_string: str, page_value: int) -> str:
    """将模板中的 {page} 占位符替换为页码"""
    return templated_query_string.replace(PAGE_PLACEHOLDER, str(page_value))


class ContractService:
    """
    合同服务

    职责：
    1. 调用合同仓储并映射为输出 Schema
    2. 组装合同提醒的分页元数据
    3. 确认批准后尽力提交审计记录

    服务本身无可变状态，协作者在构造时注入后可被并发请求共享
    """

    def __init__(
        self,
        repository: Optional["IContractRepository"] = None,
        mapper: Optional[ContractMapper] = None,
        uri_service: Optional["IUriService"] = None,
        audit_service: Optional["IAuditService"] = None,
    ):
        """
        初始化服务（依赖注入）

        未传入的协作者在构造时从 ServiceLocator 获取，之后不再变化

        Args:
            repository: 合同仓储（可选）
            mapper: 合同映射器（可选，默认 ContractMapper）
            uri_service: URI 构建服务（可选）
            audit_service: 审计服务（可选）
        """
        from apps.core.interfaces import ServiceLocator

        self.repository = repository or ServiceLocator.get_contract_repository()
        self.mapper = mapper or ContractMapper()
        self.uri_service = uri_service or ServiceLocator.get_uri_service()
        self.audit_service = audit_service or ServiceLocator.get_audit_service()

    async def get_by_id(self, contract_id: int) -> ContractOut:
        """
        获取单个合同

        Raises:
            NotFoundError: 合同不存在
        """
        contract = await self.repository.get_by_id(contract_id)
        return self.mapper.to_contract_out(contract)

    async def get_by_contract_number(self, contract_number: str) -> List[ContractOut]:
        """获取合同编号下的所有版本"""
        contracts = await self.repository.get_by_contract_number(contract_number)
        return self.mapper.to_contract_out_list(contracts)

    async def get_by_contract_number_and_version(self, contract_number: str, version: int) -> ContractOut:
        """
        按合同编号和版本号获取合同

        Raises:
            NotFoundError: 合同不存在
        """
        contract = await self.repository.get_by_contract_number_and_version(contract_number, version)
        return self.mapper.to_contract_out(contract)

    async def get_contract_reminders(
        self,
        reminder_interval: int,
        page_number: int,
        page_size: int,
        sort: ContractSortOptions,
        order: SortDirection,
        templated_query_string: str,
    ) -> ContractReminderResponse:
        """
        分页获取需要发送提醒的合同

        Args:
            reminder_interval: 提醒间隔（天）
            page_number: 页码（从 1 开始）
            page_size: 每页条数
            sort: 排序字段
            order: 排序方向
            templated_query_string: 带 {page} 占位符的查询路径，用于生成上一页/下一页链接

        Returns:
            提醒列表和分页元数据
        """
        now = timezone.now()
        cutoff = get_reminder_cutoff(reminder_interval, now)

        logger.info(
            f"Get contract reminder by reminder interval : {reminder_interval} and cut off datetime "
            f"{cutoff.isoformat()}. - Current utc: {now.isoformat()}",
            extra={"action": "get_contract_reminders"}
        )

        contracts = await self.repository.get_contract_reminders(cutoff, page_number, page_size, sort, order)

        metadata = PagingMetadata(
            total_count=contracts.total_count,
            page_size=contracts.page_size,
            current_page=contracts.current_page,
            total_pages=contracts.total_pages,
            has_next_page=contracts.has_next_page,
            has_previous_page=contracts.has_previous_page,
            next_page_url=(
                self.uri_service.get_uri(set_page_value(templated_query_string, page_number + 1))
                if contracts.has_next_page else ""
            ),
            previous_page_url=(
                self.uri_service.get_uri(set_page_value(templated_query_string, page_number - 1))
                if contracts.has_previous_page else ""
            ),
        )

        return ContractReminderResponse(
            contracts=self.mapper.to_reminder_items(contracts.items),
            paging=metadata,
        )

    async def update_last_email_reminder_sent(self, contract_id: int) -> ContractOut:
        """
        更新最后提醒邮件发送时间

        Raises:
            NotFoundError: 合同不存在
        """
        contract = await self.repository.update_last_email_reminder_sent(contract_id)
        return self.mapper.to_contract_out(contract)

    async def confirm_approval(self, contract_id: int, contract_number: str) -> UpdatedContractStatusResponse:
        """
        确认批准：ApprovedWaitingConfirmation -> Approved

        状态更新成功后提交审计记录；审计失败只记录错误日志，不影响返回结果

        Raises:
            NotFoundError: 合同不存在
            PreconditionFailedError: 合同当前状态不是 ApprovedWaitingConfirmation
        """
        logger.info(
            f"[confirm_approval] called with contract number: {contract_number}, contract Id: {contract_id}",
            extra={"action": "confirm_approval", "contract_id": contract_id, "contract_number": contract_number}
        )

        result = await self.repository.update_contract_status(
            contract_id,
            ContractStatus.APPROVED_WAITING_CONFIRMATION,
            ContractStatus.APPROVED,
        )

        message = (
            f"Contract [{result.contract_number}] Version number [{result.contract_version}] "
            f"with Id [{result.id}] has been {result.new_status}. "
            f"Additional Information Details: ContractId is: {result.id}. "
            f"Contract Status Before was {result.status} . Contract Status After is {result.new_status}"
        )
        await self._submit_audit(
            operation="confirm_approval",
            result=result,
            audit=Audit(
                action=AuditActionType.CONTRACT_CONFIRM_APPROVAL,
                severity=AuditSeverity.INFORMATION,
                ukprn=result.ukprn,
                message=message,
                user=f"[{get_app_name()}]",
            ),
        )
        return result

    async def _submit_audit(self, operation: str, result: UpdatedContractStatusResponse, audit: Audit) -> bool:
        """
        提交审计记录

        状态已提交，审计失败不回滚也不重试，只记录错误日志

        Returns:
            审计是否提交成功
        """
        try:
            await self.audit_service.audit(audit)
        except Exception as e:
            logger.error(
                f"[{operation}] Audit log failed for the contract number: {result.contract_number}, "
                f"contract Id: {result.id}. Message: {audit.message}. The Error: {e}",
                extra={
                    "action": f"{operation}_audit_failed",
                    "contract_id": result.id,
                    "contract_number": result.contract_number,
                }
            )
            return False

        logger.info(
            f"[{operation}] Audit success for the message: {audit.message}",
            extra={"action": f"{operation}_audit_success", "contract_id": result.id}
        )
        return True
