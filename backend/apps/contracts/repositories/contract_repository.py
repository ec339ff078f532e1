"""
合同仓储层
封装合同的数据库访问，全部基于 Django 异步 ORM 接口
"""
from datetime import datetime
from typing import List
import logging

from django.db.models import F, QuerySet
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.core.enums import ContractSortOptions, ContractStatus, SortDirection
from apps.core.exceptions import ContractExceptions
from apps.core.interfaces import PagedResult, UpdatedContractStatusResponse
from ..models import Contract

logger = logging.getLogger("apps.contracts")


class ContractRepository:
    """
    合同仓储

    职责：
    1. 按 ID / 合同编号 / 编号+版本查询合同
    2. 合同提醒分页查询
    3. 单条 UPDATE 语句完成的时间戳更新与状态条件更新
    """

    def get_queryset(self) -> QuerySet:
        return Contract.objects.all()

    async def get_by_id(self, contract_id: int) -> Contract:
        """
        按 ID 获取合同

        Raises:
            NotFoundError: 合同不存在
        """
        try:
            return await self.get_queryset().aget(id=contract_id)
        except Contract.DoesNotExist:
            raise ContractExceptions.contract_not_found(contract_id)

    async def get_by_contract_number(self, contract_number: str) -> List[Contract]:
        """获取合同编号下的所有版本，按版本号升序"""
        qs = self.get_queryset().filter(contract_number=contract_number).order_by("contract_version")
        return [contract async for contract in qs]

    async def get_by_contract_number_and_version(self, contract_number: str, version: int) -> Contract:
        """
        按合同编号和版本号获取合同

        Raises:
            NotFoundError: 合同不存在
        """
        try:
            return await self.get_queryset().aget(contract_number=contract_number, contract_version=version)
        except Contract.DoesNotExist:
            raise ContractExceptions.contract_version_not_found(contract_number, version)

    def _reminder_queryset(self, cutoff: datetime) -> QuerySet:
        """
        待发送提醒的合同

        从未发送过提醒的合同以创建时间作为提醒基准时间
        """
        return (
            self.get_queryset()
            .filter(status=ContractStatus.PUBLISHED_TO_PROVIDER)
            .annotate(reminder_date=Coalesce("last_email_reminder_sent", "created_at"))
            .filter(reminder_date__lte=cutoff)
        )

    async def get_contract_reminders(
        self,
        cutoff: datetime,
        page_number: int,
        page_size: int,
        sort: ContractSortOptions,
        order: SortDirection,
    ) -> PagedResult[Contract]:
        """
        分页获取提醒基准时间不晚于截止时间的合同

        Args:
            cutoff: 截止时间
            page_number: 页码（从 1 开始）
            page_size: 每页条数
            sort: 排序字段
            order: 排序方向

        Returns:
            分页结果
        """
        qs = self._reminder_queryset(cutoff)
        total_count = await qs.acount()

        field = F(ContractSortOptions(sort).value)
        ordering = field.desc() if SortDirection(order) == SortDirection.DESC else field.asc()
        offset = (page_number - 1) * page_size
        page_qs = qs.order_by(ordering, "id")[offset:offset + page_size]
        items = [contract async for contract in page_qs]

        logger.debug(
            f"合同提醒查询: 截止时间 {cutoff.isoformat()}，共 {total_count} 条，返回第 {page_number} 页 {len(items)} 条",
            extra={"action": "get_contract_reminders"}
        )
        return PagedResult.create(items, total_count, page_number, page_size)

    async def update_last_email_reminder_sent(self, contract_id: int) -> Contract:
        """
        将最后提醒邮件发送时间和最后更新时间设置为当前时间

        Raises:
            NotFoundError: 合同不存在
        """
        now = timezone.now()
        updated = await self.get_queryset().filter(id=contract_id).aupdate(
            last_email_reminder_sent=now,
            last_updated_at=now,
        )
        if not updated:
            raise ContractExceptions.contract_not_found(contract_id)
        return await self.get_queryset().aget(id=contract_id)

    async def update_contract_status(
        self,
        contract_id: int,
        required_status: str,
        new_status: str,
    ) -> UpdatedContractStatusResponse:
        """
        条件更新合同状态

        UPDATE 语句以 status=required_status 作为过滤条件，检查与更新在数据库中一次完成

        Raises:
            NotFoundError: 合同不存在
            PreconditionFailedError: 当前状态与要求状态不一致
        """
        contract = await self.get_by_id(contract_id)

        updated = await self.get_queryset().filter(id=contract_id, status=required_status).aupdate(
            status=new_status,
            last_updated_at=timezone.now(),
        )
        if not updated:
            current_status = await (
                self.get_queryset().filter(id=contract_id).values_list("status", flat=True).afirst()
            )
            if current_status is None:
                raise ContractExceptions.contract_not_found(contract_id)
            raise ContractExceptions.invalid_status(contract_id, current_status, str(required_status))

        return UpdatedContractStatusResponse(
            id=contract.id,
            contract_number=contract.contract_number,
            contract_version=contract.contract_version,
            ukprn=contract.ukprn,
            status=str(required_status),
            new_status=str(new_status),
        )
