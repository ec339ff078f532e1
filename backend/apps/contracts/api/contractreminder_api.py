"""
合同提醒 API 层
只做请求/响应处理，业务逻辑在 Service 层
"""
from typing import Optional
from urllib.parse import urlencode
from ninja import Router

from apps.core.enums import ContractSortOptions, SortDirection
from apps.core.exceptions import ValidationException
from ..config import ContractReminderConfig
from ..schemas import ContractOut, ContractReminderResponse, UpdateLastEmailReminderSentIn
from .contract_api import _get_contract_service

router = Router()


def _validate_reminder_query(reminder_interval: int, page_number: int, page_size: int, sort: str, order: str) -> None:
    """校验提醒查询参数"""
    errors = {}
    if reminder_interval < 0:
        errors["reminder_interval"] = "提醒间隔不能为负数"
    if page_number < 1:
        errors["page_number"] = "页码从 1 开始"
    max_page_size = ContractReminderConfig.get_max_page_size()
    if page_size < 1 or page_size > max_page_size:
        errors["page_size"] = f"每页条数必须在 1 到 {max_page_size} 之间"
    if sort not in ContractSortOptions.values:
        errors["sort"] = f"不支持的排序字段: {sort}"
    if order not in SortDirection.values:
        errors["order"] = f"不支持的排序方向: {order}"
    if errors:
        raise ValidationException("提醒查询参数不合法", errors=errors)


def _build_templated_query_string(path: str, reminder_interval: int, page_size: int, sort: str, order: str) -> str:
    """构建带 {page} 占位符的查询路径"""
    query = urlencode({
        "reminder_interval": reminder_interval,
        "page_size": page_size,
        "sort": sort,
        "order": order,
    })
    return f"{path}?{query}&page_number={{page}}"


@router.get("/contract-reminders", response=ContractReminderResponse)
async def list_contract_reminders(
    request,
    reminder_interval: Optional[int] = None,
    page_number: int = ContractReminderConfig.DEFAULT_PAGE_NUMBER,
    page_size: Optional[int] = None,
    sort: str = ContractReminderConfig.DEFAULT_SORT.value,
    order: str = ContractReminderConfig.DEFAULT_ORDER.value,
):
    """
    获取需要发送提醒的合同（分页）

    API 层职责：
    1. 接收并校验查询参数
    2. 生成分页链接模板
    3. 调用 Service 层方法
    """
    if reminder_interval is None:
        reminder_interval = ContractReminderConfig.get_reminder_interval()
    if page_size is None:
        page_size = ContractReminderConfig.get_page_size()
    _validate_reminder_query(reminder_interval, page_number, page_size, sort, order)

    templated_query_string = _build_templated_query_string(request.path, reminder_interval, page_size, sort, order)

    service = _get_contract_service()
    return await service.get_contract_reminders(
        reminder_interval=reminder_interval,
        page_number=page_number,
        page_size=page_size,
        sort=ContractSortOptions(sort),
        order=SortDirection(order),
        templated_query_string=templated_query_string,
    )


@router.patch("/contract-reminder", response=ContractOut)
async def update_last_email_reminder_sent(request, payload: UpdateLastEmailReminderSentIn):
    """更新合同最后提醒邮件发送时间"""
    service = _get_contract_service()
    return await service.update_last_email_reminder_sent(payload.id)
