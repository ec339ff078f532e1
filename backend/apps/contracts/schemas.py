from datetime import date, datetime
from typing import Optional, List

from ninja import Schema
from pydantic import Field, field_validator

from apps.core.schemas import PagingMetadata


class ContractOut(Schema):
    """合同输出 Schema"""
    id: int
    contract_number: str
    contract_version: int
    ukprn: int
    title: str
    status: str
    status_label: Optional[str] = None
    funding_type: str
    year: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    signed_on: Optional[datetime] = None
    created_at: datetime
    last_updated_at: datetime
    last_email_reminder_sent: Optional[datetime] = None


class ContractReminderItem(Schema):
    """合同提醒列表项"""
    id: int
    contract_number: str
    contract_version: int
    ukprn: int
    title: str
    status: str
    funding_type: str
    last_email_reminder_sent: Optional[datetime] = None


class ContractReminderResponse(Schema):
    """合同提醒分页响应"""
    contracts: List[ContractReminderItem]
    paging: PagingMetadata


class UpdateLastEmailReminderSentIn(Schema):
    """更新最后提醒邮件发送时间输入 Schema"""
    id: int
    contract_number: Optional[str] = None
    contract_version: Optional[int] = None


class UpdateConfirmApprovalIn(Schema):
    """确认批准输入 Schema"""
    id: int
    contract_number: str = Field(..., min_length=1)

    @field_validator("contract_number")
    @classmethod
    def validate_contract_number(cls, v):
        """合同编号去除首尾空白后不能为空"""
        v = v.strip()
        if not v:
            raise ValueError("合同编号不能为空")
        return v


class UpdatedContractStatusOut(Schema):
    """合同状态更新结果输出 Schema"""
    id: int
    contract_number: str
    contract_version: int
    ukprn: int
    status: str
    new_status: str
    action: str
