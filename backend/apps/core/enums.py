"""
共享枚举定义模块

本模块包含跨模块使用的枚举类型，
避免服务层、仓储层与审计客户端之间直接导入 Model 造成的循环依赖问题。

使用方式:
    from apps.core.enums import ContractStatus, ContractSortOptions, SortDirection
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ContractStatus(models.TextChoices):
    """合同状态"""
    PUBLISHED_TO_PROVIDER = "PublishedToProvider", _("已发布给供应方")
    WITHDRAWN_BY_AGENCY = "WithdrawnByAgency", _("机构撤回")
    APPROVED = "Approved", _("已批准")
    APPROVED_WAITING_CONFIRMATION = "ApprovedWaitingConfirmation", _("已批准待确认")
    WITHDRAWN_BY_PROVIDER = "WithdrawnByProvider", _("供应方撤回")
    REPLACED = "Replaced", _("已被替换")
    MODIFIED = "Modified", _("已修改")
    UNDER_TERMINATION = "UnderTermination", _("终止中")
    TERMINATED = "Terminated", _("已终止")


class ContractSortOptions(models.TextChoices):
    """合同提醒排序字段"""
    ID = "id", _("ID")
    CONTRACT_NUMBER = "contract_number", _("合同编号")
    CONTRACT_VERSION = "contract_version", _("版本号")
    CREATED_AT = "created_at", _("创建时间")
    LAST_UPDATED_AT = "last_updated_at", _("最后更新时间")
    LAST_EMAIL_REMINDER_SENT = "last_email_reminder_sent", _("最后提醒邮件发送时间")


class SortDirection(models.TextChoices):
    """排序方向"""
    ASC = "asc", _("升序")
    DESC = "desc", _("降序")


class AuditActionType(models.TextChoices):
    """审计操作类型"""
    CONTRACT_CONFIRM_APPROVAL = "ContractConfirmApproval", _("合同确认批准")


class AuditSeverity(models.TextChoices):
    """审计级别"""
    INFORMATION = "Information", _("信息")
    WARNING = "Warning", _("警告")
    ERROR = "Error", _("错误")
