from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.enums import ContractStatus


class Contract(models.Model):
    contract_number = models.CharField(max_length=20, verbose_name=_("合同编号"))
    contract_version = models.IntegerField(default=1, verbose_name=_("版本号"))
    ukprn = models.BigIntegerField(verbose_name=_("所属机构编号"))
    title = models.CharField(max_length=500, blank=True, default="", verbose_name=_("合同标题"))
    status = models.CharField(
        max_length=32,
        choices=ContractStatus.choices,
        default=ContractStatus.PUBLISHED_TO_PROVIDER,
        verbose_name=_("合同状态"),
    )
    funding_type = models.CharField(max_length=32, blank=True, default="", verbose_name=_("资助类型"))
    year = models.CharField(max_length=10, blank=True, default="", verbose_name=_("合同年度"))
    start_date = models.DateField(blank=True, null=True, verbose_name=_("开始日期"))
    end_date = models.DateField(blank=True, null=True, verbose_name=_("结束日期"))
    signed_on = models.DateTimeField(blank=True, null=True, verbose_name=_("签署时间"))
    created_at = models.DateTimeField(default=timezone.now, verbose_name=_("创建时间"))
    last_updated_at = models.DateTimeField(default=timezone.now, verbose_name=_("最后更新时间"))
    last_email_reminder_sent = models.DateTimeField(blank=True, null=True, verbose_name=_("最后提醒邮件发送时间"))

    class Meta:
        verbose_name = _("合同")
        verbose_name_plural = _("合同")
        constraints = [
            models.UniqueConstraint(
                fields=["contract_number", "contract_version"],
                name="uniq_contract_number_version",
            ),
        ]
        indexes = [
            models.Index(fields=["contract_number"], name="contract_number_idx"),
            models.Index(fields=["status"], name="contract_status_idx"),
            models.Index(fields=["ukprn"], name="contract_ukprn_idx"),
            models.Index(fields=["last_email_reminder_sent"], name="contract_reminder_sent_idx"),
        ]

    def __str__(self):
        return f"{self.contract_number} v{self.contract_version}"
