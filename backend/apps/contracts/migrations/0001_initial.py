import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Contract",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("contract_number", models.CharField(max_length=20, verbose_name="合同编号")),
                ("contract_version", models.IntegerField(default=1, verbose_name="版本号")),
                ("ukprn", models.BigIntegerField(verbose_name="所属机构编号")),
                ("title", models.CharField(blank=True, default="", max_length=500, verbose_name="合同标题")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PublishedToProvider", "已发布给供应方"),
                            ("WithdrawnByAgency", "机构撤回"),
                            ("Approved", "已批准"),
                            ("ApprovedWaitingConfirmation", "已批准待确认"),
                            ("WithdrawnByProvider", "供应方撤回"),
                            ("Replaced", "已被替换"),
                            ("Modified", "已修改"),
                            ("UnderTermination", "终止中"),
                            ("Terminated", "已终止"),
                        ],
                        default="PublishedToProvider",
                        max_length=32,
                        verbose_name="合同状态",
                    ),
                ),
                ("funding_type", models.CharField(blank=True, default="", max_length=32, verbose_name="资助类型")),
                ("year", models.CharField(blank=True, default="", max_length=10, verbose_name="合同年度")),
                ("start_date", models.DateField(blank=True, null=True, verbose_name="开始日期")),
                ("end_date", models.DateField(blank=True, null=True, verbose_name="结束日期")),
                ("signed_on", models.DateTimeField(blank=True, null=True, verbose_name="签署时间")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, verbose_name="创建时间")),
                ("last_updated_at", models.DateTimeField(default=django.utils.timezone.now, verbose_name="最后更新时间")),
                (
                    "last_email_reminder_sent",
                    models.DateTimeField(blank=True, null=True, verbose_name="最后提醒邮件发送时间"),
                ),
            ],
            options={
                "verbose_name": "合同",
                "verbose_name_plural": "合同",
                "indexes": [
                    models.Index(fields=["contract_number"], name="contract_number_idx"),
                    models.Index(fields=["status"], name="contract_status_idx"),
                    models.Index(fields=["ukprn"], name="contract_ukprn_idx"),
                    models.Index(fields=["last_email_reminder_sent"], name="contract_reminder_sent_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("contract_number", "contract_version"),
                        name="uniq_contract_number_version",
                    )
                ],
            },
        ),
    ]
