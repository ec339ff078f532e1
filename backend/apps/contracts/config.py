"""
合同提醒配置

从 Django settings.CONTRACTS 统一读取合同提醒查询的默认参数。
"""
from django.conf import settings

from apps.core.enums import ContractSortOptions, SortDirection


class ContractReminderConfig:
    """合同提醒配置类"""

    # 默认值（当 settings 中未配置时使用）
    DEFAULT_REMINDER_INTERVAL = 14
    DEFAULT_PAGE_NUMBER = 1
    DEFAULT_PAGE_SIZE = 100
    DEFAULT_MAX_PAGE_SIZE = 500
    DEFAULT_SORT = ContractSortOptions.LAST_EMAIL_REMINDER_SENT
    DEFAULT_ORDER = SortDirection.ASC

    @classmethod
    def _get(cls, key: str, default):
        contracts_config = getattr(settings, 'CONTRACTS', {})
        return contracts_config.get(key, default)

    @classmethod
    def get_reminder_interval(cls) -> int:
        """默认提醒间隔（天）"""
        return int(cls._get('REMINDER_INTERVAL', cls.DEFAULT_REMINDER_INTERVAL))

    @classmethod
    def get_page_size(cls) -> int:
        """默认每页条数"""
        return int(cls._get('PAGE_SIZE', cls.DEFAULT_PAGE_SIZE))

    @classmethod
    def get_max_page_size(cls) -> int:
        """每页条数上限"""
        return int(cls._get('MAX_PAGE_SIZE', cls.DEFAULT_MAX_PAGE_SIZE))
