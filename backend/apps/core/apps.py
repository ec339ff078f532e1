"""
Core 应用配置

负责核心服务的启动检查
"""

import logging
from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Core 应用配置类"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = '核心系统'

    def ready(self):
        """应用就绪时检查关键配置"""
        audit_config = getattr(settings, 'AUDIT', {})
        if not audit_config.get('BASE_URL'):
            logger.warning("未配置 AUDIT['BASE_URL']，审计服务将使用默认地址")
        if not getattr(settings, 'API_BASE_URL', None):
            logger.warning("未配置 API_BASE_URL，分页链接将使用默认地址")
