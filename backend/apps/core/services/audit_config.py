"""
审计服务配置

从 Django settings 统一读取审计服务相关配置。
"""
from django.conf import settings


class AuditConfig:
    """审计服务配置类"""

    # 默认值（当 settings 中未配置时使用）
    DEFAULT_BASE_URL = "http://localhost:5001"
    DEFAULT_ENDPOINT = "/api/audit"
    DEFAULT_TIMEOUT = 10.0
    DEFAULT_APP_NAME = "Contracts.Data.Api"

    @classmethod
    def _get(cls, key: str, default):
        audit_config = getattr(settings, 'AUDIT', {})
        return audit_config.get(key, default)

    @classmethod
    def get_base_url(cls) -> str:
        """
        获取审计服务地址

        优先从 Django settings.AUDIT['BASE_URL'] 读取
        """
        return cls._get('BASE_URL', cls.DEFAULT_BASE_URL)

    @classmethod
    def get_endpoint(cls) -> str:
        """获取审计记录提交路径"""
        return cls._get('ENDPOINT', cls.DEFAULT_ENDPOINT)

    @classmethod
    def get_timeout(cls) -> float:
        """获取请求超时时间（秒）"""
        return float(cls._get('TIMEOUT', cls.DEFAULT_TIMEOUT))

    @classmethod
    def is_enabled(cls) -> bool:
        """审计提交是否启用，禁用时只写日志"""
        return bool(cls._get('ENABLED', True))

    @classmethod
    def get_app_name(cls) -> str:
        """获取写入审计记录 user 字段的应用名"""
        return getattr(settings, 'APP_NAME', cls.DEFAULT_APP_NAME)


# 便捷函数
def get_app_name() -> str:
    """获取应用名"""
    return AuditConfig.get_app_name()
