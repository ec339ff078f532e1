"""
Core 公共服务模块
"""

from .audit_config import AuditConfig, get_app_name
from .audit_service import AuditService
from .uri_service import UriService

__all__ = [
    'AuditConfig',
    'get_app_name',
    'AuditService',
    'UriService',
]
