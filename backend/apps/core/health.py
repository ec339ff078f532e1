"""
健康检查模块

组件：
- database: 数据库连接
- contracts: 合同表可查询（迁移已执行）
- audit: 审计服务配置（只检查配置，不发起网络请求）
"""
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from django.db import DatabaseError, connection

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"
DEGRADED = "degraded"


@dataclass
class ComponentHealth:
    name: str
    status: str
    latency_ms: Optional[float] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "latency_ms": round(self.latency_ms, 2) if self.latency_ms is not None else None,
            "message": self.message,
        }


@dataclass
class SystemHealth:
    status: str
    version: str
    uptime_seconds: float
    components: List[ComponentHealth] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "version": self.version,
            "uptime_seconds": round(self.uptime_seconds, 2),
            "components": [c.to_dict() for c in self.components],
        }


_started_at = time.monotonic()


def _timed(name: str, probe: Callable[[], str]) -> ComponentHealth:
    """执行探测函数并记录耗时，数据库异常视为不健康"""
    start = time.monotonic()
    try:
        message = probe()
    except DatabaseError as e:
        return ComponentHealth(name=name, status=UNHEALTHY, message=f"{name} error: {e}")
    return ComponentHealth(
        name=name,
        status=HEALTHY,
        latency_ms=(time.monotonic() - start) * 1000,
        message=message,
    )


class HealthChecker:
    """健康检查器"""

    @staticmethod
    def check_database() -> ComponentHealth:
        def probe():
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
            return "Database connection OK"

        return _timed("database", probe)

    @staticmethod
    def check_contracts_table() -> ComponentHealth:
        """合同表可查询即视为健康"""
        from apps.contracts.models import Contract

        def probe():
            Contract.objects.only("id").first()
            return "Contracts table OK"

        return _timed("contracts", probe)

    @staticmethod
    def check_audit_config() -> ComponentHealth:
        from apps.core.services.audit_config import AuditConfig

        if not AuditConfig.is_enabled():
            return ComponentHealth(name="audit", status=DEGRADED, message="Audit submission disabled")
        return ComponentHealth(name="audit", status=HEALTHY, message=AuditConfig.get_base_url())

    @classmethod
    def get_system_health(cls) -> SystemHealth:
        """汇总各组件状态：任一不健康即不健康，否则任一降级即降级"""
        from django.conf import settings

        components = [cls.check_database(), cls.check_contracts_table(), cls.check_audit_config()]
        statuses = {c.status for c in components}
        if UNHEALTHY in statuses:
            overall = UNHEALTHY
        elif DEGRADED in statuses:
            overall = DEGRADED
        else:
            overall = HEALTHY

        return SystemHealth(
            status=overall,
            version=getattr(settings, "API_VERSION", "1.0.0"),
            uptime_seconds=time.monotonic() - _started_at,
            components=components,
        )

    @classmethod
    def liveness_check(cls) -> Dict[str, str]:
        """存活探针：进程在运行即可"""
        return {"status": "ok"}

    @classmethod
    def readiness_check(cls) -> Dict[str, Any]:
        """就绪探针：数据库和合同表都可用"""
        for component in (cls.check_database(), cls.check_contracts_table()):
            if component.status == UNHEALTHY:
                return {"status": "not_ready", "reason": component.message}
        return {"status": "ready"}
