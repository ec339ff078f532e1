"""
API 主入口
统一注册所有路由和异常处理
支持 API 版本控制
"""
from django.conf import settings
from ninja import NinjaAPI

from apps.core.exceptions import register_exception_handlers
from apps.core.health import HealthChecker

# API 版本号
API_VERSION = getattr(settings, "API_VERSION", "1.0.0")

# ============================================================
# API v1 实例
# ============================================================
api_v1 = NinjaAPI(
    title="合同数据服务 API",
    version=API_VERSION,
    description="合同查询、合同提醒与确认批准",
    urls_namespace="api_v1",
)

# 注册全局异常处理器
register_exception_handlers(api_v1)

# 注册各模块路由（不指定顶层 tags，使用子路由的 tags）
from apps.contracts.api import router as contracts_router

api_v1.add_router("/contracts", contracts_router)


# ============================================================
# 系统端点
# ============================================================

@api_v1.get("/", tags=["系统"])
def api_root(request):
    """API 根路径，返回基本信息"""
    return {
        "message": "合同数据服务 API",
        "version": API_VERSION,
        "docs": "/api/v1/docs",
    }


@api_v1.get("/health", tags=["系统"])
def health_check(request):
    """
    健康检查端点
    返回系统整体健康状态
    """
    return HealthChecker.get_system_health().to_dict()


@api_v1.get("/health/live", tags=["系统"])
def liveness_probe(request):
    """存活探针 (Kubernetes liveness probe)"""
    return HealthChecker.liveness_check()


@api_v1.get("/health/ready", tags=["系统"])
def readiness_probe(request):
    """就绪探针 (Kubernetes readiness probe)"""
    return HealthChecker.readiness_check()


# 兼容性别名
api = api_v1
