"""
审计服务 API 客户端

将业务事件（如合同确认批准）提交到外部审计服务。
使用 httpx 异步客户端；请求失败统一转换为 ExternalServiceError，
是否吞掉异常由调用方决定。
"""
import logging
from typing import Optional

import httpx

from apps.core.exceptions import ExternalServiceError
from apps.core.interfaces import Audit
from .audit_config import AuditConfig

logger = logging.getLogger("apps.core")


class AuditService:
    """
    审计服务客户端

    每次提交创建独立的 httpx.AsyncClient，不跨事件循环复用连接，
    因此单个实例可以在 ServiceLocator 中共享。

    Example:
        service = AuditService()
        await service.audit(Audit(...))

        # 测试中注入 MockTransport
        service = AuditService(transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or AuditConfig.get_base_url()
        self.endpoint = endpoint or AuditConfig.get_endpoint()
        self.timeout = timeout if timeout is not None else AuditConfig.get_timeout()
        self._transport = transport

    @property
    def url(self) -> str:
        """审计记录提交地址"""
        return self.base_url.rstrip("/") + "/" + self.endpoint.lstrip("/")

    async def audit(self, audit: Audit) -> None:
        """
        提交审计记录

        Args:
            audit: 审计记录

        Raises:
            ExternalServiceError: 网络错误或审计服务返回非 2xx 状态码
        """
        if not AuditConfig.is_enabled():
            logger.info(
                f"[AUDIT] 审计提交已禁用，仅记录日志: {audit.message}",
                extra={"action": "audit_disabled", "audit_action": str(audit.action)}
            )
            return

        payload = audit.to_dict()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(
                message=f"审计服务返回错误 ({e.response.status_code}): {e.response.text[:200]}",
                code="AUDIT_API_ERROR",
                errors={"status_code": e.response.status_code},
                service_name="audit",
            ) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(
                message=f"无法连接到审计服务 ({self.url}): {e}",
                code="AUDIT_NETWORK_ERROR",
                service_name="audit",
            ) from e

        logger.debug(
            "审计记录已提交",
            extra={
                "action": "audit_submitted",
                "audit_action": str(audit.action),
                "ukprn": audit.ukprn,
                "status_code": response.status_code,
            }
        )
