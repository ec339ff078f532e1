"""
AuditService 单元测试

使用 httpx.MockTransport 模拟审计服务，不发起真实网络请求
"""
import json

import httpx
import pytest
from asgiref.sync import async_to_sync

from apps.core.enums import AuditActionType, AuditSeverity
from apps.core.exceptions import ExternalServiceError
from apps.core.interfaces import Audit
from apps.core.services.audit_service import AuditService


def _audit() -> Audit:
    return Audit(
        action=AuditActionType.CONTRACT_CONFIRM_APPROVAL,
        severity=AuditSeverity.INFORMATION,
        ukprn=10012345,
        message="Contract [CON-1] has been Approved.",
        user="[Contracts.Data.Api]",
    )


def _service(handler) -> AuditService:
    return AuditService(
        base_url="https://audit.example.com/",
        endpoint="/api/audit",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


class TestAuditService:

    def test_url_joins_base_and_endpoint(self):
        service = AuditService(base_url="https://audit.example.com/", endpoint="/api/audit")

        assert service.url == "https://audit.example.com/api/audit"

    def test_posts_audit_payload(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201)

        async_to_sync(_service(handler).audit)(_audit())

        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://audit.example.com/api/audit"
        assert json.loads(request.content) == {
            "action": "ContractConfirmApproval",
            "severity": "Information",
            "ukprn": 10012345,
            "message": "Contract [CON-1] has been Approved.",
            "user": "[Contracts.Data.Api]",
        }

    def test_error_status_raises_external_service_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="audit store down")

        with pytest.raises(ExternalServiceError) as exc_info:
            async_to_sync(_service(handler).audit)(_audit())

        assert exc_info.value.code == "AUDIT_API_ERROR"
        assert exc_info.value.errors["status_code"] == 500
        assert exc_info.value.errors["service"] == "audit"

    def test_network_error_raises_external_service_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ExternalServiceError) as exc_info:
            async_to_sync(_service(handler).audit)(_audit())

        assert exc_info.value.code == "AUDIT_NETWORK_ERROR"
        assert exc_info.value.service_name == "audit"

    def test_disabled_audit_skips_request(self, settings):
        settings.AUDIT = {**settings.AUDIT, "ENABLED": False}
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        async_to_sync(_service(handler).audit)(_audit())

        assert requests == []

    def test_defaults_from_settings(self, settings):
        settings.AUDIT = {"BASE_URL": "http://audit.local:9000", "ENDPOINT": "/v2/audit", "TIMEOUT": 3}

        service = AuditService()

        assert service.url == "http://audit.local:9000/v2/audit"
        assert service.timeout == 3.0
