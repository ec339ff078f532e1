"""
统一异常处理模块
定义业务异常和全局异常处理器
"""
from typing import Any, Dict, Optional
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError
from django.http import Http404
from django.core.exceptions import ObjectDoesNotExist
import logging

logger = logging.getLogger("api")


class BusinessException(Exception):
    """
    业务异常基类

    所有自定义业务异常都应该继承此类

    Attributes:
        message: 错误消息（用户可读）
        code: 错误码（用于调用方判断）
        errors: 结构化错误详情（字段级别的错误）
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        errors: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.errors = errors or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r}, errors={self.errors!r})"

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为字典（用于 API 响应）

        Returns:
            包含 error、code、errors 字段的字典
        """
        return {
            "error": self.message,
            "code": self.code,
            "errors": self.errors
        }


class ValidationException(BusinessException):
    """
    验证异常

    使用场景：
    - 查询参数超出允许范围
    - 请求体字段不一致

    HTTP 状态码：400
    """

    def __init__(
        self,
        message: str = "数据验证失败",
        code: Optional[str] = None,
        errors: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=code or "VALIDATION_ERROR",
            errors=errors
        )


class NotFoundError(BusinessException):
    """
    资源不存在异常

    使用场景：
    - 合同 ID 不存在
    - 合同编号与版本号组合不存在

    HTTP 状态码：404
    """

    def __init__(
        self,
        message: str = "资源不存在",
        code: Optional[str] = None,
        errors: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=code or "NOT_FOUND",
            errors=errors
        )


class PreconditionFailedError(BusinessException):
    """
    前置条件不满足异常

    使用场景：
    - 条件更新时合同当前状态与期望状态不一致
    - 并发请求已先一步修改了合同状态

    HTTP 状态码：412
    """

    def __init__(
        self,
        message: str = "前置条件不满足",
        code: Optional[str] = None,
        errors: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=code or "PRECONDITION_FAILED",
            errors=errors
        )


class ExternalServiceError(BusinessException):
    """
    外部服务错误

    使用场景：
    - 审计服务调用失败
    - 外部服务不可用

    HTTP 状态码：502
    """

    def __init__(
        self,
        message: str = "外部服务错误",
        code: Optional[str] = None,
        errors: Optional[Dict[str, Any]] = None,
        service_name: Optional[str] = None
    ):
        if service_name:
            errors = errors or {}
            errors["service"] = service_name
        super().__init__(
            message=message,
            code=code or "EXTERNAL_SERVICE_ERROR",
            errors=errors
        )
        self.service_name = service_name


class ContractExceptions:
    """合同相关异常工厂"""

    @staticmethod
    def contract_not_found(contract_id: int) -> NotFoundError:
        return NotFoundError(
            message=f"合同 {contract_id} 不存在",
            code="CONTRACT_NOT_FOUND",
            errors={"id": contract_id}
        )

    @staticmethod
    def contract_version_not_found(contract_number: str, version: int) -> NotFoundError:
        return NotFoundError(
            message=f"合同 {contract_number} 版本 {version} 不存在",
            code="CONTRACT_NOT_FOUND",
            errors={"contract_number": contract_number, "contract_version": version}
        )

    @staticmethod
    def invalid_status(contract_id: int, current_status: str, required_status: str) -> PreconditionFailedError:
        return PreconditionFailedError(
            message=f"合同 {contract_id} 当前状态为 {current_status}，要求状态为 {required_status}",
            code="CONTRACT_STATUS_PRECONDITION_FAILED",
            errors={
                "id": contract_id,
                "current_status": current_status,
                "required_status": required_status,
            }
        )


def register_exception_handlers(api: NinjaAPI) -> None:
    """注册全局异常处理器"""

    # 1. 验证异常 - 400
    @api.exception_handler(ValidationException)
    def handle_validation_exception(request, exc: ValidationException):
        logger.info(
            f"验证失败: {exc.message}",
            extra={
                "code": exc.code,
                "errors": exc.errors,
                "path": request.path
            }
        )
        return api.create_response(request, exc.to_dict(), status=400)

    # 2. 资源不存在 - 404
    @api.exception_handler(NotFoundError)
    def handle_not_found_exception(request, exc: NotFoundError):
        logger.info(
            f"资源不存在: {exc.message}",
            extra={
                "code": exc.code,
                "path": request.path
            }
        )
        return api.create_response(request, exc.to_dict(), status=404)

    # 3. 前置条件不满足 - 412
    @api.exception_handler(PreconditionFailedError)
    def handle_precondition_failed(request, exc: PreconditionFailedError):
        logger.warning(
            f"前置条件不满足: {exc.message}",
            extra={
                "code": exc.code,
                "errors": exc.errors,
                "path": request.path
            }
        )
        return api.create_response(request, exc.to_dict(), status=412)

    # 4. 外部服务错误 - 502
    @api.exception_handler(ExternalServiceError)
    def handle_external_service_error(request, exc: ExternalServiceError):
        logger.error(
            f"外部服务错误: {exc.message}",
            extra={
                "code": exc.code,
                "errors": exc.errors,
                "path": request.path
            }
        )
        return api.create_response(request, exc.to_dict(), status=502)

    # 5. 通用业务异常 - 400
    @api.exception_handler(BusinessException)
    def handle_business_exception(request, exc: BusinessException):
        logger.warning(
            f"业务异常: {exc.message}",
            extra={
                "code": exc.code,
                "errors": exc.errors,
                "path": request.path
            }
        )
        return api.create_response(request, exc.to_dict(), status=400)

    # Django 内置异常处理
    @api.exception_handler(Http404)
    def handle_404(request, exc: Http404):
        logger.info(f"404 Not Found: {request.path}")
        return api.create_response(
            request,
            {"error": "资源不存在", "code": "NOT_FOUND", "errors": {}},
            status=404
        )

    @api.exception_handler(ObjectDoesNotExist)
    def handle_object_not_exist(request, exc: ObjectDoesNotExist):
        logger.info(f"Object not found: {request.path}")
        return api.create_response(
            request,
            {"error": "资源不存在", "code": "NOT_FOUND", "errors": {}},
            status=404
        )

    @api.exception_handler(ValidationError)
    def handle_ninja_validation_error(request, exc: ValidationError):
        logger.info(f"Validation error: {request.path}", extra={"errors": exc.errors})
        return api.create_response(
            request,
            {"error": "数据校验失败", "code": "VALIDATION_ERROR", "errors": exc.errors},
            status=422
        )

    @api.exception_handler(HttpError)
    def handle_http_error(request, exc: HttpError):
        logger.warning(f"HTTP Error {exc.status_code}: {request.path}")
        return api.create_response(
            request,
            {"error": str(exc.message), "code": "HTTP_ERROR", "errors": {}},
            status=exc.status_code
        )

    # 6. 未预期的异常 - 500
    @api.exception_handler(Exception)
    def handle_unexpected_exception(request, exc: Exception):
        logger.error(
            f"未预期的异常: {exc}",
            exc_info=True,
            extra={
                "path": request.path,
                "method": request.method,
            }
        )
        # 生产环境不暴露详细错误信息
        from django.conf import settings
        message = str(exc) if settings.DEBUG else "系统错误，请稍后重试"
        return api.create_response(
            request,
            {
                "error": message,
                "code": "INTERNAL_ERROR",
                "errors": {}
            },
            status=500
        )
