"""
跨模块接口定义
通过接口解耦服务层与仓储、审计、URI 构建等协作者之间的直接依赖
"""
from datetime import datetime
from typing import Protocol, Optional, List, Any, Dict, Generic, TypeVar
from dataclasses import dataclass, field

from .enums import AuditActionType, AuditSeverity, ContractSortOptions, SortDirection

T = TypeVar("T")


# ============================================================
# 数据传输对象 (DTO)
# 用于跨模块传递数据，避免直接依赖其他模块的 Model
# ============================================================

@dataclass
class PagedResult(Generic[T]):
    """
    分页查询结果DTO

    由仓储层生成，服务层据此构建分页元数据
    """
    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page_size: int = 0
    current_page: int = 1
    total_pages: int = 0
    has_next_page: bool = False
    has_previous_page: bool = False

    @classmethod
    def create(cls, items: List[T], total_count: int, page_number: int, page_size: int) -> "PagedResult[T]":
        """
        根据总数和页码计算分页信息

        Args:
            items: 当前页数据
            total_count: 总记录数
            page_number: 当前页码（从 1 开始）
            page_size: 每页条数

        Returns:
            PagedResult 实例
        """
        total_pages = (total_count + page_size - 1) // page_size if page_size > 0 else 0
        return cls(
            items=items,
            total_count=total_count,
            page_size=page_size,
            current_page=page_number,
            total_pages=total_pages,
            has_next_page=page_number < total_pages,
            has_previous_page=page_number > 1,
        )


@dataclass
class UpdatedContractStatusResponse:
    """
    合同状态条件更新结果DTO

    status 为更新前状态，new_status 为更新后状态
    """
    id: int
    contract_number: str
    contract_version: int
    ukprn: int
    status: str
    new_status: str
    action: str = "updated"

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "id": self.id,
            "contract_number": self.contract_number,
            "contract_version": self.contract_version,
            "ukprn": self.ukprn,
            "status": self.status,
            "new_status": self.new_status,
            "action": self.action,
        }


@dataclass
class Audit:
    """
    审计记录DTO

    提交给外部审计服务的业务事件
    """
    action: AuditActionType
    severity: AuditSeverity
    ukprn: Optional[int]
    message: str
    user: str

    def to_dict(self) -> Dict[str, Any]:
        """转换为审计 API 请求体"""
        return {
            "action": str(self.action),
            "severity": str(self.severity),
            "ukprn": self.ukprn,
            "message": self.message,
            "user": self.user,
        }


# ============================================================
# 服务接口
# ============================================================

class IContractRepository(Protocol):
    """
    合同仓储接口

    定义合同持久化操作，供合同服务使用
    """

    async def get_by_id(self, contract_id: int) -> Any:
        """
        按 ID 获取合同

        Raises:
            NotFoundError: 合同不存在
        """
        ...

    async def get_by_contract_number(self, contract_number: str) -> List[Any]:
        """按合同编号获取所有版本（按版本号升序）"""
        ...

    async def get_by_contract_number_and_version(self, contract_number: str, version: int) -> Any:
        """
        按合同编号和版本号获取合同

        Raises:
            NotFoundError: 合同不存在
        """
        ...

    async def get_contract_reminders(
        self,
        cutoff: datetime,
        page_number: int,
        page_size: int,
        sort: ContractSortOptions,
        order: SortDirection,
    ) -> PagedResult:
        """分页获取提醒日期不晚于截止时间的合同"""
        ...

    async def update_last_email_reminder_sent(self, contract_id: int) -> Any:
        """
        更新最后提醒邮件发送时间和最后更新时间

        Raises:
            NotFoundError: 合同不存在
        """
        ...

    async def update_contract_status(
        self,
        contract_id: int,
        required_status: str,
        new_status: str,
    ) -> UpdatedContractStatusResponse:
        """
        当前状态等于 required_status 时原子地更新为 new_status

        Raises:
            NotFoundError: 合同不存在
            PreconditionFailedError: 当前状态与要求状态不一致
        """
        ...


class IUriService(Protocol):
    """URI 构建服务接口"""

    def get_uri(self, path: str) -> str:
        """将相对路径（可带查询串）转换为绝对 URI"""
        ...


class IAuditService(Protocol):
    """
    审计服务接口

    提交失败时抛出 ExternalServiceError
    """

    async def audit(self, audit: Audit) -> None:
        ...


# ============================================================
# 服务定位器
# ============================================================

class ServiceLocator:
    """
    服务定位器
    用于获取跨模块服务实例，实现依赖注入
    """

    _services: Dict[str, Any] = {}

    @classmethod
    def register(cls, name: str, service: Any) -> None:
        """注册服务"""
        cls._services[name] = service

    @classmethod
    def get(cls, name: str) -> Optional[Any]:
        """获取服务"""
        return cls._services.get(name)

    @classmethod
    def clear(cls, name: Optional[str] = None) -> None:
        """
        清除服务（用于测试）

        Args:
            name: 服务名称，如果为 None 则清除所有服务
        """
        if name is not None:
            cls._services.pop(name, None)
        else:
            cls._services.clear()

    @classmethod
    def get_uri_service(cls) -> IUriService:
        """获取 URI 构建服务"""
        service = cls.get("uri_service")
        if service is None:
            # 延迟导入，避免循环依赖
            from apps.core.services.uri_service import UriService
            service = UriService()
            cls.register("uri_service", service)
        return service

    @classmethod
    def get_audit_service(cls) -> IAuditService:
        """获取审计服务"""
        service = cls.get("audit_service")
        if service is None:
            from apps.core.services.audit_service import AuditService
            service = AuditService()
            cls.register("audit_service", service)
        return service

    @classmethod
    def get_contract_repository(cls) -> IContractRepository:
        """获取合同仓储"""
        service = cls.get("contract_repository")
        if service is None:
            from apps.contracts.repositories import ContractRepository
            service = ContractRepository()
            cls.register("contract_repository", service)
        return service
