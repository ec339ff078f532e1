"""
合同 API 层
只做请求/响应处理，业务逻辑在 Service 层
"""
from typing import List
from ninja import Router
import logging

from ..schemas import ContractOut, UpdateConfirmApprovalIn, UpdatedContractStatusOut
from ..services.contract_service import ContractService

logger = logging.getLogger("apps.contracts.api")
router = Router()


def _get_contract_service() -> ContractService:
    """
    工厂函数：创建 ContractService 实例并注入依赖

    仓储、URI 构建服务和审计服务通过 ServiceLocator 获取

    Returns:
        配置好依赖的 ContractService 实例
    """
    from apps.core.interfaces import ServiceLocator

    return ContractService(
        repository=ServiceLocator.get_contract_repository(),
        uri_service=ServiceLocator.get_uri_service(),
        audit_service=ServiceLocator.get_audit_service(),
    )


@router.get("/contract/{contract_id}", response=ContractOut)
async def get_contract(request, contract_id: int):
    """获取合同详情"""
    service = _get_contract_service()
    return await service.get_by_id(contract_id)


@router.get("/contract", response=ContractOut)
async def get_contract_by_number_and_version(request, contract_number: str, version: int):
    """按合同编号和版本号获取合同"""
    service = _get_contract_service()
    return await service.get_by_contract_number_and_version(contract_number, version)


@router.get("/contracts", response=List[ContractOut])
async def list_contracts_by_number(request, contract_number: str):
    """获取合同编号下的所有版本"""
    service = _get_contract_service()
    return await service.get_by_contract_number(contract_number)


@router.patch("/confirm-approval", response=UpdatedContractStatusOut)
async def confirm_approval(request, payload: UpdateConfirmApprovalIn):
    """
    确认批准合同

    合同状态必须为 ApprovedWaitingConfirmation，否则返回 412
    """
    service = _get_contract_service()
    result = await service.confirm_approval(payload.id, payload.contract_number)
    return result.to_dict()
