"""
Contracts App API 模块
"""
from ninja import Router

from .contract_api import router as contract_router
from .contractreminder_api import router as contractreminder_router

# 创建模块路由器
router = Router()

# 添加子路由，每个子模块有独立的 tag
router.add_router("", contract_router, tags=["合同管理"])
router.add_router("", contractreminder_router, tags=["合同提醒"])

__all__ = ["router"]
