"""
Contracts Services Module
合同业务逻辑服务层
"""
from .contract_service import ContractService, get_reminder_cutoff, set_page_value

__all__ = [
    "ContractService",
    "get_reminder_cutoff",
    "set_page_value",
]
