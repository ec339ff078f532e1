"""
Contracts Repositories Module
合同数据访问层
"""
from .contract_repository import ContractRepository

__all__ = [
    "ContractRepository",
]
