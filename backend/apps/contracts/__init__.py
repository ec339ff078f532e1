"""
Contracts 合同模块
"""
