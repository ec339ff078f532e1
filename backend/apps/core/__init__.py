"""
Core 核心模块
"""
