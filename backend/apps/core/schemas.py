"""
Schema 基类和 Mixin
提供通用的分页元数据和字段解析方法，减少重复代码
"""
from datetime import datetime, timezone as dt_timezone
from typing import Any, Optional

from ninja import Schema


class TimestampMixin:
    """
    时间戳字段解析 Mixin
    为映射函数提供统一的时间字段处理
    """

    @staticmethod
    def _resolve_datetime(value: Any) -> Optional[datetime]:
        """
        统一处理 datetime 字段，转换为 UTC 时间

        Args:
            value: datetime 对象或 None

        Returns:
            UTC 时区的 datetime 或 None；naive datetime 视为 UTC
        """
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=dt_timezone.utc)
        return value.astimezone(dt_timezone.utc)


class PagingMetadata(Schema):
    """
    分页元数据

    next_page_url / previous_page_url 在没有下一页/上一页时为空字符串
    """
    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
    next_page_url: str = ""
    previous_page_url: str = ""
