"""
URI 构建服务
根据配置的 API 根地址生成分页链接等绝对 URI
"""
from typing import Optional
from urllib.parse import urlsplit

from django.conf import settings


class UriService:
    """URI 构建服务"""

    DEFAULT_BASE_URL = "http://localhost:8000"

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url or getattr(settings, "API_BASE_URL", self.DEFAULT_BASE_URL)

    def get_uri(self, path: str) -> str:
        """
        将相对路径转换为绝对 URI

        Args:
            path: 相对路径，可带查询串；已经是绝对地址时原样返回

        Returns:
            绝对 URI 字符串
        """
        if urlsplit(path).scheme:
            return path
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")
