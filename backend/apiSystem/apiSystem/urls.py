"""
URL configuration for apiSystem project.

支持 API 版本控制：
- /api/v1/ - API v1 版本
- /api/ - 重定向到 /api/v1/
"""
from django.urls import path
from django.http import HttpResponseRedirect

from .api import api_v1


def api_root_redirect(request):
    """重定向到 API 文档"""
    return HttpResponseRedirect("/api/v1/docs")


def api_redirect(request):
    """将 /api/ 重定向到 /api/v1/"""
    new_path = request.path.replace("/api/", "/api/v1/", 1)
    if request.META.get("QUERY_STRING"):
        new_path += "?" + request.META["QUERY_STRING"]
    return HttpResponseRedirect(new_path)


urlpatterns = [
    # API v1 版本
    path("api/v1/", api_v1.urls),

    # /api/ 重定向到 /api/v1/
    path("api/", api_redirect),

    # 根路径重定向到 API 文档
    path("", api_root_redirect),
]
