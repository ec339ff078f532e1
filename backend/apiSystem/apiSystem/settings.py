"""
Django settings for apiSystem project.

所有可变配置均从环境变量读取，默认值适用于本地开发。
"""
import os
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# 将 backend 目录加入路径，保证 apps.* 可导入
_BACKEND_DIR = str(BASE_DIR.parent)
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from apps.core.logging import get_logging_config  # noqa: E402


def _env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in {"1", "true", "yes"}


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-change-me")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",") if h]

APP_NAME = os.environ.get("APP_NAME", "Contracts.Data.Api")
API_VERSION = os.environ.get("API_VERSION", "1.0.0")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "ninja",
    "apps.core",
    "apps.contracts",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "apiSystem.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

WSGI_APPLICATION = "apiSystem.wsgi.application"
ASGI_APPLICATION = "apiSystem.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "zh-hans"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

# ============================================================
# 业务配置
# ============================================================

# 分页链接使用的 API 根地址
API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:8000")

AUDIT = {
    "BASE_URL": os.environ.get("AUDIT_API_BASE_URL", "http://localhost:5001"),
    "ENDPOINT": os.environ.get("AUDIT_API_ENDPOINT", "/api/audit"),
    "TIMEOUT": float(os.environ.get("AUDIT_API_TIMEOUT", "10")),
    "ENABLED": _env_bool("AUDIT_ENABLED", True),
}

CONTRACTS = {
    "REMINDER_INTERVAL": int(os.environ.get("CONTRACT_REMINDER_INTERVAL", "14")),
    "PAGE_SIZE": int(os.environ.get("CONTRACT_REMINDER_PAGE_SIZE", "100")),
    "MAX_PAGE_SIZE": int(os.environ.get("CONTRACT_REMINDER_MAX_PAGE_SIZE", "500")),
}

LOGGING = get_logging_config(BASE_DIR, DEBUG)
