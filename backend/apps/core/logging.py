"""
Django 日志配置模块
提供结构化日志配置

Docker 环境支持：
- 自动检测 Docker 环境
- 优先输出到 stdout/stderr（Docker 日志收集）
- 同时保留文件日志（持久化到 Volume）
"""
import json
import logging
import os
import sys
import traceback
from datetime import datetime, timezone


def _is_docker_environment() -> bool:
    """
    检测是否在 Docker 环境中运行

    检测方法：
    1. 检查 /.dockerenv 文件
    2. 检查环境变量 DOCKER_CONTAINER
    """
    if os.path.exists('/.dockerenv'):
        return True
    return os.environ.get('DOCKER_CONTAINER') == 'true'


def get_logging_config(base_dir, debug: bool = True) -> dict:
    """
    获取日志配置

    Docker 环境特性：
    - 控制台使用 JSON 格式便于日志聚合
    - 同时保留文件日志到 Volume

    Args:
        base_dir: 项目根目录
        debug: 是否为调试模式

    Returns:
        Django LOGGING 配置字典
    """
    is_docker = _is_docker_environment()
    log_dir = os.environ.get("LOG_DIR") or os.path.join(base_dir, "logs")
    os.makedirs(log_dir, exist_ok=True)

    file_max_size = int(os.environ.get("LOG_FILE_MAX_SIZE", 10 * 1024 * 1024))  # 10MB
    apps_level = os.environ.get("LOG_LEVEL", "DEBUG" if debug else "INFO")

    # Docker 环境使用 JSON 格式，便于日志聚合
    console_formatter = "json" if is_docker and not debug else "simple"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "[{asctime}] {levelname} {name} {module}.{funcName}:{lineno} - {message}",
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {
                "format": "[{asctime}] {levelname} - {message}",
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "apps.core.logging.JsonFormatter",
            },
        },
        "handlers": {
            # 控制台输出（Docker 环境下输出到 stdout）
            "console": {
                "level": "DEBUG" if debug else "INFO",
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": console_formatter,
            },
            # 错误输出到 stderr
            "console_error": {
                "level": "ERROR",
                "class": "logging.StreamHandler",
                "stream": sys.stderr,
                "formatter": console_formatter,
            },
            "file_api": {
                "level": "INFO",
                "class": "logging.handlers.RotatingFileHandler",
                "filename": os.path.join(log_dir, "api.log"),
                "maxBytes": file_max_size,
                "backupCount": 5,
                "formatter": "verbose",
                "encoding": "utf-8",
            },
            "file_error": {
                "level": "ERROR",
                "class": "logging.handlers.RotatingFileHandler",
                "filename": os.path.join(log_dir, "error.log"),
                "maxBytes": file_max_size,
                "backupCount": 10,
                "formatter": "verbose",
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "django": {
                "handlers": ["console", "console_error", "file_error"],
                "level": "INFO",
                "propagate": False,
            },
            "django.request": {
                "handlers": ["console", "console_error", "file_error"],
                "level": "WARNING",
                "propagate": False,
            },
            # 业务日志写入 api.log 后继续向 root 传播，由 root 负责控制台和错误文件
            "api": {
                "handlers": ["file_api"],
                "level": apps_level,
                "propagate": True,
            },
            "apps": {
                "handlers": ["file_api"],
                "level": apps_level,
                "propagate": True,
            },
        },
        "root": {
            "handlers": ["console", "console_error", "file_error"],
            "level": "WARNING",
        },
    }


class JsonFormatter(logging.Formatter):
    """JSON 格式化器，用于结构化日志输出"""

    # 通过 extra 传入、需要输出的上下文字段
    EXTRA_FIELDS = (
        "action", "path", "method", "code", "errors",
        "contract_id", "contract_number", "ukprn", "status_code",
    )

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(log_data, ensure_ascii=False, default=str)
