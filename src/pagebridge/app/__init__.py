"""App 模块 - 应用配置与全局 app"""

from .runtime import AppRuntime, clear_global_app, create_app_config, get_app, set_global_app

__all__ = [
    "AppRuntime",
    "clear_global_app",
    "create_app_config",
    "get_app",
    "set_global_app",
]
