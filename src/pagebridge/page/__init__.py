"""Page 模块

- state: PageLifecycle 状态与流转规则
- runtime: PageRuntime 页面实例
- builder: create_page_config 页面配置构造
"""

from .builder import create_page_config
from .runtime import PageRuntime
from .state import LifecycleEntry, PageLifecycle

__all__ = [
    "LifecycleEntry",
    "PageLifecycle",
    "PageRuntime",
    "create_page_config",
]
