"""pagebridge - 组件树与小程序宿主之间的生命周期事件桥

模块结构：
- core: 页面 ID 分配
- events: EventRegistry、事件名、结果合并策略
- plugins: PluginDriver 配置变换管道
- adapters: 宿主平台适配器
- runtime: bootstrap 与运行时选项
- render: 渲染引擎接口与内存实现
- hooks: use_page_event / use_app_event
- page: 页面实例与配置构造
- app: 应用配置与全局 app
"""

from .app import clear_global_app, create_app_config, get_app
from .core import reset_page_id
from .hooks import use_app_event, use_page_event
from .page import PageLifecycle, create_page_config
from .render import Component, h
from .runtime import bootstrap

__all__ = [
    "Component",
    "PageLifecycle",
    "bootstrap",
    "clear_global_app",
    "create_app_config",
    "create_page_config",
    "get_app",
    "h",
    "reset_page_id",
    "use_app_event",
    "use_page_event",
]
