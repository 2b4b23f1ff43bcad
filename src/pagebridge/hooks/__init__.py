"""Hook 模块 - 组件内订阅页面/应用事件"""

from .page_event import use_app_event, use_page_event

__all__ = ["use_app_event", "use_page_event"]
