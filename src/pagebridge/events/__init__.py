"""事件模块

- registry: EventRegistry 订阅表
- names: 事件名别名、方法名、同义组
- policies: dispatch 结果合并策略
"""

from .names import SynonymGroups, callback_name, resolve_alias
from .policies import get_policy
from .registry import EventRegistry, Subscription

__all__ = [
    "EventRegistry",
    "Subscription",
    "SynonymGroups",
    "callback_name",
    "resolve_alias",
    "get_policy",
]
