"""事件名工具

- resolve_alias: hook / class 方法使用的别名 → 宿主事件名
- callback_name: 宿主事件名 → Python 方法名（class 组件生命周期）
- SynonymGroups: 逻辑事件 → 宿主声明的同义事件名列表
"""

import re

from ..config import EVENT_ALIASES

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def resolve_alias(event_name: str) -> str:
    """解析事件别名

    "unload" → "onUnload"，其他名字原样返回。
    """
    return EVENT_ALIASES.get(event_name, event_name)


def callback_name(event_name: str) -> str:
    """宿主事件名对应的 Python 方法名

    取最后一个 "." 之后的部分再转 snake_case：
    - "onShareAppMessage" → "on_share_app_message"
    - "beforeTabItemTap" → "before_tab_item_tap"
    - "events.onResize" → "on_resize"
    """
    base = event_name.rsplit(".", 1)[-1]
    return _CAMEL_BOUNDARY.sub("_", base).lower()


def alias_names(event_name: str) -> list[str]:
    """某个宿主事件名的所有别名（不含自身）"""
    return [alias for alias, target in EVENT_ALIASES.items() if target == event_name]


class SynonymGroups:
    """同义事件组

    一个逻辑事件可以在多个宿主名字下出现（例如同时启用微信和支付宝时，
    onTabItemTap 既是顶层方法，又在支付宝的 events 表中）。

    合并顺序即平台注册顺序，组内去重。
    """

    def __init__(self, groups: dict[str, list[str]] | None = None):
        self._groups: dict[str, list[str]] = {}
        if groups:
            self.merge(groups)

    def merge(self, groups: dict[str, list[str]]) -> None:
        """合并一组同义声明（追加到已有组后面）"""
        for logical, names in groups.items():
            logical = resolve_alias(logical)
            group = self._groups.setdefault(logical, [])
            for name in names:
                if name not in group:
                    group.append(name)

    def expand(self, event_name: str) -> list[str]:
        """逻辑事件 → 宿主事件名列表，未声明时为 [event_name]"""
        logical = resolve_alias(event_name)
        return list(self._groups.get(logical) or [logical])

    def to_dict(self) -> dict[str, list[str]]:
        return {logical: list(names) for logical, names in self._groups.items()}

    def __contains__(self, event_name: str) -> bool:
        return resolve_alias(event_name) in self._groups
