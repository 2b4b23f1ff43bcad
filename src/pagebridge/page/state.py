"""页面生命周期状态

状态流转：
    UNMOUNTED → LOADED → READY → (SHOWN ⇄ HIDDEN) → UNLOADED

规则表：
| event | from | to |
|-------|------|----|
| onLoad | UNMOUNTED | LOADED |
| onReady | LIVE | READY（仅从 LOADED；其他状态保持） |
| onShow | LIVE | SHOWN |
| onHide | LIVE | HIDDEN |
| onUnload | 非 UNLOADED | UNLOADED |
| 其他透传事件 | LIVE | 保持 |

LIVE = LOADED / READY / SHOWN / HIDDEN。宿主会在 onReady 之前先调用
onShow，所以 onShow / onReady 不强制先后。
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class PageLifecycle(Enum):
    """页面生命周期状态"""

    UNMOUNTED = "unmounted"
    LOADED = "loaded"
    READY = "ready"
    SHOWN = "shown"
    HIDDEN = "hidden"
    UNLOADED = "unloaded"

    @property
    def is_live(self) -> bool:
        """是否已加载且未卸载（可以接收透传事件）"""
        return self in LIVE_STATES

    @property
    def is_terminal(self) -> bool:
        return self == PageLifecycle.UNLOADED


LIVE_STATES = {
    PageLifecycle.LOADED,
    PageLifecycle.READY,
    PageLifecycle.SHOWN,
    PageLifecycle.HIDDEN,
}


@dataclass
class LifecycleRule:
    """生命周期流转规则

    Attributes:
        from_states: 允许的原状态
        to_state: 目标状态，None 表示保持原状态
        only_from: 仅当原状态在此集合内时才切换到 to_state，否则保持
    """

    from_states: set[PageLifecycle]
    to_state: PageLifecycle | None = None
    only_from: set[PageLifecycle] | None = None

    def allows(self, state: PageLifecycle) -> bool:
        return state in self.from_states

    def target(self, state: PageLifecycle) -> PageLifecycle:
        if self.to_state is None:
            return state
        if self.only_from is not None and state not in self.only_from:
            return state
        return self.to_state


LIFECYCLE_RULES: dict[str, LifecycleRule] = {
    "onLoad": LifecycleRule(from_states={PageLifecycle.UNMOUNTED}, to_state=PageLifecycle.LOADED),
    "onReady": LifecycleRule(
        from_states=LIVE_STATES,
        to_state=PageLifecycle.READY,
        only_from={PageLifecycle.LOADED},
    ),
    "onShow": LifecycleRule(from_states=LIVE_STATES, to_state=PageLifecycle.SHOWN),
    "onHide": LifecycleRule(from_states=LIVE_STATES, to_state=PageLifecycle.HIDDEN),
    "onUnload": LifecycleRule(
        from_states=LIVE_STATES | {PageLifecycle.UNMOUNTED},
        to_state=PageLifecycle.UNLOADED,
    ),
}

# 透传事件
PASS_THROUGH_RULE = LifecycleRule(from_states=LIVE_STATES)


def find_rule(event_name: str) -> LifecycleRule:
    """事件对应的流转规则（未列出的事件按透传处理）"""
    return LIFECYCLE_RULES.get(event_name, PASS_THROUGH_RULE)


@dataclass
class LifecycleEntry:
    """生命周期历史条目"""

    event: str
    from_state: PageLifecycle
    to_state: PageLifecycle
    success: bool
    subscribers: int = 0
    timestamp: float = field(default_factory=lambda: datetime.now().timestamp())

    def to_dict(self) -> dict:
        return {
            "event": self.event,
            "from_state": self.from_state.value,
            "to_state": self.to_state.value,
            "success": self.success,
            "subscribers": self.subscribers,
            "timestamp": self.timestamp,
        }
