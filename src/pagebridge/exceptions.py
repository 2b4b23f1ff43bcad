"""pagebridge 异常定义

所有运行时错误都继承 BridgeError（RuntimeError 子类），
参数错误（未知平台、未知 plugin kind）仍使用 ValueError。
"""

from typing import Any


class BridgeError(RuntimeError):
    """pagebridge 错误基类"""


class DispatchError(BridgeError):
    """一次 dispatch 中有订阅者抛出异常

    所有订阅者执行完毕后统一抛出（批量失败，不是 fail-fast）。

    Attributes:
        event: 事件名
        failures: [(subscriber_id, exception), ...]，按执行顺序
        results: 成功订阅者的返回值，按执行顺序
    """

    def __init__(
        self,
        event: str,
        failures: list[tuple[str, BaseException]],
        results: list[Any] | None = None,
    ):
        self.event = event
        self.failures = failures
        self.results = results or []
        subscribers = ", ".join(subscriber_id for subscriber_id, _ in failures)
        super().__init__(
            f"{len(failures)} subscriber(s) failed on {event}: {subscribers}"
        )


class PageStateError(BridgeError):
    """页面在当前生命周期状态下不接受该调用

    例如 unload 之后的任何调用、load 之前的透传事件、重复 load。
    """

    def __init__(self, page_id: str | None, event: str, state: str):
        self.page_id = page_id
        self.event = event
        self.state = state
        super().__init__(f"Page {page_id or '<unmounted>'} cannot handle {event} in state {state}")


class AllocatorStateError(BridgeError):
    """页面 ID 分配器在仍有存活页面时被 reset"""

    def __init__(self, live_ids: list[str]):
        self.live_ids = live_ids
        super().__init__(
            f"reset() called while {len(live_ids)} page(s) are still live: {', '.join(live_ids)}"
        )


class HookContextError(BridgeError):
    """hook 在组件渲染之外调用，或所在树没有挂载到页面"""


class PluginDriverFrozenError(BridgeError):
    """PluginDriver 已被使用后再注册 transform"""


class AppNotReadyError(BridgeError):
    """全局 app 尚未设置"""
