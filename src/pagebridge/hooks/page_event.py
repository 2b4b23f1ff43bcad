"""Hook binding - 在组件渲染中订阅页面/应用事件

use_page_event(event, callback):
1. 首次渲染：以 "<节点 ID>:<hook 位置>" 为 subscriber_id 订阅当前页面的 registry
   （逻辑事件展开为所有同义宿主名，每个名字一条订阅）
2. 重新渲染：原位替换回调，闭包总能看到最新的外部变量
3. 卸载：取消所有订阅

use_app_event 语义相同，订阅的是全局 app 的 registry。
"""

from dataclasses import dataclass
from typing import Any

from ..events.names import resolve_alias
from ..events.registry import EventCallback
from ..exceptions import HookContextError
from ..render.engine import HookNode, current_node


@dataclass
class _Binding:
    """一个 hook 槽位当前的订阅"""

    target: Any  # PageRuntime / AppRuntime
    event: str
    subscriber_id: str
    names: list[str]

    def release(self) -> None:
        self.target.unsubscribe_hook(self.names, self.subscriber_id)


def _require_node(hook_name: str) -> HookNode:
    node = current_node()
    if node is None:
        raise HookContextError(f"{hook_name}() can only be called while a component renders")
    return node


def _release_slot(slot: dict[str, Any]) -> None:
    binding = slot.pop("binding", None)
    if binding is not None:
        binding.release()


def _bind(target: Any, node: HookNode, event_name: str, callback: EventCallback) -> None:
    index, slot = node.hook_slot()
    subscriber_id = f"{node.id}:{index}"
    event_name = resolve_alias(event_name)

    binding: _Binding | None = slot.get("binding")
    if binding is not None and (binding.target is not target or binding.event != event_name):
        _release_slot(slot)
        binding = None

    names = target.subscribe_hook(event_name, subscriber_id, callback)
    if binding is None:
        slot["binding"] = _Binding(target, event_name, subscriber_id, names)
    if not slot.get("cleanup"):
        slot["cleanup"] = True
        node.add_cleanup(lambda: _release_slot(slot))


def use_page_event(event_name: str, callback: EventCallback) -> None:
    """订阅当前页面的生命周期事件

    Args:
        event_name: 宿主事件名或别名（"onShow", "onShareAppMessage", "unload"...）
        callback: 回调，参数为宿主传入的 payload（可省略）

    Raises:
        HookContextError: 不在组件渲染中，或组件树没有挂载到页面
    """
    node = _require_node("use_page_event")
    page = node.container.context
    if page is None or not hasattr(page, "subscribe_hook"):
        raise HookContextError("use_page_event() requires a tree mounted by a page")
    _bind(page, node, event_name, callback)


def use_app_event(event_name: str, callback: EventCallback) -> None:
    """订阅全局 app 的生命周期事件

    Raises:
        HookContextError: 不在组件渲染中
        AppNotReadyError: 全局 app 尚未设置
    """
    from ..app.runtime import get_app

    node = _require_node("use_app_event")
    _bind(get_app(), node, event_name, callback)
