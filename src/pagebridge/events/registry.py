"""EventRegistry - 页面/应用级事件订阅表

每个页面实例、应用实例各持有一个 registry：
    事件名 → [(subscriber_id, callback), ...]（按注册顺序）

语义：
1. subscribe: 同一 subscriber 对同一事件重复注册时原位替换（保持槽位），否则追加
2. unsubscribe: 幂等，删除后其余条目相对顺序不变
3. dispatch: 按注册顺序调用，收集返回值；单个回调异常不影响后续回调，
   全部执行完后抛出 DispatchError（带出错的 subscriber_id）
4. 未知事件 dispatch 返回空列表，不是错误
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..config import METRICS_ENABLED
from ..exceptions import DispatchError
from ..telemetry import get_logger, metrics, short_payload

logger = get_logger(__name__)

EventCallback = Callable[..., Any]


@dataclass
class Subscription:
    """单条订阅"""

    subscriber_id: str
    callback: EventCallback


def _fit_args(callback: EventCallback, args: tuple) -> tuple:
    """按回调签名截断宿主参数

    宿主总是按自己的约定传参（例如 onLoad 传 query），
    不关心参数的回调可以不声明它们。
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return args

    positional = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return args
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return args[:positional]


class EventRegistry:
    """事件订阅表

    使用示例:
        registry = EventRegistry(owner="page:pages/index/index:0")
        registry.subscribe("onShow", "node-1:0", lambda: print("shown"))
        registry.dispatch("onShow")
        registry.unsubscribe("onShow", "node-1:0")
    """

    def __init__(self, owner: str = ""):
        self.owner = owner
        self._subscriptions: dict[str, list[Subscription]] = {}

    # === 订阅 ===

    def subscribe(self, event_name: str, subscriber_id: str, callback: EventCallback) -> None:
        """注册回调

        同一 subscriber 已注册该事件时原位替换回调，否则追加到末尾。
        """
        entries = self._subscriptions.setdefault(event_name, [])
        for entry in entries:
            if entry.subscriber_id == subscriber_id:
                entry.callback = callback
                return
        entries.append(Subscription(subscriber_id=subscriber_id, callback=callback))

    def unsubscribe(self, event_name: str, subscriber_id: str) -> None:
        """取消注册（幂等）"""
        entries = self._subscriptions.get(event_name)
        if not entries:
            return
        remaining = [entry for entry in entries if entry.subscriber_id != subscriber_id]
        if remaining:
            self._subscriptions[event_name] = remaining
        else:
            del self._subscriptions[event_name]

    def clear(self) -> None:
        """清空所有订阅"""
        self._subscriptions.clear()

    # === 分发 ===

    def dispatch(self, event_name: str, *args: Any) -> list[Any]:
        """按注册顺序调用所有订阅者

        Args:
            event_name: 事件名
            *args: 宿主传入的参数（按回调签名截断）

        Returns:
            每个回调的返回值，按注册顺序

        Raises:
            DispatchError: 任一回调抛出异常（所有回调执行完之后）
        """
        # 复制一份，回调内部 subscribe/unsubscribe 不影响本次分发
        entries = list(self._subscriptions.get(event_name, ()))
        if METRICS_ENABLED:
            metrics.inc("dispatch.total", labels={"event": event_name})

        if entries:
            logger.debug(
                f"[Registry:{self.owner}] dispatch {event_name} to {len(entries)} "
                f"subscriber(s) args={short_payload(args)}"
            )

        results: list[Any] = []
        failures: list[tuple[str, BaseException]] = []
        for entry in entries:
            try:
                results.append(entry.callback(*_fit_args(entry.callback, args)))
            except Exception as exc:
                logger.warning(
                    f"[Registry:{self.owner}] subscriber {entry.subscriber_id} "
                    f"failed on {event_name}: {exc!r}"
                )
                failures.append((entry.subscriber_id, exc))

        if failures:
            if METRICS_ENABLED:
                metrics.inc("dispatch.errors", labels={"event": event_name}, value=len(failures))
            raise DispatchError(event_name, failures, results)
        return results

    # === 查询 ===

    def subscribers(self, event_name: str) -> list[str]:
        """某事件的 subscriber_id 列表（按注册顺序）"""
        return [entry.subscriber_id for entry in self._subscriptions.get(event_name, ())]

    def events(self) -> list[str]:
        """有订阅的事件名"""
        return list(self._subscriptions)

    def has_subscribers(self, event_name: str) -> bool:
        return bool(self._subscriptions.get(event_name))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._subscriptions.values())
