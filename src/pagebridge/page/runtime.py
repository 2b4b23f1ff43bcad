"""PageRuntime - 页面实例

每个页面配置对应一个 PageRuntime，持有：
- page_id: onLoad 时分配
- 挂载的组件树（root）
- EventRegistry（hook 与根 class 组件方法的订阅）
- 生命周期状态与历史

每次宿主调用的处理顺序：
1. 状态检查（卸载后 / 加载前的调用抛出 PageStateError）
2. 状态流转
3. 依次 dispatch 该事件的所有同义宿主名
4. 记录历史，合并结果返回宿主

onLoad: 分配 ID → 挂载组件树（will/did mount）→ dispatch onLoad
onUnload: dispatch onUnload → 卸载组件树（will unmount）→ 清空 registry → 释放 ID
"""

import asyncio
import inspect
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..config import LIFECYCLE_HISTORY_MAX_LENGTH, METRICS_ENABLED
from ..core.ids import PageIdAllocator, normalize_path, page_id_allocator, short_id
from ..events.names import alias_names, callback_name
from ..events.registry import EventCallback, EventRegistry
from ..exceptions import DispatchError, PageStateError
from ..render.engine import Container, RenderEngine, h
from ..render.memory import Component, MemoryEngine, Node
from ..telemetry import format_page_log, get_logger, metrics
from .state import LifecycleEntry, PageLifecycle, find_rule

if TYPE_CHECKING:
    from ..runtime.bootstrap import RuntimeComponents

logger = get_logger(__name__)


class PageRuntime:
    """页面实例

    使用示例:
        page = PageRuntime(Index, "pages/index/index", runtime)
        page.on_load({"id": "1"})
        page.handle_event("onShow")
        page.on_unload()
    """

    def __init__(
        self,
        component: Any,
        path: str,
        runtime: "RuntimeComponents",
        *,
        engine: RenderEngine | None = None,
        allocator: PageIdAllocator | None = None,
    ):
        self.component = component
        self.path = normalize_path(path)
        self._runtime = runtime
        self._options = runtime.options
        self._engine = engine or MemoryEngine()
        self._allocator = allocator or page_id_allocator

        self.page_id: str | None = None
        self.query: dict[str, Any] = {}
        self.registry = EventRegistry(owner=self.path)
        self.container = Container(context=self)
        self._root: Node | None = None
        self._state = PageLifecycle.UNMOUNTED
        self._history: deque[LifecycleEntry] = deque(maxlen=LIFECYCLE_HISTORY_MAX_LENGTH)
        self._pending: set[asyncio.Task] = set()

    # === 属性 ===

    @property
    def state(self) -> PageLifecycle:
        return self._state

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def wrapper(self) -> Component | None:
        """根 class 组件实例（函数组件为 None）"""
        return self._root.instance if self._root is not None else None

    @property
    def history(self) -> list[LifecycleEntry]:
        return list(self._history)

    @property
    def events(self) -> list[str]:
        """该页面暴露给宿主的事件"""
        return self._options.events_for_page(self.path)

    def _log(self, msg: str) -> str:
        return format_page_log("Page", short_id(self.page_id), msg)

    # === hook 订阅 ===

    def subscribe_hook(self, event_name: str, subscriber_id: str, callback: EventCallback) -> list[str]:
        """订阅逻辑事件的所有同义宿主名

        Returns:
            实际订阅的宿主事件名
        """
        names = self._options.expand(event_name)
        for name in names:
            self.registry.subscribe(name, subscriber_id, callback)
        return names

    def unsubscribe_hook(self, names: list[str], subscriber_id: str) -> None:
        for name in names:
            self.registry.unsubscribe(name, subscriber_id)

    def _register_class_lifecycle(self) -> None:
        """根 class 组件的生命周期方法视为一次性的 hook 注册"""
        instance = self.wrapper
        if instance is None or self._root is None:
            return
        subscriber_id = f"{self._root.id}:class"
        for event in self.events:
            for name in [callback_name(event), *alias_names(event)]:
                method = getattr(instance, name, None)
                if callable(method):
                    self.subscribe_hook(event, subscriber_id, method)
                    break

    # === 宿主方法 ===

    def handler(self, event_name: str) -> Callable[..., Any]:
        """宿主事件名对应的配置方法"""
        if event_name == "onLoad":
            return self.on_load
        if event_name == "onUnload":
            return self.on_unload

        def handle(*args: Any) -> Any:
            return self.handle_event(event_name, *args)

        handle.__name__ = event_name
        return handle

    def on_load(self, query: dict[str, Any] | None = None) -> Any:
        """宿主 onLoad：分配 ID、挂载组件树、dispatch onLoad"""
        from_state = self._transition("onLoad")

        self.page_id = self._allocator.allocate(self.path)
        self._allocator.acquire(self.page_id)
        self.registry.owner = self.page_id
        self.query = dict(query or {})

        try:
            self._root = self._engine.mount(h(self.component, {"query": self.query}), self.container)
            self._register_class_lifecycle()
        except Exception:
            self._discard(from_state)
            raise

        if METRICS_ENABLED:
            metrics.inc("page.loaded")
            metrics.gauge("pages.live", len(self._allocator.live_ids))
        logger.info(self._log(f"Loaded {self.path} query={self.query}"))

        return self._dispatch("onLoad", (self.query,), from_state)

    def on_unload(self) -> Any:
        """宿主 onUnload：dispatch onUnload 后卸载组件树并清空订阅"""
        from_state = self._transition("onUnload")
        try:
            return self._dispatch("onUnload", (), from_state)
        finally:
            self._teardown()

    def handle_event(self, event_name: str, *args: Any) -> Any:
        """透传事件（onShow / onShareAppMessage / ...）"""
        if event_name in ("onLoad", "onUnload"):
            return self.handler(event_name)(*args)
        from_state = self._transition(event_name)
        return self._dispatch(event_name, args, from_state)

    # === 内部 ===

    def _transition(self, event_name: str) -> PageLifecycle:
        """检查并执行状态流转，返回原状态"""
        rule = find_rule(event_name)
        current = self._state
        if not rule.allows(current):
            logger.error(self._log(f"Rejected {event_name} in state {current.value}"))
            if METRICS_ENABLED:
                metrics.inc("page.rejected", labels={"event": event_name})
            raise PageStateError(self.page_id, event_name, current.value)
        self._state = rule.target(current)
        return current

    def _dispatch(self, event_name: str, args: tuple, from_state: PageLifecycle) -> Any:
        results: list[Any] = []
        failures: list[tuple[str, BaseException]] = []
        subscribers = 0
        for name in self._options.expand(event_name):
            subscribers += len(self.registry.subscribers(name))
            try:
                results.extend(self.registry.dispatch(name, *args))
            except DispatchError as exc:
                results.extend(exc.results)
                failures.extend(exc.failures)

        self._history.append(
            LifecycleEntry(
                event=event_name,
                from_state=from_state,
                to_state=self._state,
                success=not failures,
                subscribers=subscribers,
            )
        )
        logger.debug(self._log(f"{event_name}: {from_state.value} -> {self._state.value} ({subscribers} subscriber(s))"))

        if event_name == "onPullDownRefresh":
            results = self._complete_pull_down_refresh(results)

        if failures:
            raise DispatchError(event_name, failures, results)
        return self._options.policy_for(event_name)(results)

    def _complete_pull_down_refresh(self, results: list[Any]) -> list[Any]:
        """异步下拉刷新：awaitable 结果完成后通知宿主结束刷新"""
        pending = [result for result in results if inspect.isawaitable(result)]
        if not pending:
            return results

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(self._log("onPullDownRefresh returned awaitable without running loop"))
            for result in pending:
                if inspect.iscoroutine(result):
                    result.close()
            self._runtime.stop_pull_down_refresh()
            return [result for result in results if not inspect.isawaitable(result)]

        async def wait_and_stop() -> None:
            outcomes = await asyncio.gather(*pending, return_exceptions=True)
            for outcome in outcomes:
                if isinstance(outcome, Exception):
                    logger.warning(self._log(f"onPullDownRefresh subscriber failed: {outcome!r}"))
            self._runtime.stop_pull_down_refresh()

        task = loop.create_task(wait_and_stop())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return [result for result in results if not inspect.isawaitable(result)]

    def _discard(self, from_state: PageLifecycle) -> None:
        """挂载失败：撤销 onLoad 的副作用，页面直接进入 UNLOADED"""
        logger.error(self._log(f"Mount of {self.path} failed, page discarded"))
        if self._root is not None:
            self._engine.unmount(self._root)
            self._root = None
        self.registry.clear()
        self._allocator.release(self.page_id)
        self._state = PageLifecycle.UNLOADED
        self._history.append(
            LifecycleEntry(event="onLoad", from_state=from_state, to_state=self._state, success=False)
        )
        if METRICS_ENABLED:
            metrics.gauge("pages.live", len(self._allocator.live_ids))

    def _teardown(self) -> None:
        # 卸载后不再通知宿主结束下拉刷新
        for task in list(self._pending):
            task.cancel()
        if self._root is not None:
            self._engine.unmount(self._root)
            self._root = None
        self.registry.clear()
        if self.page_id is None:
            return
        self._allocator.release(self.page_id)
        if METRICS_ENABLED:
            metrics.inc("page.unloaded")
            metrics.gauge("pages.live", len(self._allocator.live_ids))
        logger.info(self._log("Unloaded"))

    def __repr__(self) -> str:
        return f"<PageRuntime {self.page_id or self.path} {self._state.value}>"
