"""AppRuntime - 应用实例

与页面相同的 dispatch 规则，但：
- 事件集合固定（平台声明的 app_events）
- 没有挂载组件树
- 不展开同义组：适配器的同义声明只作用于页面事件
- 可选的 app 对象：其 on_launch / on_show 等方法在创建时注册为订阅者

全局 app：
- on_launch 时通过 set_global_app 安装
- get_app() 在安装前抛出 AppNotReadyError
- clear_global_app() 用于进程结束 / 测试清理
"""

from collections.abc import Callable
from typing import Any

from ..config import METRICS_ENABLED
from ..events.names import alias_names, callback_name, resolve_alias
from ..events.registry import EventCallback, EventRegistry
from ..exceptions import AppNotReadyError
from ..runtime.bootstrap import RuntimeComponents, get_runtime
from ..telemetry import get_logger, metrics

logger = get_logger(__name__)

_global_app: "AppRuntime | None" = None


def set_global_app(app: "AppRuntime") -> None:
    """安装全局 app"""
    global _global_app
    if _global_app is not None and _global_app is not app:
        logger.warning("[App] Replacing global app")
    _global_app = app


def get_app() -> "AppRuntime":
    """获取全局 app

    Raises:
        AppNotReadyError: 尚未 on_launch
    """
    if _global_app is None:
        raise AppNotReadyError("get_app() called before the app launched")
    return _global_app


def clear_global_app() -> None:
    """清除全局 app"""
    global _global_app
    _global_app = None


class AppRuntime:
    """应用实例

    使用示例:
        config = create_app_config(MyApp())
        config["onLaunch"]({"path": "pages/index/index"})
        get_app().registry
    """

    def __init__(self, app: Any, runtime: RuntimeComponents):
        self.app = app
        self._options = runtime.options
        self.registry = EventRegistry(owner="app")
        self.launched = False
        self._register_app_lifecycle()

    @property
    def events(self) -> list[str]:
        return list(self._options.app_events)

    # === 订阅 ===

    def subscribe_hook(self, event_name: str, subscriber_id: str, callback: EventCallback) -> list[str]:
        # 同义组只描述页面事件，应用事件按原名订阅
        name = resolve_alias(event_name)
        self.registry.subscribe(name, subscriber_id, callback)
        return [name]

    def unsubscribe_hook(self, names: list[str], subscriber_id: str) -> None:
        for name in names:
            self.registry.unsubscribe(name, subscriber_id)

    def _register_app_lifecycle(self) -> None:
        if self.app is None:
            return
        for event in self.events:
            for name in [callback_name(event), *alias_names(event)]:
                method = getattr(self.app, name, None)
                if callable(method):
                    self.subscribe_hook(event, "app:class", method)
                    break

    # === 宿主方法 ===

    def handler(self, event_name: str) -> Callable[..., Any]:
        def handle(*args: Any) -> Any:
            return self.handle_event(event_name, *args)

        handle.__name__ = event_name
        return handle

    def handle_event(self, event_name: str, *args: Any) -> Any:
        if event_name == "onLaunch":
            self.launched = True
            set_global_app(self)
            if METRICS_ENABLED:
                metrics.inc("app.launched")
            logger.info("[App] Launched")

        results = self.registry.dispatch(resolve_alias(event_name), *args)
        return self._options.policy_for(event_name)(results)


def create_app_config(app: Any = None, *, runtime: RuntimeComponents | None = None) -> dict[str, Any]:
    """Create the app configuration for the host.

    Args:
        app: Optional object whose snake_case lifecycle methods subscribe
        runtime: Runtime components, default from get_runtime()

    Returns:
        Config dict with "app" and one callable per declared app event
    """
    runtime = runtime or get_runtime()
    app_runtime = AppRuntime(app, runtime)

    config: dict[str, Any] = {"app": app_runtime}
    for event in app_runtime.events:
        config[event] = app_runtime.handler(event)
    return runtime.plugin_driver.run("app", config)
