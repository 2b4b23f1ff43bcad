"""Bootstrap - 集中构造运行时组件

职责：
- 创建平台适配器（或使用传入的适配器）
- 把适配器的 page/app transform 按顺序注册到 PluginDriver
- 汇总 RuntimeOptions
- 返回 RuntimeComponents 供 Page/App builder 使用

不负责：
- 页面/应用的创建（由 create_page_config / create_app_config 完成）
"""

from dataclasses import dataclass, field
from typing import Any

from ..adapters.base import PlatformAdapter
from ..adapters.factory import create_adapters
from ..plugins.driver import PluginDriver, plugin_driver
from ..telemetry import get_logger
from .options import PolicyName, RuntimeOptions

logger = get_logger(__name__)

# 当前进程的运行时组件，bootstrap() 只允许构造一次
_current_components: "RuntimeComponents | None" = None


@dataclass
class RuntimeComponents:
    """Bootstrap 返回的运行时组件集合"""

    adapters: list[PlatformAdapter]
    options: RuntimeOptions
    plugin_driver: PluginDriver = field(default_factory=PluginDriver)

    @property
    def targets(self) -> list[str]:
        return [adapter.name for adapter in self.adapters]

    def stop_pull_down_refresh(self) -> None:
        """通知所有平台结束下拉刷新"""
        for adapter in self.adapters:
            adapter.stop_pull_down_refresh()


def bootstrap(
    adapters: list[PlatformAdapter] | None = None,
    *,
    targets: list[str] | None = None,
    host: Any = None,
    page_events: dict[str, list[str]] | None = None,
    result_policy: PolicyName | None = None,
    driver: PluginDriver | None = None,
) -> RuntimeComponents:
    """构造运行时组件

    Args:
        adapters: 平台适配器（优先于 targets）
        targets: 平台名列表，默认读取 PAGEBRIDGE_TARGETS
        host: 宿主 API 对象，传给通过 targets 创建的适配器
        page_events: 按页面路径声明的事件
        result_policy: 默认结果合并策略
        driver: PluginDriver，默认使用全局实例

    Returns:
        RuntimeComponents

    Raises:
        RuntimeError: 如果已经调用过 bootstrap（防止双重构造）
        pydantic.ValidationError: 选项校验失败（此时不注册任何 transform）
    """
    global _current_components

    if _current_components is not None:
        raise RuntimeError(
            "bootstrap() has already been called. "
            "Use get_current_components() to access existing components."
        )

    # 1. 创建适配器
    if adapters is None:
        adapters = create_adapters(targets, host=host)
    if not adapters:
        raise ValueError("bootstrap() requires at least one platform adapter")

    # 2. 汇总选项（校验失败时 driver 保持不变）
    options = RuntimeOptions.from_adapters(adapters, page_events=page_events, result_policy=result_policy)

    # 3. 注册 transform（注册顺序即执行顺序）
    driver = driver if driver is not None else plugin_driver
    for adapter in adapters:
        driver.register("page", adapter.transform_page_config, name=f"{adapter.name}.page")
        driver.register("app", adapter.transform_app_config, name=f"{adapter.name}.app")

    _current_components = RuntimeComponents(adapters=adapters, options=options, plugin_driver=driver)
    logger.info(f"[Bootstrap] Components created for {', '.join(_current_components.targets)}")
    return _current_components


def get_current_components() -> "RuntimeComponents | None":
    """获取当前的 RuntimeComponents

    如果 bootstrap() 还没调用，返回 None。
    """
    return _current_components


def get_runtime() -> RuntimeComponents:
    """获取当前 RuntimeComponents，未 bootstrap 时按环境变量默认构造"""
    if _current_components is None:
        logger.info("[Bootstrap] Not bootstrapped, using default targets")
        return bootstrap()
    return _current_components


def _reset_for_testing() -> None:
    """重置 bootstrap 状态（仅用于测试）"""
    global _current_components
    _current_components = None
