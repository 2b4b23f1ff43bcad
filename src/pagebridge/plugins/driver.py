"""PluginDriver - 配置变换管道

平台适配器在启动时注册 transform，Page/App builder 构造配置后
依次经过对应 kind 的 transform（从左到右折叠）。

约束：
- 注册是 append-only，注册顺序即执行顺序
- 第一次 run 之后冻结，之后再注册抛出 PluginDriverFrozenError
"""

from collections.abc import Callable
from typing import Any

from ..exceptions import PluginDriverFrozenError
from ..telemetry import get_logger

logger = get_logger(__name__)

ConfigTransform = Callable[[dict[str, Any]], dict[str, Any]]

PLUGIN_KINDS = ("page", "app")


class PluginDriver:
    """按 kind 分组的有序 transform 列表"""

    def __init__(self) -> None:
        self._transforms: dict[str, list[tuple[str, ConfigTransform]]] = {
            kind: [] for kind in PLUGIN_KINDS
        }
        self._frozen = False

    @staticmethod
    def _check_kind(kind: str) -> None:
        if kind not in PLUGIN_KINDS:
            raise ValueError(f"Unknown plugin kind: {kind}")

    # === 注册 ===

    def register(self, kind: str, transform: ConfigTransform, name: str | None = None) -> None:
        """注册 transform

        Args:
            kind: "page" 或 "app"
            transform: (config) -> config
            name: 用于日志的名字，默认取函数名

        Raises:
            ValueError: 未知 kind
            PluginDriverFrozenError: 已经开始构造配置
        """
        self._check_kind(kind)
        name = name or getattr(transform, "__qualname__", repr(transform))
        if self._frozen:
            logger.error(f"[PluginDriver] Rejected late registration of {name} ({kind})")
            raise PluginDriverFrozenError(
                f"Cannot register {name} for {kind}: plugin driver already in use"
            )
        self._transforms[kind].append((name, transform))
        logger.debug(f"[PluginDriver] Registered {kind} transform {name}")

    def freeze(self) -> None:
        """冻结注册（第一次 run 时自动调用）"""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # === 执行 ===

    def run(self, kind: str, config: dict[str, Any]) -> dict[str, Any]:
        """依次执行 kind 对应的 transform

        Returns:
            最后一个 transform 的返回值（没有 transform 时原样返回）
        """
        self._check_kind(kind)
        self._frozen = True
        for name, transform in self._transforms[kind]:
            result = transform(config)
            if not isinstance(result, dict):
                raise TypeError(f"{kind} transform {name} returned {type(result).__name__}, expected dict")
            config = result
        return config

    def transform_names(self, kind: str) -> list[str]:
        self._check_kind(kind)
        return [name for name, _ in self._transforms[kind]]

    def _reset_for_testing(self) -> None:
        """清空并解冻（仅用于测试）"""
        for transforms in self._transforms.values():
            transforms.clear()
        self._frozen = False


# 全局 driver
plugin_driver = PluginDriver()
