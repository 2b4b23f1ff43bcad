"""Adapter factory for creating platform adapters."""

import os
from typing import Any

from pagebridge import config
from pagebridge.adapters.alipay import AlipayAdapter
from pagebridge.adapters.base import PlatformAdapter
from pagebridge.adapters.toutiao import ToutiaoAdapter
from pagebridge.adapters.wechat import WechatAdapter
from pagebridge.telemetry import get_logger

logger = get_logger(__name__)

ADAPTER_TYPES: dict[str, type[PlatformAdapter]] = {
    "wechat": WechatAdapter,
    "alipay": AlipayAdapter,
    "toutiao": ToutiaoAdapter,
}


def detect_targets() -> list[str]:
    """Detect target platforms from environment.

    Returns:
        Names from $PAGEBRIDGE_TARGETS (comma-separated), else config.TARGETS
    """
    raw = os.environ.get("PAGEBRIDGE_TARGETS")
    if raw:
        return [name.strip() for name in raw.split(",") if name.strip()]
    return list(config.TARGETS)


def create_adapter(adapter_type: str, host: Any = None) -> PlatformAdapter:
    """Create a platform adapter.

    Args:
        adapter_type: Adapter name ("wechat", "alipay", "toutiao")
        host: Host API object passed to the adapter

    Returns:
        PlatformAdapter instance

    Raises:
        ValueError: If adapter type is unknown
    """
    adapter_class = ADAPTER_TYPES.get(adapter_type)
    if adapter_class is None:
        raise ValueError(f"Unknown adapter type: {adapter_type}")
    return adapter_class(host=host)


def create_adapters(targets: list[str] | None = None, host: Any = None) -> list[PlatformAdapter]:
    """Create adapters for several targets, keeping order.

    Args:
        targets: Adapter names. Default from detect_targets().
        host: Host API object shared by all adapters

    Returns:
        Adapter instances in target order
    """
    if targets is None:
        targets = detect_targets()
        logger.info(f"Detected targets: {', '.join(targets)}")
    return [create_adapter(name, host=host) for name in targets]
