"""Telemetry - 日志与指标

日志：库代码只通过 get_logger 取 logger，不配置 handler；
调试入口调用 configure_logging（级别来自 PAGEBRIDGE_LOG_LEVEL）。
消息格式 [模块:页面] 内容，见 format_page_log。

指标：进程内计数器与 gauge，按 (名字, 标签) 存储。
- dispatch.total{event} / dispatch.errors{event}
- page.loaded / page.unloaded / page.rejected{event}
- pages.live（gauge）
- app.launched
"""

import logging

from .config import LOG_LEVEL, LOG_MAX_PAYLOAD_LEN

_LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"

MetricKey = tuple[str, tuple[tuple[str, str], ...]]


def get_logger(name: str) -> logging.Logger:
    """按模块名获取 logger（通常传 __name__）"""
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """配置根 logger

    Args:
        level: 日志级别名，默认 PAGEBRIDGE_LOG_LEVEL
    """
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=_LOG_FORMAT)


def format_page_log(module: str, page_id: str | None, msg: str) -> str:
    """[module:page_id] msg，未挂载的页面显示为 unmounted"""
    return f"[{module}:{page_id or 'unmounted'}] {msg}"


def short_payload(payload: object) -> str:
    """payload 的 repr，超过 LOG_MAX_PAYLOAD_LEN 时截断"""
    text = repr(payload)
    if len(text) > LOG_MAX_PAYLOAD_LEN:
        return text[: LOG_MAX_PAYLOAD_LEN - 3] + "..."
    return text


def _key(name: str, labels: dict[str, str] | None) -> MetricKey:
    return name, tuple(sorted((labels or {}).items()))


def _format_key(key: MetricKey) -> str:
    name, labels = key
    if not labels:
        return name
    return name + "{" + ",".join(f"{k}={v}" for k, v in labels) + "}"


class Metrics:
    """内存指标

    测试通过 get_counter / get_gauge 断言，debug 输出用 snapshot()。
    """

    def __init__(self):
        self._counters: dict[MetricKey, int] = {}
        self._gauges: dict[MetricKey, float] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        key = _key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def gauge(self, name: str, value: float, labels: dict[str, str] | None = None) -> None:
        self._gauges[_key(name, labels)] = value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self._counters.get(_key(name, labels), 0)

    def get_gauge(self, name: str, labels: dict[str, str] | None = None) -> float:
        return self._gauges.get(_key(name, labels), 0.0)

    def snapshot(self) -> dict[str, float]:
        """所有指标，键为 name{label=value,...}"""
        data: dict[str, float] = {_format_key(key): value for key, value in self._counters.items()}
        data.update((_format_key(key), value) for key, value in self._gauges.items())
        return data

    def reset(self) -> None:
        self._counters.clear()
        self._gauges.clear()


metrics = Metrics()
