"""Alipay mini program adapter.

Alipay reads a subset of page events from a nested ``events`` table instead
of top-level config methods. Those events are declared under the host names
``events.<name>`` so hooks subscribe to them separately from other platforms.
"""

from typing import Any

from .base import PlatformAdapter

PAGE_EVENTS = [
    "onShow",
    "onHide",
    "onReady",
    "onPullDownRefresh",
    "onPullIntercept",
    "onReachBottom",
    "onPageScroll",
    "onShareAppMessage",
    "onTitleClick",
    "onOptionMenuClick",
    "onPopMenuClick",
]

# Events the Alipay host looks up under config["events"]
EVENTS_TABLE = [
    "onBack",
    "onKeyboardHeight",
    "onTabItemTap",
    "beforeTabItemTap",
    "onResize",
]

APP_EVENTS = [
    "onLaunch",
    "onShow",
    "onHide",
    "onError",
    "onShareAppMessage",
    "onUnhandledRejection",
]


class AlipayAdapter(PlatformAdapter):
    """Alipay adapter."""

    @property
    def name(self) -> str:
        return "alipay"

    @property
    def page_events(self) -> list[str]:
        return PAGE_EVENTS + EVENTS_TABLE

    @property
    def app_events(self) -> list[str]:
        return list(APP_EVENTS)

    @property
    def synonyms(self) -> dict[str, list[str]]:
        return {event: [f"events.{event}"] for event in EVENTS_TABLE}

    def transform_page_config(self, config: dict[str, Any]) -> dict[str, Any]:
        """Mirror event-table methods into config["events"]."""
        events = dict(config.get("events") or {})
        for event in EVENTS_TABLE:
            if event in config:
                events[event] = config[event]
        if events:
            config["events"] = events
        return config
