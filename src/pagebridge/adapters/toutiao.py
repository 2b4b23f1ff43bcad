"""Toutiao (ByteDance) mini program adapter."""

from typing import Any

from .base import PlatformAdapter

PAGE_EVENTS = [
    "onShow",
    "onHide",
    "onReady",
    "onPullDownRefresh",
    "onReachBottom",
    "onPageScroll",
    "onShareAppMessage",
    "onResize",
]

APP_EVENTS = [
    "onLaunch",
    "onShow",
    "onHide",
    "onError",
    "onPageNotFound",
]


class ToutiaoAdapter(PlatformAdapter):
    """Toutiao adapter.

    The Toutiao host merges share results itself, so share dispatches
    shallow-merge every subscriber's dict result.
    """

    @property
    def name(self) -> str:
        return "toutiao"

    @property
    def page_events(self) -> list[str]:
        return list(PAGE_EVENTS)

    @property
    def app_events(self) -> list[str]:
        return list(APP_EVENTS)

    @property
    def result_policies(self) -> dict[str, str]:
        return {"onShareAppMessage": "merge"}

    def transform_app_config(self, config: dict[str, Any]) -> dict[str, Any]:
        config.setdefault("platform", self.name)
        return config
