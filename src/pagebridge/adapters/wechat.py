"""WeChat mini program adapter."""

from .base import PlatformAdapter

PAGE_EVENTS = [
    "onShow",
    "onHide",
    "onReady",
    "onPullDownRefresh",
    "onReachBottom",
    "onPageScroll",
    "onShareAppMessage",
    "onShareTimeline",
    "onAddToFavorites",
    "onResize",
    "onTabItemTap",
]

APP_EVENTS = [
    "onLaunch",
    "onShow",
    "onHide",
    "onError",
    "onPageNotFound",
    "onUnhandledRejection",
    "onThemeChange",
]


class WechatAdapter(PlatformAdapter):
    """WeChat exposes every page event as a top-level config method."""

    @property
    def name(self) -> str:
        return "wechat"

    @property
    def page_events(self) -> list[str]:
        return list(PAGE_EVENTS)

    @property
    def app_events(self) -> list[str]:
        return list(APP_EVENTS)

    @property
    def synonyms(self) -> dict[str, list[str]]:
        return {
            "onTabItemTap": ["onTabItemTap"],
            "onResize": ["onResize"],
        }
