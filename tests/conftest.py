"""Pytest 配置"""

from typing import Any

import pytest

from pagebridge.adapters import AlipayAdapter, WechatAdapter
from pagebridge.app import clear_global_app
from pagebridge.core import reset_page_id
from pagebridge.plugins import plugin_driver
from pagebridge.runtime import bootstrap
from pagebridge.runtime.bootstrap import _reset_for_testing as reset_bootstrap
from pagebridge.telemetry import metrics


class HostPage:
    """模拟宿主：按宿主的方式调用页面配置

    load() 与真实宿主一致：先 onLoad 再 onShow。
    支付宝 events 表中的方法在顶层不存在时从 config["events"] 查找。
    """

    def __init__(self, config: dict[str, Any]):
        self.config = config

    @property
    def page(self):
        return self.config["page"]

    def call(self, event: str, *args: Any) -> Any:
        method = self.config.get(event) or (self.config.get("events") or {}).get(event)
        if method is None:
            raise KeyError(event)
        return method(*args)

    def load(self, query: dict | None = None) -> None:
        self.call("onLoad", query or {})
        self.call("onShow")

    def ready(self):
        return self.call("onReady")

    def show(self):
        return self.call("onShow")

    def hide(self):
        return self.call("onHide")

    def unload(self):
        return self.call("onUnload")

    def pull_down_refresh(self):
        return self.call("onPullDownRefresh")

    def pull_intercept(self):
        return self.call("onPullIntercept")

    def reach_bottom(self):
        return self.call("onReachBottom")

    def page_scroll(self):
        return self.call("onPageScroll", {"scrollTop": 100})

    def share_app_message(self):
        return self.call("onShareAppMessage", {"from": "menu"})

    def title_click(self):
        return self.call("onTitleClick")

    def option_menu_click(self):
        return self.call("onOptionMenuClick")

    def pop_menu_click(self):
        return self.call("onPopMenuClick")

    def back(self):
        return self.call("onBack")

    def keyboard_height(self):
        return self.call("onKeyboardHeight", {"height": 300})

    def tab_item_tap(self):
        return self.call("onTabItemTap", {"index": 0})

    def before_tab_item_tap(self):
        return self.call("beforeTabItemTap")

    def resize(self):
        return self.call("onResize", {"size": {"windowWidth": 375}})


@pytest.fixture(autouse=True)
def reset_runtime_state():
    """每次测试前后重置进程级状态"""
    reset_page_id(force=True)
    plugin_driver._reset_for_testing()
    reset_bootstrap()
    clear_global_app()
    metrics.reset()
    yield
    reset_page_id(force=True)
    plugin_driver._reset_for_testing()
    reset_bootstrap()
    clear_global_app()
    metrics.reset()


@pytest.fixture
def alipay_runtime():
    """只启用支付宝（每个事件只有一个宿主名）"""
    return bootstrap(adapters=[AlipayAdapter()])


@pytest.fixture
def dual_runtime():
    """同时启用微信和支付宝（onTabItemTap / onResize 有两个同义名）"""
    return bootstrap(adapters=[WechatAdapter(), AlipayAdapter()])


@pytest.fixture
def host_page():
    """HostPage 工厂"""
    return HostPage
