"""Platform Adapter 抽象接口

定义宿主平台适配器的统一接口，支持不同小程序宿主：
- 微信 (wechat)
- 支付宝 (alipay)
- 头条 (toutiao)

每个适配器声明：
1. 宿主会调用的页面/应用事件名
2. 同义事件组（一个逻辑事件在该平台下的宿主名字）
3. 对页面/应用配置的变换（注册到 PluginDriver）
4. 少量宿主 API（如 stopPullDownRefresh）
"""

from abc import ABC, abstractmethod
from typing import Any

from ..telemetry import get_logger

logger = get_logger(__name__)


class PlatformAdapter(ABC):
    """宿主平台适配器

    使用示例:
        adapter = AlipayAdapter(host=my_host_api)
        bootstrap(adapters=[adapter])
    """

    def __init__(self, host: Any = None):
        """初始化

        Args:
            host: 宿主 API 对象（例如 wx / my 全局对象），测试中可传 mock
        """
        self._host = host

    @property
    @abstractmethod
    def name(self) -> str:
        """适配器名称（如 "wechat", "alipay"）"""

    @property
    @abstractmethod
    def page_events(self) -> list[str]:
        """宿主会调用的页面事件（不含 onLoad / onUnload）"""

    @property
    @abstractmethod
    def app_events(self) -> list[str]:
        """宿主会调用的应用事件"""

    # 可选声明（有默认实现）

    @property
    def synonyms(self) -> dict[str, list[str]]:
        """逻辑事件 → 该平台下的宿主事件名"""
        return {}

    @property
    def result_policies(self) -> dict[str, str]:
        """按事件覆盖的结果合并策略"""
        return {}

    def transform_page_config(self, config: dict[str, Any]) -> dict[str, Any]:
        """页面配置变换（PluginDriver "page"）"""
        return config

    def transform_app_config(self, config: dict[str, Any]) -> dict[str, Any]:
        """应用配置变换（PluginDriver "app"）"""
        return config

    # 宿主 API

    def stop_pull_down_refresh(self) -> None:
        """通知宿主结束下拉刷新动画"""
        if self._host is None:
            logger.debug(f"[{self.name}] stopPullDownRefresh skipped: no host")
            return
        self._host.stopPullDownRefresh()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
