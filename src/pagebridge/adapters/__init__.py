"""Platform Adapters 模块

提供宿主平台适配器接口和实现：
- PlatformAdapter: 适配器基类
- WechatAdapter, AlipayAdapter, ToutiaoAdapter: 具体平台
- create_adapter / create_adapters: 适配器工厂函数
"""

from .alipay import AlipayAdapter
from .base import PlatformAdapter
from .factory import create_adapter, create_adapters, detect_targets
from .toutiao import ToutiaoAdapter
from .wechat import WechatAdapter

__all__ = [
    "PlatformAdapter",
    "WechatAdapter",
    "AlipayAdapter",
    "ToutiaoAdapter",
    "create_adapter",
    "create_adapters",
    "detect_targets",
]
