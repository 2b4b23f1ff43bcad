"""pagebridge 配置

配置分为以下几类：
- 事件配置：内置页面/应用事件、别名
- 平台配置：默认启用的宿主平台
- 页面配置：生命周期历史长度、页面 ID 前缀
- 日志/指标配置
"""

import os

# === 事件配置 ===
# 宿主始终会调用的页面事件（不受平台声明影响）
BUILTIN_PAGE_EVENTS = ["onLoad", "onUnload"]

# 平台未声明时的默认透传页面事件
DEFAULT_PAGE_EVENTS = [
    "onShow",
    "onHide",
    "onReady",
    "onPullDownRefresh",
    "onReachBottom",
    "onPageScroll",
    "onShareAppMessage",
    "onResize",
    "onTabItemTap",
]

# 平台未声明时的默认应用事件
DEFAULT_APP_EVENTS = [
    "onLaunch",
    "onShow",
    "onHide",
    "onError",
    "onPageNotFound",
]

# 事件别名：hook / class 方法名 → 宿主事件名
EVENT_ALIASES = {
    "load": "onLoad",
    "unload": "onUnload",
}

# === 平台配置 ===
# 逗号分隔的平台名（wechat, alipay, toutiao）
TARGETS = [
    name.strip()
    for name in os.environ.get("PAGEBRIDGE_TARGETS", "wechat").split(",")
    if name.strip()
]

# === 结果合并配置 ===
DEFAULT_RESULT_POLICY = "first"  # first | last | merge

# === 页面配置 ===
PAGE_ID_PREFIX = "page"  # 页面 ID 前缀: page:<path>:<n>
LIFECYCLE_HISTORY_MAX_LENGTH = 50  # 生命周期历史最大长度

# === 日志配置 ===
LOG_LEVEL = os.environ.get("PAGEBRIDGE_LOG_LEVEL", "INFO")  # 日志级别
LOG_MAX_PAYLOAD_LEN = 80  # payload 日志截断长度

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集
