"""Plugin 模块 - 平台配置变换管道"""

from .driver import PLUGIN_KINDS, ConfigTransform, PluginDriver, plugin_driver

__all__ = ["PLUGIN_KINDS", "ConfigTransform", "PluginDriver", "plugin_driver"]
