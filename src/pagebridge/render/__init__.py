"""Render 模块 - 渲染引擎接口与内存实现

- engine: Element / h / Container / RenderEngine / current_node
- memory: MemoryEngine / Component / Node
"""

from .engine import Container, Element, RenderEngine, current_node, h
from .memory import Component, MemoryEngine, Node

__all__ = [
    "Component",
    "Container",
    "Element",
    "MemoryEngine",
    "Node",
    "RenderEngine",
    "current_node",
    "h",
]
