"""MemoryEngine - 内存渲染引擎

不做 diff，只负责：
- 挂载：实例化 class 组件、调用函数组件、递归挂载子元素
- 更新：同步重新渲染某个节点，子元素按位置 + 类型 + key 复用
- 卸载：先父后子触发 component_will_unmount，再执行 hook cleanup
- 挂载中途抛出异常时撤销已完成的部分，再向上抛出

生命周期顺序（与宿主观测顺序一致）：
    component_will_mount → render → 子组件挂载 → component_did_mount
"""

import itertools
from collections.abc import Callable
from typing import Any

from ..telemetry import get_logger
from .engine import Container, Element, RenderEngine, pop_rendering, push_rendering

logger = get_logger(__name__)

# 全局节点计数器
_node_counter = itertools.count(1)


class Component:
    """Class 组件基类

    子类实现 render()，按需覆盖生命周期方法。页面根组件还可以定义
    on_show / on_share_app_message 等方法，由 PageRuntime 挂载后注册。
    """

    def __init__(self, props: dict[str, Any]):
        self.props = props
        self.state: dict[str, Any] = {}
        self._node: "Node | None" = None

    def render(self) -> Any:
        raise NotImplementedError

    def component_will_mount(self) -> None:
        pass

    def component_did_mount(self) -> None:
        pass

    def component_did_update(self) -> None:
        pass

    def component_will_unmount(self) -> None:
        pass

    def set_state(self, updates: dict[str, Any]) -> None:
        """合并 state 并同步重新渲染"""
        self.state = {**self.state, **updates}
        self.force_update()

    def force_update(self) -> None:
        node = self._node
        if node is None or not node.mounted:
            logger.debug(f"[Component] force_update on unmounted {type(self).__name__} ignored")
            return
        node.engine.update(node)


class Node:
    """挂载后的组件节点

    Attributes:
        id: 节点唯一 ID（同一组件出现多次时各自独立）
        element: 当前元素
        instance: class 组件实例（函数组件/宿主元素为 None）
        children: 子节点
        mounted: 是否处于挂载状态
    """

    def __init__(self, element: Element, parent: "Node | None", container: Container, engine: "MemoryEngine"):
        self.id = f"{element.name}#{next(_node_counter)}"
        self.element = element
        self.parent = parent
        self.container = container
        self.engine = engine
        self.instance: Component | None = None
        self.children: list[Node] = []
        self.mounted = False
        self._slots: list[dict[str, Any]] = []
        self._cursor = 0
        self._cleanups: list[Callable[[], None]] = []

    @property
    def is_host(self) -> bool:
        return isinstance(self.element.type, str)

    def hook_slot(self) -> tuple[int, dict[str, Any]]:
        """当前 hook 调用位置对应的持久槽位"""
        index = self._cursor
        self._cursor += 1
        if index == len(self._slots):
            self._slots.append({})
        return index, self._slots[index]

    def add_cleanup(self, cleanup: Callable[[], None]) -> None:
        """注册卸载时执行的清理函数"""
        self._cleanups.append(cleanup)

    def walk(self):
        """深度优先遍历（含自身）"""
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"<Node {self.id} mounted={self.mounted}>"


def _flatten(output: Any) -> list[Element]:
    """render 输出 → 子元素列表（忽略文本、None、bool）"""
    if output is None or isinstance(output, (bool, str, int, float)):
        return []
    if isinstance(output, Element):
        return [output]
    if isinstance(output, (list, tuple)):
        elements: list[Element] = []
        for item in output:
            elements.extend(_flatten(item))
        return elements
    raise TypeError(f"Cannot render {type(output).__name__}")


class MemoryEngine(RenderEngine):
    """内存渲染引擎"""

    # === 挂载 ===

    def mount(self, element: Element, container: Container) -> Node:
        root = self._mount_node(element, None, container)
        container.root = root
        return root

    def _mount_node(self, element: Element, parent: Node | None, container: Container) -> Node:
        node = Node(element, parent, container, self)
        if isinstance(element.type, type) and issubclass(element.type, Component):
            node.instance = element.type(element.props)
            node.instance._node = node
            node.instance.component_will_mount()

        children: list[Node] = []
        try:
            for child in self._render(node):
                children.append(self._mount_node(child, node, container))
        except Exception:
            # 撤销部分挂载：已完成的子节点正常卸载，本节点只执行 hook cleanup
            for child in children:
                self._unmount_node(child)
            self._run_cleanups(node)
            raise
        node.children = children
        node.mounted = True

        if node.instance is not None:
            node.instance.component_did_mount()
        return node

    def _render(self, node: Node) -> list[Element]:
        element = node.element
        if node.is_host:
            return _flatten(element.props.get("children"))

        node._cursor = 0
        push_rendering(node)
        try:
            if node.instance is not None:
                output = node.instance.render()
            else:
                output = element.type(element.props)
        finally:
            pop_rendering()
        return _flatten(output)

    # === 更新 ===

    def update(self, handle: Node) -> None:
        if not handle.mounted:
            logger.debug(f"[MemoryEngine] update on unmounted {handle.id} ignored")
            return
        self._reconcile(handle, self._render(handle))
        if handle.instance is not None:
            handle.instance.component_did_update()

    def _reconcile(self, node: Node, elements: list[Element]) -> None:
        old_children = node.children
        children: list[Node] = []
        for index, element in enumerate(elements):
            previous = old_children[index] if index < len(old_children) else None
            if previous is not None and previous.element.type is element.type and previous.element.key == element.key:
                previous.element = element
                if previous.instance is not None:
                    previous.instance.props = element.props
                self.update(previous)
                children.append(previous)
            else:
                if previous is not None:
                    self._unmount_node(previous)
                children.append(self._mount_node(element, node, node.container))
        for stale in old_children[len(elements):]:
            self._unmount_node(stale)
        node.children = children

    # === 卸载 ===

    def unmount(self, handle: Node) -> None:
        if not handle.mounted:
            return
        self._unmount_node(handle)
        if handle.container.root is handle:
            handle.container.root = None

    def _unmount_node(self, node: Node) -> None:
        if node.instance is not None:
            node.instance.component_will_unmount()
        self._run_cleanups(node)
        for child in node.children:
            self._unmount_node(child)
        node.mounted = False

    @staticmethod
    def _run_cleanups(node: Node) -> None:
        cleanups, node._cleanups = node._cleanups, []
        for cleanup in cleanups:
            cleanup()
