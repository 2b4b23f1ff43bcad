"""Rendering engine contract

The bridge does not reconcile trees itself. It relies on an engine that can:

- mount(element, container) -> handle   (fires mount-time lifecycle once)
- update(handle)                        (synchronous re-render / flush)
- unmount(handle)                       (fires unmount-time lifecycle once)

Hooks find the component that is currently rendering through
``current_node()``. Engines push/pop nodes around every render call.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class Element:
    """A component description: type + props.

    Attributes:
        type: Host tag (str), function component, or Component subclass
        props: Props dict; children live under props["children"]
        key: Optional key used when matching children across renders
    """

    type: Any
    props: dict[str, Any] = field(default_factory=dict)
    key: str | None = None

    @property
    def name(self) -> str:
        if isinstance(self.type, str):
            return self.type
        return getattr(self.type, "__name__", type(self.type).__name__)


def h(type_: Any, props: dict[str, Any] | None = None, *children: Any, key: str | None = None) -> Element:
    """Create an element.

    Example:
        h("view", None, h(Counter, {"start": 1}), "text")
    """
    props = dict(props or {})
    if children:
        props["children"] = list(children)
    return Element(type=type_, props=props, key=key)


class HookNode(Protocol):
    """What hooks need from a rendering node."""

    id: str
    container: "Container"

    def hook_slot(self) -> tuple[int, dict[str, Any]]: ...

    def add_cleanup(self, cleanup: Callable[[], None]) -> None: ...


@dataclass
class Container:
    """Off-host mount target.

    ``context`` is the owner of the tree (a PageRuntime for pages), which is
    how hooks reach the page's event registry.
    """

    context: Any = None
    root: Any = None


# Nodes currently rendering, innermost last
_rendering: list[HookNode] = []


def push_rendering(node: HookNode) -> None:
    _rendering.append(node)


def pop_rendering() -> None:
    _rendering.pop()


def current_node() -> HookNode | None:
    """The node whose render is in progress, or None outside render."""
    return _rendering[-1] if _rendering else None


class RenderEngine(ABC):
    """Rendering engine interface."""

    @abstractmethod
    def mount(self, element: Element, container: Container) -> Any:
        """Mount a tree into a container.

        Returns:
            Handle passed to update()/unmount()
        """

    @abstractmethod
    def update(self, handle: Any) -> None:
        """Synchronously re-render a mounted node."""

    @abstractmethod
    def unmount(self, handle: Any) -> None:
        """Unmount a tree. Must be idempotent."""
