"""调试输出

用 rich 表格展示 registry 订阅和页面生命周期历史。
"""

from rich.console import Console
from rich.table import Table

from .events.registry import EventRegistry
from .page.runtime import PageRuntime


def registry_table(registry: EventRegistry, title: str | None = None) -> Table:
    """registry 订阅表：事件 / 顺序 / subscriber_id"""
    table = Table(title=title or f"Registry {registry.owner}")
    table.add_column("event")
    table.add_column("#", justify="right")
    table.add_column("subscriber")
    for event in registry.events():
        for index, subscriber_id in enumerate(registry.subscribers(event)):
            table.add_row(event, str(index), subscriber_id)
    return table


def history_table(page: PageRuntime) -> Table:
    """页面生命周期历史"""
    table = Table(title=f"History {page.page_id or page.path}")
    table.add_column("event")
    table.add_column("from")
    table.add_column("to")
    table.add_column("subscribers", justify="right")
    table.add_column("ok")
    for entry in page.history:
        table.add_row(
            entry.event,
            entry.from_state.value,
            entry.to_state.value,
            str(entry.subscribers),
            "✓" if entry.success else "✗",
        )
    return table


def print_page(page: PageRuntime, console: Console | None = None) -> None:
    """打印页面订阅和历史（调试用）"""
    console = console or Console()
    console.print(registry_table(page.registry))
    console.print(history_table(page))
