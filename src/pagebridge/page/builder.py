"""Page config builder

Builds the host-shaped page configuration: one method per declared event
plus the owning PageRuntime, run through the plugin driver's "page"
pipeline.
"""

from typing import Any

from ..core.ids import PageIdAllocator
from ..render.engine import RenderEngine
from ..runtime.bootstrap import RuntimeComponents, get_runtime
from ..telemetry import get_logger
from .runtime import PageRuntime

logger = get_logger(__name__)


def create_page_config(
    component: Any,
    path: str,
    *,
    runtime: RuntimeComponents | None = None,
    engine: RenderEngine | None = None,
    allocator: PageIdAllocator | None = None,
) -> dict[str, Any]:
    """Create a page configuration for the host.

    Args:
        component: Page root component (function or Component subclass)
        path: Page path, e.g. "pages/index/index"
        runtime: Runtime components, default from get_runtime()
        engine: Rendering engine, default MemoryEngine
        allocator: Page ID allocator, default the global allocator

    Returns:
        Config dict with "route", "page", "data" and one callable per event
    """
    runtime = runtime or get_runtime()
    page = PageRuntime(component, path, runtime, engine=engine, allocator=allocator)

    config: dict[str, Any] = {
        "route": page.path,
        "page": page,
        "data": {},
    }
    for event in page.events:
        config[event] = page.handler(event)

    logger.debug(f"[PageConfig] {page.path}: {len(page.events)} event(s)")
    return runtime.plugin_driver.run("page", config)
