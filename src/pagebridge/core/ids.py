"""Page ID utilities

Page instances are identified by a namespaced ID built from the page path
and a per-path occurrence counter:

- page:pages/index/index:0   - first mount of pages/index/index
- page:pages/index/index:1   - second mount of the same page

The counter is process-wide state. ``reset()`` restores the baseline so
repeated test runs produce the same IDs. Resetting while pages are still
live is a precondition violation and raises ``AllocatorStateError``.
"""

from dataclasses import dataclass

from ..config import PAGE_ID_PREFIX
from ..exceptions import AllocatorStateError
from ..telemetry import get_logger

logger = get_logger(__name__)


@dataclass
class ParsedPageId:
    """Parsed page ID."""

    path: str
    occurrence: int

    def __str__(self) -> str:
        return f"{PAGE_ID_PREFIX}:{self.path}:{self.occurrence}"


def normalize_path(page_path: str) -> str:
    """Normalize a page path.

    Strips surrounding whitespace and slashes, collapses duplicate
    separators and converts Windows separators.

    Args:
        page_path: Page path as declared by the app, e.g. "/pages/index/index"

    Returns:
        Normalized path like "pages/index/index"
    """
    parts = [part for part in page_path.strip().replace("\\", "/").split("/") if part]
    return "/".join(parts)


def parse_page_id(page_id: str) -> ParsedPageId | None:
    """Parse a page ID into path and occurrence.

    Returns:
        ParsedPageId, or None if the ID is not a page ID
    """
    prefix, sep, rest = page_id.partition(":")
    if prefix != PAGE_ID_PREFIX or not sep:
        return None
    path, sep, occurrence = rest.rpartition(":")
    if not sep or not occurrence.isdigit():
        return None
    return ParsedPageId(path=path, occurrence=int(occurrence))


def short_id(page_id: str | None, length: int = 24) -> str:
    """Get a short display version of a page ID for logging."""
    if not page_id:
        return "unmounted"
    parsed = parse_page_id(page_id)
    text = f"{parsed.path}:{parsed.occurrence}" if parsed else page_id
    return text if len(text) <= length else "..." + text[-(length - 3):]


class PageIdAllocator:
    """Allocates stable page IDs.

    ``allocate()`` only composes IDs. Page runtimes additionally call
    ``acquire()``/``release()`` so the allocator knows which IDs are live.
    """

    def __init__(self):
        self._counters: dict[str, int] = {}
        self._live: set[str] = set()

    def allocate(self, page_path: str) -> str:
        """Allocate the next ID for a page path.

        Args:
            page_path: Page path (normalized before use)

        Returns:
            Page ID like "page:pages/index/index:0"
        """
        path = normalize_path(page_path)
        occurrence = self._counters.get(path, 0)
        self._counters[path] = occurrence + 1
        return str(ParsedPageId(path=path, occurrence=occurrence))

    def acquire(self, page_id: str) -> None:
        """Mark a page ID as live."""
        self._live.add(page_id)

    def release(self, page_id: str) -> None:
        """Mark a page ID as no longer live (idempotent)."""
        self._live.discard(page_id)

    @property
    def live_ids(self) -> list[str]:
        return sorted(self._live)

    def reset(self, force: bool = False) -> None:
        """Reset all counters to the baseline.

        Args:
            force: Also drop live IDs instead of raising (test teardown only)

        Raises:
            AllocatorStateError: If pages are still live and force is False
        """
        if self._live and not force:
            live_ids = self.live_ids
            logger.error(f"[PageIdAllocator] reset() with live pages: {live_ids}")
            raise AllocatorStateError(live_ids)
        if self._live:
            logger.warning(f"[PageIdAllocator] Forced reset, dropping {len(self._live)} live page(s)")
        self._counters.clear()
        self._live.clear()


# 全局分配器
page_id_allocator = PageIdAllocator()


def generate_page_id(page_path: str) -> str:
    """Allocate a page ID from the global allocator."""
    return page_id_allocator.allocate(page_path)


def reset_page_id(force: bool = False) -> None:
    """Reset the global allocator."""
    page_id_allocator.reset(force=force)
