"""Core module - page identity utilities"""

from .ids import (
    PageIdAllocator,
    generate_page_id,
    normalize_path,
    page_id_allocator,
    reset_page_id,
)

__all__ = [
    "PageIdAllocator",
    "generate_page_id",
    "normalize_path",
    "page_id_allocator",
    "reset_page_id",
]
