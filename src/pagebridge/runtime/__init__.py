"""Runtime module - Bootstrap and runtime options"""

from .bootstrap import (
    RuntimeComponents,
    bootstrap,
    get_current_components,
    get_runtime,
)
from .options import RuntimeOptions

__all__ = [
    "bootstrap",
    "get_current_components",
    "get_runtime",
    "RuntimeComponents",
    "RuntimeOptions",
]
