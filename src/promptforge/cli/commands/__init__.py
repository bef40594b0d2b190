"""CLI commands."""

from .enhance import enhance, detect, list_frameworks
from .library import history

__all__ = [
    "enhance",
    "detect",
    "list_frameworks",
    "history",
]
