"""API routes."""

from .enhancement import router as enhancement_router
from .prompts import router as prompts_router
from .health import router as health_router

__all__ = [
    "enhancement_router",
    "prompts_router",
    "health_router",
]
