"""Shared FastAPI dependencies."""

from fastapi import Request

from ..control import PromptStore
from ..enhancement import PromptEnhancer


def get_store(request: Request) -> PromptStore:
    """Prompt library attached to the application."""
    return request.app.state.store


def get_enhancer(request: Request) -> PromptEnhancer:
    """Enhancer bound to the application's prompt library."""
    return PromptEnhancer(store=request.app.state.store)
