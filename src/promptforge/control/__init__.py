"""Prompt library - persistence of enhanced prompts."""

from .library import (
    SavedPrompt,
    PromptStore,
    MemoryPromptStore,
    FilePromptStore,
    create_store,
)

__all__ = [
    "SavedPrompt",
    "PromptStore",
    "MemoryPromptStore",
    "FilePromptStore",
    "create_store",
]
