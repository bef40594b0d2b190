"""Core module - foundational types, configuration, and exceptions."""

from .types import (
    FrameworkId,
    FrameworkCandidate,
    AudienceLevel,
    Tone,
    OutputFormat,
    UseCase,
    PromptParameters,
    EnhancedPrompt,
)
from .config import Settings, get_settings, reload_settings
from .exceptions import (
    PromptForgeError,
    ValidationError,
    StorageError,
    ConfigurationError,
)
from .logging_config import configure_logging

__all__ = [
    # Types
    "FrameworkId",
    "FrameworkCandidate",
    "AudienceLevel",
    "Tone",
    "OutputFormat",
    "UseCase",
    "PromptParameters",
    "EnhancedPrompt",
    # Configuration
    "Settings",
    "get_settings",
    "reload_settings",
    "configure_logging",
    # Exceptions
    "PromptForgeError",
    "ValidationError",
    "StorageError",
    "ConfigurationError",
]
