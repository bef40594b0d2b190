"""Custom exceptions for the prompt enhancement system."""

from typing import Optional, Dict, Any


class PromptForgeError(Exception):
    """Base exception for all PromptForge errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(PromptForgeError):
    """Malformed input to the prompt transformer or orchestrator."""

    def __init__(
        self,
        message: str,
        validation_errors: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.validation_errors = validation_errors or []
        if validation_errors:
            self.details["validation_errors"] = validation_errors


class StorageError(PromptForgeError):
    """Error reading or writing the prompt library."""

    def __init__(
        self,
        message: str,
        record_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.record_id = record_id
        if record_id:
            self.details["record_id"] = record_id


class ConfigurationError(PromptForgeError):
    """Error in configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key
