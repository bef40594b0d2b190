"""API schemas."""

from .requests import (
    EnhanceRequest,
    DetectRequest,
    SavePromptRequest,
)
from .responses import (
    FrameworkCandidateResponse,
    EnhanceResponse,
    DetectResponse,
    FrameworkInfo,
    FrameworkListResponse,
    SavedPromptResponse,
    PromptListResponse,
    SaveResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # Requests
    "EnhanceRequest",
    "DetectRequest",
    "SavePromptRequest",
    # Responses
    "FrameworkCandidateResponse",
    "EnhanceResponse",
    "DetectResponse",
    "FrameworkInfo",
    "FrameworkListResponse",
    "SavedPromptResponse",
    "PromptListResponse",
    "SaveResponse",
    "HealthResponse",
    "ErrorResponse",
]
