"""API response schemas."""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class FrameworkCandidateResponse(BaseModel):
    """Detection verdict for one framework."""
    framework: str
    applicable: bool
    confidence: float
    rationale: str
    signals: List[str] = Field(default_factory=list)


class EnhanceResponse(BaseModel):
    """Response for prompt enhancement."""
    success: bool
    original_prompt: str
    enhanced_prompt: str
    frameworks_applied: List[str] = Field(default_factory=list)
    use_case: str
    parameters: Dict[str, Any] = Field(default_factory=dict)
    sections: List[str] = Field(default_factory=list)
    candidates: List[FrameworkCandidateResponse] = Field(default_factory=list)
    record_id: Optional[str] = None
    processing_time_ms: float = 0.0


class DetectResponse(BaseModel):
    """Response for framework detection."""
    success: bool
    use_case: str
    candidates: List[FrameworkCandidateResponse] = Field(default_factory=list)
    applicable: List[str] = Field(default_factory=list)


class FrameworkInfo(BaseModel):
    """Catalog entry."""
    id: str
    name: str
    components: List[str] = Field(default_factory=list)
    description: str
    keywords: List[str] = Field(default_factory=list)


class FrameworkListResponse(BaseModel):
    """Framework catalog listing."""
    frameworks: List[FrameworkInfo] = Field(default_factory=list)
    total: int = 0


class SavedPromptResponse(BaseModel):
    """A stored prompt."""
    id: str
    original_input: str
    transformed_prompt: str
    frameworks: List[str] = Field(default_factory=list)
    parameters: Dict[str, Any] = Field(default_factory=dict)
    use_case: str
    user_id: str
    created_at: str


class PromptListResponse(BaseModel):
    """List of stored prompts, newest first."""
    prompts: List[SavedPromptResponse] = Field(default_factory=list)
    total: int = 0
    framework_usage: Dict[str, int] = Field(default_factory=dict)


class SaveResponse(BaseModel):
    """Response for a saved prompt."""
    success: bool
    id: str


class HealthResponse(BaseModel):
    """Response for health check."""
    status: str
    version: str
    components: Dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
