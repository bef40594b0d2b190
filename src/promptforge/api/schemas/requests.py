"""API request schemas."""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class EnhanceRequest(BaseModel):
    """Request for prompt enhancement."""
    prompt: str = Field(..., description="The raw instruction to enhance")
    audience_level: Optional[str] = Field(
        None,
        description="Audience level: beginner, intermediate, expert"
    )
    tone: Optional[str] = Field(
        None,
        description="Tone: professional, casual, friendly, formal, persuasive, enthusiastic"
    )
    output_format: Optional[str] = Field(
        None,
        description="Output format: article, list, code, email, summary, outline, social_post"
    )
    word_count: Optional[int] = Field(
        None,
        gt=0,
        description="Target length in words"
    )
    user_id: Optional[str] = Field(
        None,
        description="Owner id; the result is saved to the library when given"
    )
    save: Optional[bool] = Field(
        None,
        description="Whether to save the result (default: PF_AUTO_SAVE)"
    )


class DetectRequest(BaseModel):
    """Request for framework detection."""
    prompt: str = Field(..., description="The text to classify")


class SavePromptRequest(BaseModel):
    """Request to store a prompt in the library."""
    original_input: str = Field(..., min_length=1)
    transformed_prompt: str = Field(..., min_length=1)
    frameworks: List[str] = Field(default_factory=list)
    parameters: Dict[str, Any] = Field(default_factory=dict)
    use_case: str = Field("general")
    user_id: str = Field(..., min_length=1)
