"""Prompt enhancement module."""

from .enhancer import (
    PromptEnhancer,
    EnhancementConfig,
    DetailedEnhancementResult,
    enhance,
    analyze_prompt,
)
from .analyzers.framework_detector import FrameworkDetector, detect_frameworks
from .analyzers.use_case_classifier import classify_use_case
from .transformers.prompt_transformer import PromptTransformer, transform_prompt

__all__ = [
    # Main orchestrator
    "PromptEnhancer",
    "EnhancementConfig",
    "DetailedEnhancementResult",
    # Convenience functions
    "enhance",
    "analyze_prompt",
    # Analyzers
    "FrameworkDetector",
    "detect_frameworks",
    "classify_use_case",
    # Transformers
    "PromptTransformer",
    "transform_prompt",
]
