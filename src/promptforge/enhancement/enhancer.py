"""Main prompt enhancement orchestrator."""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Mapping, Union

from ..core.config import get_settings
from ..core.exceptions import ValidationError
from ..core.types import (
    FrameworkCandidate,
    PromptParameters,
    EnhancedPrompt,
    UseCase,
)
from ..control.library import PromptStore, SavedPrompt

from .analyzers.framework_detector import FrameworkDetector
from .analyzers.use_case_classifier import classify_use_case
from .transformers.prompt_transformer import PromptTransformer

logger = logging.getLogger(__name__)

ParametersLike = Union[PromptParameters, Mapping[str, Any]]


@dataclass
class EnhancementConfig:
    """Configuration for prompt enhancement."""
    default_parameters: Optional[PromptParameters] = None
    auto_save: bool = True

    @classmethod
    def from_settings(cls) -> "EnhancementConfig":
        """Build from the global settings."""
        engine = get_settings().engine
        return cls(
            default_parameters=PromptParameters(
                audience_level=engine.default_audience,
                tone=engine.default_tone,
                output_format=engine.default_format,
                word_count=engine.default_word_count,
            ),
            auto_save=engine.auto_save,
        )


@dataclass
class DetailedEnhancementResult:
    """Detailed result from the enhancement flow."""
    enhanced: EnhancedPrompt
    candidates: List[FrameworkCandidate] = field(default_factory=list)
    record_id: Optional[str] = None
    processing_time_ms: float = 0.0

    @property
    def final_prompt(self) -> str:
        return self.enhanced.final_prompt

    @property
    def use_case(self) -> UseCase:
        return self.enhanced.use_case

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.enhanced.to_dict(),
            "candidates": [c.to_dict() for c in self.candidates],
            "recordId": self.record_id,
            "processingTimeMs": self.processing_time_ms,
        }


class PromptEnhancer:
    """
    Runs framework detection, use-case classification and prompt
    transformation in sequence, and optionally saves the result.
    """

    def __init__(
        self,
        store: Optional[PromptStore] = None,
        config: Optional[EnhancementConfig] = None
    ):
        """
        Initialize the prompt enhancer.

        Args:
            store: Optional prompt library; results are saved when a user_id is given
            config: Enhancement configuration (defaults from settings)
        """
        self.config = config or EnhancementConfig.from_settings()
        self.store = store
        self.detector = FrameworkDetector()
        self.transformer = PromptTransformer()

    def enhance(
        self,
        text: str,
        parameters: Optional[ParametersLike] = None,
        user_id: Optional[str] = None,
        save: Optional[bool] = None
    ) -> DetailedEnhancementResult:
        """
        Enhance a prompt.

        Args:
            text: Raw user input
            parameters: Prompt parameters (defaults from config)
            user_id: Owner of the saved record
            save: Override config.auto_save

        Returns:
            DetailedEnhancementResult

        Raises:
            ValidationError: On blank input or malformed parameters
        """
        start_time = time.perf_counter()

        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Input text is empty", validation_errors=["input is required"])

        params = self._resolve_parameters(parameters)
        candidates = self.detector.detect(text)
        use_case = classify_use_case(text)
        enhanced = self.transformer.transform(text, candidates, params, use_case)

        logger.debug(
            "Enhanced prompt: use_case=%s frameworks=%s",
            use_case.value, enhanced.framework_names
        )

        result = DetailedEnhancementResult(enhanced=enhanced, candidates=candidates)

        should_save = self.config.auto_save if save is None else save
        if should_save and self.store is not None and user_id:
            result.record_id = self.store.save(SavedPrompt.from_enhanced(enhanced, user_id))

        result.processing_time_ms = (time.perf_counter() - start_time) * 1000
        return result

    def analyze(self, text: str) -> Dict[str, Any]:
        """
        Detect frameworks and use case without transforming.

        Args:
            text: Raw user input

        Returns:
            Analysis results dictionary
        """
        candidates = self.detector.detect(text)
        return {
            "use_case": classify_use_case(text).value,
            "candidates": [c.to_dict() for c in candidates],
            "applicable": [c.framework.value for c in candidates if c.applicable],
            "statistics": {
                "length": len(text),
                "word_count": len(text.split()),
            },
        }

    def list_frameworks(self) -> List[Dict[str, Any]]:
        """List the framework catalog."""
        return self.detector.catalog()

    def _resolve_parameters(self, parameters: Optional[ParametersLike]) -> PromptParameters:
        if parameters is None:
            if self.config.default_parameters is None:
                raise ValidationError("Prompt parameters are required")
            return self.config.default_parameters
        return PromptParameters.from_dict(parameters)


# Convenience functions

def enhance(text: str, parameters: Optional[ParametersLike] = None) -> EnhancedPrompt:
    """
    Convenience function to enhance a prompt without saving it.

    Args:
        text: Raw user input
        parameters: Prompt parameters (defaults from settings)

    Returns:
        EnhancedPrompt
    """
    return PromptEnhancer().enhance(text, parameters, save=False).enhanced


def analyze_prompt(text: str) -> Dict[str, Any]:
    """Convenience function to analyze a prompt."""
    return PromptEnhancer().analyze(text)
