"""
PromptForge - framework-driven prompt enhancement.

Rewrites a free-text instruction into a structured prompt by detecting which
prompting frameworks (TCREI, RSTI, TFCDC) apply and composing an enhanced
prompt from the detected frameworks and user parameters.

Basic Usage:
    >>> from promptforge import detect_frameworks, classify_use_case, transform_prompt
    >>> text = "Help me write a blog post about coffee"
    >>> candidates = detect_frameworks(text)
    >>> enhanced = transform_prompt(
    ...     text,
    ...     candidates,
    ...     {"audienceLevel": "intermediate", "tone": "professional",
    ...      "outputFormat": "article", "wordCount": 800},
    ...     classify_use_case(text),
    ... )
    >>> print(enhanced.final_prompt)

With a prompt library:
    >>> from promptforge import PromptForge
    >>> pf = PromptForge()
    >>> result = pf.enhance("Write a product launch email", user_id="alice")
    >>> pf.history("alice")

For more control, use the individual modules:
    - promptforge.enhancement: Detection, classification and transformation
    - promptforge.control: Prompt library backends
    - promptforge.api: REST API server
    - promptforge.cli: Command-line interface
"""

from typing import Optional, Dict, Any, List

__version__ = "1.0.0"

from .core.types import (
    FrameworkId,
    FrameworkCandidate,
    AudienceLevel,
    Tone,
    OutputFormat,
    UseCase,
    PromptParameters,
    EnhancedPrompt,
)
from .core.exceptions import (
    PromptForgeError,
    ValidationError,
    StorageError,
    ConfigurationError,
)
from .enhancement import (
    PromptEnhancer,
    EnhancementConfig,
    DetailedEnhancementResult,
    detect_frameworks,
    classify_use_case,
    transform_prompt,
)
from .control import PromptStore, MemoryPromptStore, FilePromptStore, SavedPrompt


__all__ = [
    # Main class
    "PromptForge",
    # Core operations
    "detect_frameworks",
    "classify_use_case",
    "transform_prompt",
    # Types
    "FrameworkId",
    "FrameworkCandidate",
    "AudienceLevel",
    "Tone",
    "OutputFormat",
    "UseCase",
    "PromptParameters",
    "EnhancedPrompt",
    # Exceptions
    "PromptForgeError",
    "ValidationError",
    "StorageError",
    "ConfigurationError",
    # Enhancement
    "PromptEnhancer",
    "EnhancementConfig",
    "DetailedEnhancementResult",
    # Library
    "PromptStore",
    "MemoryPromptStore",
    "FilePromptStore",
    "SavedPrompt",
]


class PromptForge:
    """
    Unified interface for prompt enhancement and the prompt library.

    Example:
        >>> pf = PromptForge()
        >>> result = pf.enhance("Explain our API rate limits", tone="friendly")
        >>> result.enhanced.frameworks_applied
    """

    def __init__(
        self,
        store: Optional[PromptStore] = None,
        config: Optional[EnhancementConfig] = None
    ):
        """
        Initialize PromptForge.

        Args:
            store: Prompt library (default: in-memory)
            config: Enhancement configuration (default: from settings)
        """
        self.store = store if store is not None else MemoryPromptStore()
        self.enhancer = PromptEnhancer(store=self.store, config=config)

    def detect(self, text: str) -> List[FrameworkCandidate]:
        """Detect applicable frameworks."""
        return detect_frameworks(text)

    def classify(self, text: str) -> UseCase:
        """Classify the use case."""
        return classify_use_case(text)

    def enhance(
        self,
        text: str,
        audience_level: Optional[str] = None,
        tone: Optional[str] = None,
        output_format: Optional[str] = None,
        word_count: Optional[int] = None,
        user_id: Optional[str] = None,
        save: Optional[bool] = None
    ) -> DetailedEnhancementResult:
        """
        Enhance a prompt, filling unspecified parameters from the defaults.

        Args:
            text: Raw user input
            audience_level: beginner, intermediate or expert
            tone: Phrasing register
            output_format: Requested output shape
            word_count: Target length in words
            user_id: Save the result for this user
            save: Override auto-save

        Returns:
            DetailedEnhancementResult
        """
        defaults = self.enhancer.config.default_parameters
        base: Dict[str, Any] = defaults.to_dict() if defaults else {}
        overrides = {
            "audienceLevel": audience_level,
            "tone": tone,
            "outputFormat": output_format,
            "wordCount": word_count,
        }
        base.update({k: v for k, v in overrides.items() if v is not None})
        return self.enhancer.enhance(text, parameters=base, user_id=user_id, save=save)

    def history(self, user_id: str, limit: Optional[int] = None) -> List[SavedPrompt]:
        """Saved prompts for a user, newest first."""
        records = self.store.list_by_user(user_id)
        return records[:limit] if limit is not None else records

    def frameworks(self) -> List[Dict[str, Any]]:
        """The framework catalog."""
        return self.enhancer.list_frameworks()
