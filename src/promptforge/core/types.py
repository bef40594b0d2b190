"""Core type definitions for the prompt enhancement engine."""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple, Type, Mapping
from enum import Enum

from .exceptions import ValidationError


class FrameworkId(Enum):
    """Prompting frameworks known to the detector, in catalog order."""
    TCREI = "TCREI"   # Task, Context, Role, Examples, Iterate
    RSTI = "RSTI"     # Request, Style, Tone, Intent
    TFCDC = "TFCDC"   # Technical scope, Format, Content, Detail, Constraints


class AudienceLevel(Enum):
    """Reader expertise the enhanced prompt should target."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class Tone(Enum):
    """Phrasing register for the generated content."""
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    FRIENDLY = "friendly"
    FORMAL = "formal"
    PERSUASIVE = "persuasive"
    ENTHUSIASTIC = "enthusiastic"


class OutputFormat(Enum):
    """Shape of the output requested from the model."""
    ARTICLE = "article"
    LIST = "list"
    CODE = "code"
    EMAIL = "email"
    SUMMARY = "summary"
    OUTLINE = "outline"
    SOCIAL_POST = "social_post"


class UseCase(Enum):
    """Coarse intent label used to pick the opening framing."""
    MARKETING = "marketing"
    TECHNICAL = "technical"
    CREATIVE = "creative"
    ANALYSIS = "analysis"
    GENERAL = "general"


def coerce_enum(enum_cls: Type[Enum], value: Any, field_name: str) -> Enum:
    """Convert a raw value to ``enum_cls``, raising ValidationError if unknown."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        raw = value.strip()
        for candidate in (raw, raw.lower(), raw.upper()):
            try:
                return enum_cls(candidate)
            except ValueError:
                continue
    valid = [member.value for member in enum_cls]
    raise ValidationError(
        f"Invalid {field_name}: {value!r}",
        validation_errors=[f"{field_name} must be one of: {', '.join(valid)}"]
    )


@dataclass(frozen=True)
class FrameworkCandidate:
    """Detection verdict for a single catalog framework."""
    framework: FrameworkId
    applicable: bool
    confidence: float = 0.0
    rationale: str = ""
    signals: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "framework": self.framework.value,
            "applicable": self.applicable,
            "confidence": self.confidence,
            "rationale": self.rationale,
            "signals": list(self.signals),
        }


# camelCase (wire) name -> snake_case attribute
_PARAMETER_FIELDS = {
    "audienceLevel": "audience_level",
    "tone": "tone",
    "outputFormat": "output_format",
    "wordCount": "word_count",
}


@dataclass(frozen=True)
class PromptParameters:
    """
    User-chosen parameters for prompt synthesis.

    String values are coerced to their enums; unknown values and
    non-positive word counts raise ValidationError.
    """
    audience_level: AudienceLevel
    tone: Tone
    output_format: OutputFormat
    word_count: int

    def __post_init__(self):
        object.__setattr__(
            self, "audience_level",
            coerce_enum(AudienceLevel, self.audience_level, "audience_level")
        )
        object.__setattr__(self, "tone", coerce_enum(Tone, self.tone, "tone"))
        object.__setattr__(
            self, "output_format",
            coerce_enum(OutputFormat, self.output_format, "output_format")
        )
        if (
            isinstance(self.word_count, bool)
            or not isinstance(self.word_count, int)
            or self.word_count <= 0
        ):
            raise ValidationError(
                f"Invalid word_count: {self.word_count!r}",
                validation_errors=["word_count must be a positive integer"]
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PromptParameters":
        """Create from a mapping using camelCase or snake_case keys."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Parameters must be a mapping, got {type(data).__name__}"
            )

        values: Dict[str, Any] = {}
        missing: List[str] = []
        for wire_name, attr in _PARAMETER_FIELDS.items():
            if attr in data and data[attr] is not None:
                values[attr] = data[attr]
            elif wire_name in data and data[wire_name] is not None:
                values[attr] = data[wire_name]
            else:
                missing.append(attr)

        if missing:
            raise ValidationError(
                "Missing required parameter fields",
                validation_errors=[f"{name} is required" for name in missing]
            )
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase form used by storage and the API."""
        return {
            "audienceLevel": self.audience_level.value,
            "tone": self.tone.value,
            "outputFormat": self.output_format.value,
            "wordCount": self.word_count,
        }


@dataclass(frozen=True)
class EnhancedPrompt:
    """Result of a single prompt transformation."""
    final_prompt: str
    frameworks_applied: Tuple[FrameworkId, ...]
    use_case: UseCase
    source_input: str
    parameters: Optional[PromptParameters] = None
    sections: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def framework_names(self) -> List[str]:
        """Applied framework identifiers as plain strings."""
        return [f.value for f in self.frameworks_applied]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "finalPrompt": self.final_prompt,
            "frameworksApplied": self.framework_names,
            "useCase": self.use_case.value,
            "sourceInput": self.source_input,
            "parameters": self.parameters.to_dict() if self.parameters else None,
            "sections": list(self.sections),
        }
