"""Template composition of the final enhanced prompt."""

from typing import Iterable, List, Mapping, Any, Union

from ...core.exceptions import ValidationError
from ...core.types import (
    FrameworkId,
    FrameworkCandidate,
    PromptParameters,
    EnhancedPrompt,
    UseCase,
    coerce_enum,
)
from .scaffolds import (
    USE_CASE_FRAMING,
    FORMAT_INSTRUCTIONS,
    TONE_REGISTERS,
    AUDIENCE_REGISTERS,
    build_context,
    indefinite_article,
    render_scaffold,
)

FRAMING_SECTION = "use_case_framing"
CLOSING_SECTION = "output_requirements"


def _validate_text(text: Any) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(
            "Input text must be a non-empty string",
            validation_errors=["input is required"]
        )
    return text


def _validate_candidates(candidates: Iterable[FrameworkCandidate]) -> List[FrameworkCandidate]:
    if candidates is None:
        raise ValidationError("Framework candidates are required")
    checked = list(candidates)
    bad = [i for i, c in enumerate(checked) if not isinstance(c, FrameworkCandidate)]
    if bad:
        raise ValidationError(
            "Candidates must be FrameworkCandidate instances",
            validation_errors=[f"candidate {i} has invalid type" for i in bad]
        )
    return checked


def _validate_parameters(
    parameters: Union[PromptParameters, Mapping[str, Any], None]
) -> PromptParameters:
    if parameters is None:
        raise ValidationError(
            "Prompt parameters are required",
            validation_errors=["parameters is required"]
        )
    return PromptParameters.from_dict(parameters)


def _framing_block(text: str, use_case: UseCase) -> str:
    return f"{USE_CASE_FRAMING[use_case]}\n\nRequest: {text.strip()}"


def _closing_block(parameters: PromptParameters) -> str:
    audience = parameters.audience_level.value
    lines = [
        "## Output Requirements",
        "- Format: " + FORMAT_INSTRUCTIONS[parameters.output_format].format(
            word_count=parameters.word_count
        ),
        f"- Length: Aim for approximately {parameters.word_count} words.",
        f"- Tone: Use a {parameters.tone.value} tone: {TONE_REGISTERS[parameters.tone]}.",
        f"- Audience: Write for {indefinite_article(audience)} {audience} "
        f"audience. {AUDIENCE_REGISTERS[parameters.audience_level]}",
    ]
    return "\n".join(lines)


def transform_prompt(
    text: str,
    candidates: Iterable[FrameworkCandidate],
    parameters: Union[PromptParameters, Mapping[str, Any]],
    use_case: Union[UseCase, str]
) -> EnhancedPrompt:
    """
    Synthesize the enhanced prompt.

    Blocks are composed in a fixed order: use-case framing, one scaffold per
    applicable framework in detector order, then the output requirements.
    With no applicable framework only the framing and requirements remain.

    Args:
        text: Original user input
        candidates: Detector output, in detector order
        parameters: PromptParameters or a mapping with the same fields
        use_case: UseCase member or its string value

    Returns:
        EnhancedPrompt

    Raises:
        ValidationError: If any structured input is missing or malformed
    """
    text = _validate_text(text)
    checked = _validate_candidates(candidates)
    params = _validate_parameters(parameters)
    use_case = coerce_enum(UseCase, use_case, "use_case")

    applied = tuple(c.framework for c in checked if c.applicable)
    context = build_context(text.strip(), params, use_case)

    blocks = [_framing_block(text, use_case)]
    sections = [FRAMING_SECTION]
    for framework in applied:
        blocks.append(render_scaffold(framework, context))
        sections.append(f"scaffold:{framework.value}")
    blocks.append(_closing_block(params))
    sections.append(CLOSING_SECTION)

    return EnhancedPrompt(
        final_prompt="\n\n".join(blocks),
        frameworks_applied=applied,
        use_case=use_case,
        source_input=text,
        parameters=params,
        sections=tuple(sections),
    )


class PromptTransformer:
    """
    Builds enhanced prompts from detector output and user parameters.

    Stateless; every call is a pure function of its arguments.
    """

    def transform(
        self,
        text: str,
        candidates: Iterable[FrameworkCandidate],
        parameters: Union[PromptParameters, Mapping[str, Any]],
        use_case: Union[UseCase, str]
    ) -> EnhancedPrompt:
        """Synthesize the enhanced prompt. See :func:`transform_prompt`."""
        return transform_prompt(text, candidates, parameters, use_case)

    def preview_scaffold(
        self,
        framework: Union[FrameworkId, str],
        parameters: Union[PromptParameters, Mapping[str, Any]],
        use_case: Union[UseCase, str] = UseCase.GENERAL,
        text: str = "<your request>"
    ) -> str:
        """Render a single framework scaffold for inspection."""
        framework = coerce_enum(FrameworkId, framework, "framework")
        params = _validate_parameters(parameters)
        use_case = coerce_enum(UseCase, use_case, "use_case")
        return render_scaffold(framework, build_context(text, params, use_case))
