"""Rule-based detection of applicable prompting frameworks."""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Dict, Any, Tuple, Mapping

from ...core.types import FrameworkId, FrameworkCandidate


@dataclass(frozen=True)
class FrameworkRule:
    """Detection cues and display metadata for one framework."""
    name: str
    components: Tuple[str, ...]
    description: str
    keywords: Tuple[str, ...]
    min_length: int = 0             # 0 disables the length cue
    multi_sentence: bool = False
    question: bool = False
    formatting: bool = False


FRAMEWORK_CATALOG: Mapping[FrameworkId, FrameworkRule] = MappingProxyType({
    FrameworkId.TCREI: FrameworkRule(
        name="Task, Context, Role, Examples, Iterate",
        components=("Task", "Context", "Role", "Examples", "Iterate"),
        description="Frames a production request with an explicit task, "
                    "background context, an expert role and worked examples.",
        keywords=(
            "write", "create", "draft", "generate", "compose", "help me",
            "act as", "explain", "example", "plan", "design",
        ),
        min_length=160,
        multi_sentence=True,
    ),
    FrameworkId.RSTI: FrameworkRule(
        name="Request, Style, Tone, Intent",
        components=("Request", "Style", "Tone", "Intent"),
        description="Clarifies the request and pins down style, tone and "
                    "the underlying intent of audience-facing writing.",
        keywords=(
            "tone", "style", "voice", "casual", "formal", "professional",
            "friendly", "persuasive", "blog", "post", "email", "newsletter",
            "audience", "story", "caption",
        ),
        question=True,
    ),
    FrameworkId.TFCDC: FrameworkRule(
        name="Technical scope, Format, Content, Detail, Constraints",
        components=("Technical scope", "Format", "Content", "Detail", "Constraints"),
        description="Adds structure, required content, level of detail and "
                    "hard constraints for technical or format-sensitive output.",
        keywords=(
            "code", "api", "technical", "documentation", "function",
            "endpoint", "format", "json", "table", "list", "bullet",
            "step-by-step", "steps", "schema", "sql", "spec", "report",
        ),
        formatting=True,
    ),
})

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_FORMATTING_LINE = re.compile(r"^\s*(?:[-*]|\d+\.)\s", re.MULTILINE)


def _count_sentences(text: str) -> int:
    return sum(1 for part in _SENTENCE_SPLIT.split(text) if part.strip())


def _has_formatting(text: str) -> bool:
    return "```" in text or bool(_FORMATTING_LINE.search(text))


def _collect_signals(rule: FrameworkRule, text: str, lowered: str) -> List[str]:
    """Return the cues of ``rule`` that fire on the input, in rule order."""
    signals = [kw for kw in rule.keywords if kw in lowered]

    if rule.min_length and len(text) >= rule.min_length:
        signals.append(f"length>={rule.min_length}")
    if rule.multi_sentence and _count_sentences(text) >= 2:
        signals.append("multiple sentences")
    if rule.question and "?" in text:
        signals.append("question")
    if rule.formatting and _has_formatting(text):
        signals.append("formatting markup")

    return signals


def _confidence(signal_count: int) -> float:
    if signal_count == 0:
        return 0.0
    return round(min(1.0, 0.5 + 0.15 * (signal_count - 1)), 2)


def detect_frameworks(text: str) -> List[FrameworkCandidate]:
    """
    Classify ``text`` against every framework in the catalog.

    Detection is independent per framework, so several may apply at once.
    Defined on every string; the empty string yields no applicable framework.

    Args:
        text: Raw user input

    Returns:
        One FrameworkCandidate per catalog entry, in catalog order
    """
    text = text or ""
    lowered = text.lower()
    candidates = []

    for framework, rule in FRAMEWORK_CATALOG.items():
        signals = _collect_signals(rule, text, lowered)
        if signals:
            rationale = "Matched: " + ", ".join(f"'{s}'" for s in signals)
        else:
            rationale = "No matching signals"

        candidates.append(FrameworkCandidate(
            framework=framework,
            applicable=bool(signals),
            confidence=_confidence(len(signals)),
            rationale=rationale,
            signals=tuple(signals),
        ))

    return candidates


class FrameworkDetector:
    """
    Detects which prompting frameworks apply to a piece of input text.

    Stateless wrapper over :func:`detect_frameworks` and the static catalog.
    """

    def detect(self, text: str) -> List[FrameworkCandidate]:
        """Detect applicable frameworks for ``text``."""
        return detect_frameworks(text)

    def detect_multiple(self, texts: List[str]) -> List[List[FrameworkCandidate]]:
        """Detect frameworks for multiple inputs."""
        return [detect_frameworks(t) for t in texts]

    @staticmethod
    def catalog() -> List[Dict[str, Any]]:
        """List catalog frameworks with their display metadata."""
        return [
            {
                "id": framework.value,
                "name": rule.name,
                "components": list(rule.components),
                "description": rule.description,
                "keywords": list(rule.keywords),
            }
            for framework, rule in FRAMEWORK_CATALOG.items()
        ]
