"""Keyword-based use-case classification."""

from typing import Tuple

from ...core.types import UseCase

# Checked in order; the first group with a hit wins.
USE_CASE_KEYWORDS: Tuple[Tuple[UseCase, Tuple[str, ...]], ...] = (
    (UseCase.MARKETING, (
        "marketing", "advert", "campaign", "brand", "slogan", "sales", "seo",
        "copywriting", "ad copy", "promotion", "landing page", "product launch",
    )),
    (UseCase.TECHNICAL, (
        "code", "api", "technical", "software", "programming", "debug",
        "function", "database", "endpoint", "documentation", "algorithm",
        "sql", "python", "javascript",
    )),
    (UseCase.CREATIVE, (
        "story", "creative", "poem", "fiction", "novel", "lyrics",
        "screenplay", "character", "narrative", "imagine",
    )),
    (UseCase.ANALYSIS, (
        "analyze", "analyse", "analysis", "data", "insight", "trend",
        "compare", "metric", "statistic", "evaluate", "research",
    )),
)


def classify_use_case(text: str) -> UseCase:
    """Map input text to exactly one use case; ``general`` if nothing matches."""
    lowered = (text or "").lower()
    for use_case, keywords in USE_CASE_KEYWORDS:
        if any(kw in lowered for kw in keywords):
            return use_case
    return UseCase.GENERAL
