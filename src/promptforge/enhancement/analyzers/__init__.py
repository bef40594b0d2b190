"""Prompt analyzers."""

from .framework_detector import (
    FrameworkDetector,
    FrameworkRule,
    FRAMEWORK_CATALOG,
    detect_frameworks,
)
from .use_case_classifier import classify_use_case, USE_CASE_KEYWORDS

__all__ = [
    "FrameworkDetector",
    "FrameworkRule",
    "FRAMEWORK_CATALOG",
    "detect_frameworks",
    "classify_use_case",
    "USE_CASE_KEYWORDS",
]
