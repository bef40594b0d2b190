"""Prompt transformers."""

from .prompt_transformer import PromptTransformer, transform_prompt
from .scaffolds import SCAFFOLD_TEMPLATES, USE_CASE_FRAMING, render_scaffold

__all__ = [
    "PromptTransformer",
    "transform_prompt",
    "SCAFFOLD_TEMPLATES",
    "USE_CASE_FRAMING",
    "render_scaffold",
]
