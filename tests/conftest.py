"""Shared pytest fixtures for PromptForge tests."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from promptforge.core.config import get_settings
from promptforge.core.types import PromptParameters


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear the cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Sample prompts for testing
@pytest.fixture
def coffee_prompt():
    """A short blog request."""
    return "Help me write a blog post about coffee"


@pytest.fixture
def technical_prompt():
    """A technical documentation request."""
    return "Write technical API documentation for our REST endpoints"


@pytest.fixture
def marketing_prompt():
    """A prompt with both marketing and technical keywords."""
    return "Create a marketing campaign for our new API"


@pytest.fixture
def no_signal_prompt():
    """A prompt that triggers no framework."""
    return "Tell me about coffee"


@pytest.fixture
def question_prompt():
    """A question-style prompt."""
    return "What is the best way to brew coffee?"


@pytest.fixture
def formatted_prompt():
    """A prompt with bullet formatting."""
    return "Ideas:\n- coffee\n- tea"


@pytest.fixture
def long_prompt():
    """A long multi-sentence prompt."""
    return (
        "Our team runs a small roastery in Lisbon. We want to tell customers "
        "how we source our beans and why freshness matters. Keep it honest and "
        "warm, and mention our weekend cupping sessions at the shop."
    )


@pytest.fixture
def empty_prompt():
    """An empty prompt."""
    return ""


@pytest.fixture
def sample_prompts(coffee_prompt, technical_prompt, marketing_prompt, no_signal_prompt,
                   question_prompt, formatted_prompt, long_prompt):
    """Collection of sample prompts."""
    return {
        "coffee": coffee_prompt,
        "technical": technical_prompt,
        "marketing": marketing_prompt,
        "no_signal": no_signal_prompt,
        "question": question_prompt,
        "formatted": formatted_prompt,
        "long": long_prompt,
    }


@pytest.fixture
def default_parameters():
    """Parameters matching the configured defaults."""
    return PromptParameters(
        audience_level="intermediate",
        tone="professional",
        output_format="article",
        word_count=800,
    )


@pytest.fixture
def parameters_dict():
    """The same parameters in camelCase wire form."""
    return {
        "audienceLevel": "intermediate",
        "tone": "professional",
        "outputFormat": "article",
        "wordCount": 800,
    }
