"""Static wording tables and Jinja2 scaffold templates for prompt synthesis."""

from types import MappingProxyType
from typing import Mapping, Dict, Any

from jinja2 import Environment, DictLoader, StrictUndefined

from ...core.types import (
    FrameworkId,
    AudienceLevel,
    Tone,
    OutputFormat,
    UseCase,
    PromptParameters,
)


USE_CASE_FRAMING: Mapping[UseCase, str] = MappingProxyType({
    UseCase.MARKETING: "You are an experienced marketing strategist who writes "
                       "persuasive, audience-focused copy that drives action.",
    UseCase.TECHNICAL: "You are a senior technical writer and software engineer "
                       "who produces precise, accurate and well-structured technical content.",
    UseCase.CREATIVE: "You are an imaginative creative writer with a strong sense "
                      "of narrative, voice and vivid detail.",
    UseCase.ANALYSIS: "You are a rigorous analyst who turns information into clear, "
                      "evidence-based insights.",
    UseCase.GENERAL: "You are a knowledgeable assistant who produces clear, "
                     "well-organized and genuinely helpful content.",
})

USE_CASE_ROLES: Mapping[UseCase, str] = MappingProxyType({
    UseCase.MARKETING: "a senior marketing strategist",
    UseCase.TECHNICAL: "a senior technical writer with hands-on engineering experience",
    UseCase.CREATIVE: "an award-winning author",
    UseCase.ANALYSIS: "a meticulous data analyst",
    UseCase.GENERAL: "a subject-matter expert",
})

USE_CASE_INTENTS: Mapping[UseCase, str] = MappingProxyType({
    UseCase.MARKETING: "Persuade the reader and move them toward a specific action.",
    UseCase.TECHNICAL: "Enable the reader to understand the material and apply it correctly.",
    UseCase.CREATIVE: "Engage the reader emotionally and spark their imagination.",
    UseCase.ANALYSIS: "Help the reader reach well-supported conclusions.",
    UseCase.GENERAL: "Inform the reader clearly and usefully.",
})

AUDIENCE_REGISTERS: Mapping[AudienceLevel, str] = MappingProxyType({
    AudienceLevel.BEGINNER: "Assume no prior knowledge: define every specialist term, "
                            "use plain language and keep sentences short.",
    AudienceLevel.INTERMEDIATE: "Assume working familiarity with the basics: skip "
                                "elementary definitions but explain advanced concepts.",
    AudienceLevel.EXPERT: "Write for specialists: use precise domain vocabulary, skip "
                          "fundamentals and focus on nuance and depth.",
})

AUDIENCE_DETAIL: Mapping[AudienceLevel, str] = MappingProxyType({
    AudienceLevel.BEGINNER: "Favor step-by-step explanations and analogies over dense detail.",
    AudienceLevel.INTERMEDIATE: "Balance explanation with practical detail and concrete specifics.",
    AudienceLevel.EXPERT: "Include edge cases, trade-offs and precise specifics.",
})

AUDIENCE_SCOPE: Mapping[AudienceLevel, str] = MappingProxyType({
    AudienceLevel.BEGINNER: "Keep technical depth introductory and avoid jargon.",
    AudienceLevel.INTERMEDIATE: "Go beyond the basics where it adds practical value.",
    AudienceLevel.EXPERT: "Treat the subject at full technical depth.",
})

EXAMPLE_COUNTS: Mapping[AudienceLevel, int] = MappingProxyType({
    AudienceLevel.BEGINNER: 3,
    AudienceLevel.INTERMEDIATE: 2,
    AudienceLevel.EXPERT: 1,
})

TONE_REGISTERS: Mapping[Tone, str] = MappingProxyType({
    Tone.PROFESSIONAL: "clear, confident and polished, without slang",
    Tone.CASUAL: "relaxed and conversational, as if talking to a friend",
    Tone.FRIENDLY: "warm, approachable and encouraging",
    Tone.FORMAL: "formal and impersonal, without contractions or colloquialisms",
    Tone.PERSUASIVE: "compelling and benefit-driven, ending with a clear call to action",
    Tone.ENTHUSIASTIC: "energetic and upbeat, conveying genuine excitement",
})

FORMAT_INSTRUCTIONS: Mapping[OutputFormat, str] = MappingProxyType({
    OutputFormat.ARTICLE: "Write an article of approximately {word_count} words with an "
                          "introduction, body sections under clear headings, and a conclusion.",
    OutputFormat.LIST: "Produce a bulleted list of approximately {word_count} words in "
                       "total, one idea per bullet.",
    OutputFormat.CODE: "Produce working, commented code accompanied by approximately "
                       "{word_count} words of explanation.",
    OutputFormat.EMAIL: "Write an email of approximately {word_count} words with a subject "
                        "line, greeting, body and sign-off.",
    OutputFormat.SUMMARY: "Write a summary of approximately {word_count} words covering "
                          "only the essential points.",
    OutputFormat.OUTLINE: "Produce a hierarchical outline of approximately {word_count} "
                          "words with numbered sections and sub-points.",
    OutputFormat.SOCIAL_POST: "Write a social media post of approximately {word_count} "
                              "words with a strong opening hook and relevant hashtags.",
})

FORMAT_STYLES: Mapping[OutputFormat, str] = MappingProxyType({
    OutputFormat.ARTICLE: "Long-form prose organized under headings with smooth transitions.",
    OutputFormat.LIST: "Scannable bullets, each starting with the key point.",
    OutputFormat.CODE: "Idiomatic code with short comments, followed by a concise walkthrough.",
    OutputFormat.EMAIL: "Direct, skimmable paragraphs with the main point up front.",
    OutputFormat.SUMMARY: "Compact, high-density sentences with no filler.",
    OutputFormat.OUTLINE: "Terse headings and sub-points rather than full paragraphs.",
    OutputFormat.SOCIAL_POST: "Punchy short sentences suited to a social feed.",
})

FORMAT_SHAPES: Mapping[OutputFormat, str] = MappingProxyType({
    OutputFormat.ARTICLE: "an article with a title and headed sections",
    OutputFormat.LIST: "a bulleted list",
    OutputFormat.CODE: "a fenced code block followed by an explanation",
    OutputFormat.EMAIL: "an email with a subject line",
    OutputFormat.SUMMARY: "a short summary",
    OutputFormat.OUTLINE: "a numbered outline",
    OutputFormat.SOCIAL_POST: "a single social media post",
})


SCAFFOLD_TEMPLATES: Mapping[FrameworkId, str] = MappingProxyType({
    FrameworkId.TCREI: (
        "## TCREI Framework\n"
        "- Task: {{ request }}\n"
        "- Context: The content is for {{ audience_article }} {{ audience }} reader "
        "in a {{ use_case }} setting. {{ audience_register }}\n"
        "- Role: Take the role of {{ role }}.\n"
        "- Examples: Include {{ example_count }} concrete "
        "example{{ 's' if example_count > 1 else '' }} pitched at "
        "{{ audience_article }} {{ audience }} reader.\n"
        "- Iterate: Draft a response, check it against the task and the output "
        "requirements, then refine it once before giving the final version."
    ),
    FrameworkId.RSTI: (
        "## RSTI Framework\n"
        "- Request: {{ request }}\n"
        "- Style: {{ format_style }}\n"
        "- Tone: Keep the tone {{ tone }}: {{ tone_register }}.\n"
        "- Intent: {{ intent }}"
    ),
    FrameworkId.TFCDC: (
        "## TFCDC Framework\n"
        "- Technical scope: {{ audience_scope }}\n"
        "- Format: Deliver {{ format_shape }}.\n"
        "- Content: Cover every element of the request: \"{{ request }}\"\n"
        "- Detail: {{ audience_detail }}\n"
        "- Constraints: Stay between {{ min_words }} and {{ max_words }} words "
        "(target {{ word_count }}); do not invent facts, and state any "
        "assumptions explicitly."
    ),
})


_ENV = Environment(
    loader=DictLoader({fid.value: source for fid, source in SCAFFOLD_TEMPLATES.items()}),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


def indefinite_article(word: str) -> str:
    """Indefinite article to place before ``word``."""
    return "an" if word[:1].lower() in "aeiou" else "a"


def build_context(
    request: str,
    parameters: PromptParameters,
    use_case: UseCase
) -> Dict[str, Any]:
    """Build the variables shared by every scaffold template."""
    audience = parameters.audience_level
    word_count = parameters.word_count
    return {
        "request": request,
        "use_case": use_case.value,
        "audience": audience.value,
        "audience_article": indefinite_article(audience.value),
        "audience_register": AUDIENCE_REGISTERS[audience],
        "audience_detail": AUDIENCE_DETAIL[audience],
        "audience_scope": AUDIENCE_SCOPE[audience],
        "example_count": EXAMPLE_COUNTS[audience],
        "role": USE_CASE_ROLES[use_case],
        "intent": USE_CASE_INTENTS[use_case],
        "tone": parameters.tone.value,
        "tone_register": TONE_REGISTERS[parameters.tone],
        "format_style": FORMAT_STYLES[parameters.output_format],
        "format_shape": FORMAT_SHAPES[parameters.output_format],
        "word_count": word_count,
        "min_words": max(1, int(word_count * 0.9)),
        "max_words": max(1, int(round(word_count * 1.1))),
    }


def render_scaffold(framework: FrameworkId, context: Dict[str, Any]) -> str:
    """Render the scaffold block for ``framework``."""
    return _ENV.get_template(framework.value).render(**context)
