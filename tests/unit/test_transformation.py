"""Tests for prompt transformation."""

import pytest

from promptforge.core.exceptions import ValidationError
from promptforge.core.types import FrameworkId, FrameworkCandidate, UseCase
from promptforge.enhancement.transformers.scaffolds import indefinite_article
from promptforge.enhancement import (
    PromptTransformer,
    transform_prompt,
    detect_frameworks,
    classify_use_case,
)

HEADINGS = {
    FrameworkId.TCREI: "## TCREI Framework",
    FrameworkId.RSTI: "## RSTI Framework",
    FrameworkId.TFCDC: "## TFCDC Framework",
}


def _candidates(*applicable):
    return [
        FrameworkCandidate(framework=f, applicable=f in applicable, confidence=0.5 if f in applicable else 0.0)
        for f in FrameworkId
    ]


class TestTransformPrompt:
    """Tests for transform_prompt."""

    def test_coffee_example(self, coffee_prompt, default_parameters):
        """Test the default web-tool prompt end to end."""
        enhanced = transform_prompt(
            coffee_prompt,
            detect_frameworks(coffee_prompt),
            default_parameters,
            classify_use_case(coffee_prompt),
        )
        text = enhanced.final_prompt
        assert enhanced.frameworks_applied == (FrameworkId.TCREI, FrameworkId.RSTI)
        assert HEADINGS[FrameworkId.TCREI] in text
        assert HEADINGS[FrameworkId.RSTI] in text
        assert HEADINGS[FrameworkId.TFCDC] not in text
        assert text.index("TCREI") < text.index("RSTI")
        assert "Request: Help me write a blog post about coffee" in text
        assert "800 words" in text
        assert "professional tone" in text
        assert "intermediate audience" in text

    def test_technical_example(self, technical_prompt, default_parameters):
        """Test technical framing and TFCDC constraints."""
        enhanced = transform_prompt(
            technical_prompt,
            detect_frameworks(technical_prompt),
            default_parameters,
            "technical",
        )
        text = enhanced.final_prompt
        assert enhanced.use_case == UseCase.TECHNICAL
        assert text.startswith("You are a senior technical writer")
        assert HEADINGS[FrameworkId.TFCDC] in text
        assert "Stay between 720 and 880 words (target 800)" in text

    def test_no_applicable_frameworks(self, no_signal_prompt, default_parameters):
        """Test degradation to framing plus requirements."""
        enhanced = transform_prompt(
            no_signal_prompt, _candidates(), default_parameters, UseCase.GENERAL
        )
        assert enhanced.frameworks_applied == ()
        assert enhanced.sections == ("use_case_framing", "output_requirements")
        assert "Framework" not in enhanced.final_prompt
        assert "## Output Requirements" in enhanced.final_prompt
        assert no_signal_prompt in enhanced.final_prompt

    def test_block_order(self, coffee_prompt, default_parameters):
        """Test framing first, scaffolds in detector order, requirements last."""
        enhanced = transform_prompt(
            coffee_prompt, _candidates(*FrameworkId), default_parameters, UseCase.GENERAL
        )
        assert enhanced.sections == (
            "use_case_framing",
            "scaffold:TCREI",
            "scaffold:RSTI",
            "scaffold:TFCDC",
            "output_requirements",
        )
        text = enhanced.final_prompt
        positions = [text.index(HEADINGS[f]) for f in FrameworkId]
        assert positions == sorted(positions)
        assert text.index("## Output Requirements") > positions[-1]

    @pytest.mark.parametrize("framework", list(FrameworkId))
    def test_adding_a_framework_only_adds(self, framework, coffee_prompt, default_parameters):
        """Test enabling one more framework keeps every earlier block."""
        others = [f for f in FrameworkId if f != framework]
        without = transform_prompt(
            coffee_prompt, _candidates(*others[:1]), default_parameters, UseCase.GENERAL
        )
        with_it = transform_prompt(
            coffee_prompt, _candidates(others[0], framework), default_parameters, UseCase.GENERAL
        )
        assert HEADINGS[framework] not in without.final_prompt
        assert HEADINGS[framework] in with_it.final_prompt
        assert HEADINGS[others[0]] in with_it.final_prompt
        assert len(with_it.sections) == len(without.sections) + 1

    def test_headings_match_applied(self, sample_prompts, default_parameters):
        """Test framework headings appear exactly for the applied frameworks."""
        for prompt in sample_prompts.values():
            enhanced = transform_prompt(
                prompt, detect_frameworks(prompt), default_parameters, classify_use_case(prompt)
            )
            present = tuple(f for f in FrameworkId if HEADINGS[f] in enhanced.final_prompt)
            assert present == enhanced.frameworks_applied
            scaffolds = tuple(s for s in enhanced.sections if s.startswith("scaffold:"))
            assert scaffolds == tuple(f"scaffold:{f.value}" for f in enhanced.frameworks_applied)

    def test_request_naming_unapplied_framework(self, default_parameters):
        """Test a framework named in the request does not get a scaffold."""
        text = "Write a short note on the RSTI method"
        enhanced = transform_prompt(
            text, detect_frameworks(text), default_parameters, classify_use_case(text)
        )
        assert enhanced.frameworks_applied == (FrameworkId.TCREI,)
        assert enhanced.sections == ("use_case_framing", "scaffold:TCREI", "output_requirements")
        assert HEADINGS[FrameworkId.RSTI] not in enhanced.final_prompt
        assert "Request: Write a short note on the RSTI method" in enhanced.final_prompt

    def test_deterministic(self, coffee_prompt, default_parameters):
        """Test identical inputs produce identical prompts."""
        first = transform_prompt(
            coffee_prompt, detect_frameworks(coffee_prompt), default_parameters, UseCase.GENERAL
        )
        second = transform_prompt(
            coffee_prompt, detect_frameworks(coffee_prompt), default_parameters, UseCase.GENERAL
        )
        assert first == second

    def test_mapping_parameters(self, coffee_prompt, parameters_dict, default_parameters):
        """Test parameters may be given as a camelCase mapping."""
        from_dict = transform_prompt(coffee_prompt, _candidates(), parameters_dict, "general")
        from_obj = transform_prompt(coffee_prompt, _candidates(), default_parameters, "general")
        assert from_dict.final_prompt == from_obj.final_prompt

    def test_audience_changes_examples(self, coffee_prompt, parameters_dict):
        """Test audience level modulates the examples line."""
        beginner = dict(parameters_dict, audienceLevel="beginner")
        expert = dict(parameters_dict, audienceLevel="expert")
        candidates = _candidates(FrameworkId.TCREI)

        beginner_text = transform_prompt(coffee_prompt, candidates, beginner, "general").final_prompt
        expert_text = transform_prompt(coffee_prompt, candidates, expert, "general").final_prompt

        assert "Include 3 concrete examples" in beginner_text
        assert "Include 1 concrete example pitched" in expert_text
        assert "an expert audience" in expert_text
        assert "a beginner audience" in beginner_text

    def test_format_changes_requirements(self, coffee_prompt, parameters_dict):
        """Test output format modulates the requirements block."""
        as_list = dict(parameters_dict, outputFormat="list", wordCount=300)
        text = transform_prompt(coffee_prompt, _candidates(), as_list, "general").final_prompt
        assert "bulleted list of approximately 300 words" in text
        assert "Write an article" not in text

    def test_tone_changes_style(self, coffee_prompt, parameters_dict):
        """Test tone appears in the RSTI scaffold."""
        casual = dict(parameters_dict, tone="casual")
        text = transform_prompt(
            coffee_prompt, _candidates(FrameworkId.RSTI), casual, "general"
        ).final_prompt
        assert "Keep the tone casual" in text

    def test_small_word_count(self, coffee_prompt, parameters_dict):
        """Test word-count bounds stay positive."""
        tiny = dict(parameters_dict, wordCount=1)
        text = transform_prompt(
            coffee_prompt, _candidates(FrameworkId.TFCDC), tiny, "general"
        ).final_prompt
        assert "Stay between 1 and 1 words" in text

    def test_template_syntax_in_input(self, default_parameters):
        """Test user text is inserted verbatim, not evaluated."""
        text = "Write about {{ role }} and {% if x %}"
        enhanced = transform_prompt(
            text, _candidates(*FrameworkId), default_parameters, UseCase.GENERAL
        )
        assert enhanced.final_prompt.count(text) >= 3

    def test_source_input_kept(self, default_parameters):
        """Test the original input is kept unchanged."""
        text = "  Write a plan  "
        enhanced = transform_prompt(text, _candidates(), default_parameters, "general")
        assert enhanced.source_input == text
        assert "Request: Write a plan\n" in enhanced.final_prompt + "\n"


class TestTransformValidation:
    """Tests for malformed transformer input."""

    @pytest.mark.parametrize("text", ["", "   ", None, 42])
    def test_invalid_text(self, text, default_parameters):
        """Test blank or non-string input."""
        with pytest.raises(ValidationError):
            transform_prompt(text, _candidates(), default_parameters, UseCase.GENERAL)

    def test_missing_candidates(self, coffee_prompt, default_parameters):
        """Test missing candidates."""
        with pytest.raises(ValidationError):
            transform_prompt(coffee_prompt, None, default_parameters, UseCase.GENERAL)

    def test_invalid_candidate_type(self, coffee_prompt, default_parameters):
        """Test candidates of the wrong type."""
        with pytest.raises(ValidationError) as exc_info:
            transform_prompt(coffee_prompt, [{"framework": "TCREI"}], default_parameters, "general")
        assert exc_info.value.validation_errors == ["candidate 0 has invalid type"]

    def test_missing_parameters(self, coffee_prompt):
        """Test missing parameters."""
        with pytest.raises(ValidationError):
            transform_prompt(coffee_prompt, _candidates(), None, UseCase.GENERAL)

    def test_incomplete_parameters(self, coffee_prompt, parameters_dict):
        """Test parameters with a missing field."""
        del parameters_dict["tone"]
        with pytest.raises(ValidationError):
            transform_prompt(coffee_prompt, _candidates(), parameters_dict, UseCase.GENERAL)

    def test_unknown_use_case(self, coffee_prompt, default_parameters):
        """Test unknown use case."""
        with pytest.raises(ValidationError):
            transform_prompt(coffee_prompt, _candidates(), default_parameters, "legal")


class TestPromptTransformer:
    """Tests for the PromptTransformer class."""

    @pytest.fixture
    def transformer(self):
        return PromptTransformer()

    def test_transform_matches_function(self, transformer, coffee_prompt, default_parameters):
        """Test the class delegates to transform_prompt."""
        candidates = detect_frameworks(coffee_prompt)
        assert transformer.transform(
            coffee_prompt, candidates, default_parameters, UseCase.GENERAL
        ) == transform_prompt(coffee_prompt, candidates, default_parameters, UseCase.GENERAL)

    def test_preview_scaffold(self, transformer, parameters_dict):
        """Test previewing a single scaffold."""
        preview = transformer.preview_scaffold("rsti", parameters_dict)
        assert preview.startswith("## RSTI Framework")
        assert "<your request>" in preview

    def test_preview_scaffold_use_case(self, transformer, default_parameters):
        """Test preview picks the role for the use case."""
        preview = transformer.preview_scaffold(FrameworkId.TCREI, default_parameters, "creative")
        assert "award-winning author" in preview

    def test_preview_unknown_framework(self, transformer, default_parameters):
        """Test unknown framework ids."""
        with pytest.raises(ValidationError):
            transformer.preview_scaffold("COSTAR", default_parameters)


class TestScaffoldHelpers:
    """Tests for scaffold wording helpers."""

    @pytest.mark.parametrize("word,expected", [
        ("expert", "an"),
        ("intermediate", "an"),
        ("beginner", "a"),
        ("Expert", "an"),
        ("", "a"),
    ])
    def test_indefinite_article(self, word, expected):
        """Test article selection shared by scaffolds and requirements."""
        assert indefinite_article(word) == expected

    def test_requirements_and_scaffold_agree(self, coffee_prompt, parameters_dict):
        """Test the TCREI context and the audience line use the same article."""
        expert = dict(parameters_dict, audienceLevel="expert")
        text = transform_prompt(
            coffee_prompt, _candidates(FrameworkId.TCREI), expert, "general"
        ).final_prompt
        assert "for an expert reader" in text
        assert "Write for an expert audience." in text
