import pytest
from normalizer.explanation import clean_explanation, extract_explanation, text_before_sources
from normalizer.sections import (
    EXPLANATION_LABELS,
    SOURCE_LABELS,
    extract_section,
    find_section_start,
    first_paragraph,
)


class TestSections:
    """Tests for labeled-section lookup."""

    def test_missing_section(self):
        assert extract_section("No labels in here.", EXPLANATION_LABELS) is None

    def test_section_runs_to_end(self):
        assert extract_section("EXPLANATION: all of this", EXPLANATION_LABELS) == "all of this"

    def test_custom_stop_labels(self):
        text = "[EXPLANATION] Part one.\nSUMMARY: still included\n[SOURCES] 1. x"
        assert extract_section(text, EXPLANATION_LABELS, stop_labels=SOURCE_LABELS) == (
            "Part one.\nSUMMARY: still included"
        )

    def test_prose_label_does_not_stop_section(self):
        text = "[EXPLANATION] The analysis: figures match.\n[SOURCES]"
        assert extract_section(text, EXPLANATION_LABELS) == "The analysis: figures match."

    def test_references_alias(self):
        text = "Body text.\nReferences:\n1. A - https://a.org"
        assert text[find_section_start(text, SOURCE_LABELS):].startswith("References:")
        assert extract_section(text, SOURCE_LABELS) == "1. A - https://a.org"

    def test_first_paragraph(self):
        assert first_paragraph("  One.\n \nTwo.") == "One."
        assert first_paragraph("") == ""


class TestCleanExplanation:
    """Tests for markdown cleanup."""

    def test_strips_bold_and_headings(self):
        text = "## Findings\n**Water** boils at 100C [1]."
        assert clean_explanation(text) == "Findings\nWater boils at 100C [1]."

    def test_collapses_spaces_and_blank_lines(self):
        text = "First  line.\n\n\n\nSecond   line."
        assert clean_explanation(text) == "First line.\n\nSecond line."

    def test_keeps_citation_markers(self):
        assert clean_explanation("Claim holds [1][2].") == "Claim holds [1][2]."

    def test_empty(self):
        assert clean_explanation("") == ""

    @pytest.mark.parametrize("text", [
        "## Heading\n\n\n**Bold**  text [1]\n   \n  ### Sub  heading",
        "#  # Doubled hashes\n**a**  **b**",
        "plain text",
        "  \n\n  leading blank lines  \n\n\n",
    ])
    def test_idempotent(self, text):
        once = clean_explanation(text)
        assert clean_explanation(once) == once


class TestExtractExplanation:
    """Tests for explanation extraction."""

    def test_labeled_section(self, structured_response_text):
        result = extract_explanation(structured_response_text)
        assert result == (
            "Water boils at 100 degrees Celsius at sea level [1]. "
            "At higher altitudes the boiling point drops [2]."
        )

    def test_short_section_falls_back_to_text_before_sources(self):
        text = "[VERDICT] TRUE\n[EXPLANATION] Yes.\n[SOURCES]\n1. Something"
        assert extract_explanation(text) == "[VERDICT] TRUE\n[EXPLANATION] Yes."

    def test_no_verdict_marker_uses_text_before_sources(self):
        text = "## Analysis\nThe  claim holds.\n\n\n\nMore text.\nSources:\n1. foo"
        assert extract_explanation(text) == "Analysis\nThe claim holds.\n\nMore text."

    def test_explanation_label_ignored_without_verdict_marker(self):
        text = "Intro line.\nEXPLANATION: the long body of the explanation."
        assert extract_explanation(text) == text

    def test_no_sources_uses_whole_text(self):
        assert extract_explanation("Just **one** line.") == "Just one line."

    def test_sources_only_text(self):
        text = "SOURCES: 1. https://example.com"
        assert text_before_sources(text) == ""
        assert extract_explanation(text) == text

    def test_empty(self):
        assert extract_explanation("") == ""

    def test_inline_sources_label_ends_explanation(self):
        text = (
            "VERDICT: True\n"
            "EXPLANATION: Reports from the agency support the figure [1]. "
            "SOURCES: 1. Agency - https://agency.gov/a"
        )
        assert extract_explanation(text) == "Reports from the agency support the figure [1]."
