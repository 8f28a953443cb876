import pytest
from normalizer.verdict import (
    extract_verdict,
    classify_verdict_text,
    locate_verdict_text,
    scan_full_text,
)


class TestLocateVerdictText:
    """Tests for finding the verdict section."""

    def test_bracket_marker(self):
        text = "[VERDICT] - TRUE\n[EXPLANATION] - Details follow here."
        assert locate_verdict_text(text) == "TRUE"

    def test_bold_marker_with_colon(self):
        text = "**VERDICT:** Partially true\n\n**EXPLANATION:** Something."
        assert locate_verdict_text(text) == "Partially true"

    def test_plain_label(self):
        text = "Verdict: False\nExplanation: The figure is wrong."
        assert locate_verdict_text(text) == "False"

    def test_citation_lines_do_not_end_section(self):
        text = "[VERDICT] Accurate [1] as reported\n[EXPLANATION] More."
        assert locate_verdict_text(text) == "Accurate [1] as reported"

    def test_falls_back_to_first_paragraph(self):
        text = "The statement is accurate.\n\nSecond paragraph is ignored."
        assert locate_verdict_text(text) == "The statement is accurate."

    def test_empty_section_falls_back(self):
        text = "[VERDICT]\n[EXPLANATION] The claim is correct."
        assert locate_verdict_text(text) == text


class TestClassifyVerdictText:
    """Tests for classifying the located verdict text."""

    @pytest.mark.parametrize("verdict_text", ["TRUE", "This is accurate", "Correct", "Verified by officials"])
    def test_positive(self, verdict_text):
        assert classify_verdict_text(verdict_text) == "True"

    @pytest.mark.parametrize("verdict_text", ["PARTIALLY TRUE", "mostly true", "Partly true", "Mixed evidence"])
    def test_partial(self, verdict_text):
        assert classify_verdict_text(verdict_text) == "PartiallyTrue"

    def test_partial_beats_positive(self):
        assert classify_verdict_text("True in parts, overall mostly true") == "PartiallyTrue"

    def test_negative_term_blocks_positive(self):
        assert classify_verdict_text("True figure but misleading framing") == "False"

    @pytest.mark.parametrize("verdict_text", [
        "This is not true but sounds plausible",
        "Whether this is true is unclear",
        "We cannot verify that this is true",
    ])
    def test_negative_qualifier_suppresses_positive(self, verdict_text):
        assert classify_verdict_text(verdict_text) == "False"

    def test_whole_word_only(self):
        assert classify_verdict_text("Truthfully, incorrectness abounds") == "False"


class TestScanFullText:
    """Tests for the whole-response fallback scan."""

    def test_conclusion_true(self):
        assert scan_full_text("After review, the conclusion is that this is true.") == "True"

    def test_claim_accurate(self):
        assert scan_full_text("We find the claim to be accurate.") == "True"

    def test_partial_before_true(self):
        assert scan_full_text("Overall the claim is partially true.") == "PartiallyTrue"

    def test_contradiction_blocks_true(self):
        text = "The claim is true in some tellings. But overall it is false."
        assert scan_full_text(text) == "False"

    def test_not_true_blocks_true(self):
        assert scan_full_text("The verdict: it is not true. The claim is true elsewhere.") == "False"

    def test_patterns_stay_within_a_sentence(self):
        assert scan_full_text("Overall, prices rose. Some say it is true.") == "False"

    def test_no_signal(self):
        assert scan_full_text("Nothing conclusive here.") == "False"


class TestExtractVerdict:
    """Tests for the full verdict decision."""

    def test_empty_text(self):
        assert extract_verdict("") == "False"

    def test_no_vocabulary_defaults_false(self):
        assert extract_verdict("The report discusses rainfall in 2023.\n\nIt lists figures.") == "False"

    def test_section_true(self):
        assert extract_verdict("[VERDICT] - TRUE\n[EXPLANATION] - It is so.") == "True"

    def test_section_partial(self):
        text = "**VERDICT:** The claim is mostly true but the date is incorrect."
        assert extract_verdict(text) == "PartiallyTrue"

    def test_not_true_qualifier(self):
        assert extract_verdict("[VERDICT] This is not true but sounds plausible") == "False"

    def test_negative_section_still_scans_full_text(self):
        text = "[VERDICT] False.\n[EXPLANATION] Overall the statement is true for 2019 data."
        assert extract_verdict(text) == "True"

    def test_negative_section_with_overall_false(self):
        text = "[VERDICT] FALSE\n[EXPLANATION] The claim is true for one year, but overall it is false."
        assert extract_verdict(text) == "False"

    def test_full_text_scan_when_section_is_silent(self):
        text = "[VERDICT] See below\n[EXPLANATION] In conclusion, this is true according to records."
        assert extract_verdict(text) == "True"

    def test_full_text_partial(self):
        text = "Intro paragraph.\n\nOverall the claim is partly true."
        assert extract_verdict(text) == "PartiallyTrue"
