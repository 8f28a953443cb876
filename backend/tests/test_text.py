from utils.text import extract_claims, split_sentences, summarize_text


class TestSummarizeText:
    """Tests for the heuristic summary."""

    def test_short_text_unchanged(self):
        text = "A short paragraph. With two sentences."
        assert summarize_text(text) == text

    def test_long_text_keeps_three_sentences(self):
        sentences = [f"Sentence number {i} carries some filler words to pad it out" for i in range(10)]
        text = ". ".join(sentences) + "."
        assert len(text) >= 300
        assert summarize_text(text) == ". ".join(sentences[:3]) + "."

    def test_mixed_terminators(self):
        text = "Is it real? " + "It is! " + "x" * 300 + ". Tail."
        assert summarize_text(text) == "Is it real. It is. " + "x" * 300 + "."

    def test_empty(self):
        assert summarize_text("") == ""
        assert summarize_text(None) == ""


class TestExtractClaims:
    """Tests for the heuristic claim list."""

    def test_keeps_long_sentences(self):
        text = (
            "The first sentence is long enough to count. Short one. "
            "Another sentence that is definitely long enough."
        )
        assert extract_claims(text) == [
            "The first sentence is long enough to count",
            "Another sentence that is definitely long enough",
        ]

    def test_no_claims(self):
        assert extract_claims("Tiny. Also tiny!") == []
        assert extract_claims("") == []


def test_split_sentences_drops_blank_fragments():
    assert split_sentences("One... Two?! ") == ["One", " Two"]
