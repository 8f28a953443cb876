import re
from typing import List

from config.constants import PREPROCESS_CONFIG

SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")


def split_sentences(text: str) -> List[str]:
    if not text or not isinstance(text, str):
        return []
    return [s for s in SENTENCE_SPLIT_PATTERN.split(text) if s.strip()]


def summarize_text(text: str) -> str:
    """Short texts pass through; longer ones keep their first few sentences."""
    if not text or not isinstance(text, str):
        return ""
    if len(text) < PREPROCESS_CONFIG.SUMMARY_THRESHOLD:
        return text
    sentences = split_sentences(text)
    return ". ".join(s.strip() for s in sentences[:PREPROCESS_CONFIG.SUMMARY_SENTENCES]) + "."


def extract_claims(text: str) -> List[str]:
    """Heuristic claim list: every sentence long enough to carry a statement."""
    return [
        s.strip() for s in split_sentences(text)
        if len(s.strip()) > PREPROCESS_CONFIG.MIN_CLAIM_LENGTH
    ]
