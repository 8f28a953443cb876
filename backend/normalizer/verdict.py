import re

from config import logger
from models.fact_check import (
    VerdictType,
    VERDICT_TRUE,
    VERDICT_FALSE,
    VERDICT_PARTIALLY_TRUE,
)
from .sections import VERDICT_LABELS, extract_section, first_paragraph

POSITIVE_TERMS = re.compile(r"\b(?:true|accurate|correct|verified)\b", re.IGNORECASE)
NEGATIVE_TERMS = re.compile(r"\b(?:false|inaccurate|incorrect|misleading)\b", re.IGNORECASE)
PARTIAL_TERMS = re.compile(
    r"\b(?:partially\s+true|partly\s+true|mostly\s+true|somewhat\s+true|mixed)\b",
    re.IGNORECASE,
)
NEGATIVE_QUALIFIERS = re.compile(r"\b(?:not\s+true|unclear|cannot\s+verify)\b", re.IGNORECASE)

# Whole-text patterns, each limited to a single sentence.
OVERALL_TRUE_PATTERNS = [
    re.compile(r"\boverall\b[^.\n]*?\btrue\b", re.IGNORECASE),
    re.compile(r"\bverdict\b[^.\n]*?\btrue\b", re.IGNORECASE),
    re.compile(r"\bclaim\b[^.\n]*?\b(?:true|accurate|correct)\b", re.IGNORECASE),
    re.compile(r"\bconclusion\b[^.\n]*?\btrue\b", re.IGNORECASE),
]
OVERALL_CONTRADICTIONS = re.compile(
    r"\boverall\b[^.\n]*?\bfalse\b|\bnot\s+(?:true|accurate|correct)\b",
    re.IGNORECASE,
)
OVERALL_PARTIAL_PATTERN = re.compile(
    r"\b(?:overall|verdict|claim|conclusion)\b[^.\n]*?\b(?:partially|partly|mostly|somewhat)\s+true\b",
    re.IGNORECASE,
)


def locate_verdict_text(text: str) -> str:
    """The labeled VERDICT section, or the first paragraph when there is none."""
    section = extract_section(text, VERDICT_LABELS)
    if section:
        return section
    return first_paragraph(text)


def classify_verdict_text(verdict_text: str) -> VerdictType:
    """Partial wins over true; a negative term or qualifier blocks true."""
    if PARTIAL_TERMS.search(verdict_text):
        return VERDICT_PARTIALLY_TRUE
    if (
        POSITIVE_TERMS.search(verdict_text)
        and not NEGATIVE_TERMS.search(verdict_text)
        and not NEGATIVE_QUALIFIERS.search(verdict_text)
    ):
        return VERDICT_TRUE
    return VERDICT_FALSE


def scan_full_text(text: str) -> VerdictType:
    """
    Second pass over the whole response for conclusion-style statements.

    Partial statements are checked first so that "the claim is partially
    true" never reads as a plain true. A true statement only counts when no
    contradiction such as "overall ... false" or "not true" is present.
    """
    if OVERALL_PARTIAL_PATTERN.search(text):
        return VERDICT_PARTIALLY_TRUE
    if OVERALL_CONTRADICTIONS.search(text):
        return VERDICT_FALSE
    if any(pattern.search(text) for pattern in OVERALL_TRUE_PATTERNS):
        return VERDICT_TRUE
    return VERDICT_FALSE


def extract_verdict(text: str) -> VerdictType:
    if not text:
        return VERDICT_FALSE

    verdict_text = locate_verdict_text(text)
    verdict = classify_verdict_text(verdict_text)
    if verdict != VERDICT_FALSE:
        return verdict

    verdict = scan_full_text(text)
    logger.debug("Verdict section inconclusive; full-text scan gave %s", verdict)
    return verdict
