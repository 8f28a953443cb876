import re

from config.constants import NORMALIZER_CONFIG
from .sections import (
    EXPLANATION_LABELS,
    SOURCE_LABELS,
    VERDICT_LABELS,
    extract_section,
    find_section_start,
    has_section_marker,
)

BOLD_MARKERS = re.compile(r"\*\*")
HEADING_HASHES = re.compile(r"^[ \t]*(?:#+[ \t]*)+", re.MULTILINE)
SPACE_RUNS = re.compile(r" {2,}")
BLANK_LINE_RUNS = re.compile(r"\n\s*\n")


def clean_explanation(text: str) -> str:
    """
    Strip markdown noise from explanation prose.

    Removes `**` bold markers and leading heading hashes, collapses runs of
    spaces and of blank lines, and trims. Citation markers like `[2]` are
    left in place for the presentation layer to link. Running it on its own
    output changes nothing.
    """
    if not text:
        return ""
    text = BOLD_MARKERS.sub("", text)
    text = HEADING_HASHES.sub("", text)
    text = SPACE_RUNS.sub(" ", text)
    text = BLANK_LINE_RUNS.sub("\n\n", text)
    return text.strip()


def text_before_sources(text: str) -> str:
    start = find_section_start(text, SOURCE_LABELS)
    if start is None:
        return text
    return text[:start]


def extract_explanation(text: str) -> str:
    if not text:
        return ""

    if has_section_marker(text, VERDICT_LABELS):
        section = extract_section(text, EXPLANATION_LABELS, stop_labels=SOURCE_LABELS, stop_anywhere=True)
        if section and len(section) >= NORMALIZER_CONFIG.MIN_EXPLANATION_LENGTH:
            return clean_explanation(section)

    return clean_explanation(text_before_sources(text).strip() or text)
