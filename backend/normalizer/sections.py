import re
from functools import lru_cache
from typing import Optional, Sequence

VERDICT_LABELS = ("VERDICT",)
EXPLANATION_LABELS = ("EXPLANATION",)
SOURCE_LABELS = ("SOURCES", "REFERENCES", "CITATIONS")

# Every label the upstream prompts ask for; any of them closes the current section.
SECTION_LABELS = (
    "VERDICT",
    "EXPLANATION",
    "SOURCES",
    "REFERENCES",
    "CITATIONS",
    "SUMMARY",
    "KEY CLAIMS ANALYSIS",
    "CREDIBILITY ASSESSMENT",
    "ANALYSIS",
    "POTENTIAL MISINFORMATION INDICATORS",
    "CONTEXT",
)

LEADING_SEPARATOR = re.compile(r"^[ \t]*[-–—:]?")


def _label_alternation(labels: Sequence[str]) -> str:
    return "|".join(r"\s+".join(re.escape(word) for word in label.split()) for label in labels)


@lru_cache(maxsize=None)
def _marker_regex(labels: tuple, line_start: bool) -> "re.Pattern":
    """
    Matches `[LABEL]`, `**LABEL**` (colon allowed inside or after) and `LABEL:`.
    With line_start the plain `LABEL:` form only counts at the start of a line,
    so prose such as "the verdict: ..." does not end a section early.
    """
    alt = _label_alternation(labels)
    if line_start:
        plain = rf"^[ \t]*(?:{alt})[ \t]*:"
    else:
        plain = rf"(?<![A-Za-z])(?:{alt})[ \t]*:"
    return re.compile(
        rf"\[[ \t]*(?:{alt})[ \t]*\]"
        rf"|\*\*[ \t]*(?:{alt})[ \t]*:?[ \t]*\*\*[ \t]*:?"
        rf"|{plain}",
        re.IGNORECASE | re.MULTILINE,
    )


def has_section_marker(text: str, labels: Sequence[str]) -> bool:
    return find_section_start(text, labels) is not None


def find_section_start(text: str, labels: Sequence[str]) -> Optional[int]:
    """Offset of the first marker for any of labels, or None."""
    if not text:
        return None
    match = _marker_regex(tuple(labels), False).search(text)
    return match.start() if match else None


def extract_section(
    text: str,
    labels: Sequence[str],
    stop_labels: Sequence[str] = SECTION_LABELS,
    stop_anywhere: bool = False,
) -> Optional[str]:
    """
    Return the body of the first section introduced by one of labels.

    The body runs to the next marker of any stop label or to the end of the
    text, stripped, with a leading "-" or ":" separator removed. A plain
    `LABEL:` stop marker only counts at the start of a line unless
    stop_anywhere is set. Returns None when no marker is present; an empty
    string when the section is empty.
    """
    if not text:
        return None
    start = _marker_regex(tuple(labels), False).search(text)
    if not start:
        return None

    rest = LEADING_SEPARATOR.sub("", text[start.end():], count=1)
    stop = _marker_regex(tuple(stop_labels), not stop_anywhere).search(rest)
    body = rest[:stop.start()] if stop else rest
    return body.strip()


def first_paragraph(text: str) -> str:
    if not text:
        return ""
    return re.split(r"\n[ \t]*\n", text.strip(), maxsplit=1)[0]
