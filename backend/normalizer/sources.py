import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from config import logger
from config.constants import NORMALIZER_CONFIG
from models.fact_check import Source, SourceRef
from utils.parsing import domain_from_url, find_first_url, find_urls
from .sections import SOURCE_LABELS, extract_section

# Reference-line shapes, tried in this order.
BRACKET_REF_LINE = re.compile(r"^\[(\d+)\]\s*(.*)$")              # [n] - description
NUMBERED_BRACKET_LINE = re.compile(r"^(\d+)\.\s*\[[^\]]*\]\s*(.*)$")  # n. [anything] description
NUMBERED_LINE = re.compile(r"^(\d+)\.\s*(.*)$")                   # n. description
REFERENCE_LINE_PATTERNS = (BRACKET_REF_LINE, NUMBERED_BRACKET_LINE, NUMBERED_LINE)

CITATION_MARKER = re.compile(r"\[(\d+)\]")
LEADING_TOKEN = re.compile(r"^\s*(?:\[(\d+)\]|(\d+)\.)")
LEADING_REFERENCE = re.compile(r"^\s*(?:\[\d+\]|\d+\.)\s*")
LIST_BULLET = re.compile(r"^\s*[-*•]\s+")
MARKDOWN_LINK = re.compile(r"\[([^\]]+)\]\((https?://[^)\s]+)\)")
EMPTY_PARENS = re.compile(r"\(\s*\)")

TITLE_SEPARATORS = " \t-–—:|,;"


def _source_lines(sources_text: str) -> List[str]:
    """Non-blank lines with bullets, bold markers and markdown links flattened."""
    lines = []
    for raw_line in (sources_text or "").splitlines():
        line = raw_line.replace("**", "").strip()
        line = LIST_BULLET.sub("", line)
        line = MARKDOWN_LINK.sub(r"\1 - \2", line)
        if line:
            lines.append(line)
    return lines


def _clean_title(description: str, url: Optional[str] = None) -> str:
    title = description or ""
    if url:
        title = title.replace(url, " ")
    title = EMPTY_PARENS.sub(" ", CITATION_MARKER.sub(" ", title))
    title = re.sub(r"\s+", " ", title)
    return title.strip(TITLE_SEPARATORS)


def parse_reference_line(line: str) -> Optional[Tuple[int, str]]:
    """(ref number, description) for `[n] ...`, `n. [x] ...` or `n. ...` lines."""
    for pattern in REFERENCE_LINE_PATTERNS:
        match = pattern.match(line)
        if match:
            return int(match.group(1)), match.group(2).strip()
    return None


def recover_ref_number(line: str) -> Optional[int]:
    """A leading `[n]` or `n.` token, else a `[n]` token anywhere in the line."""
    match = LEADING_TOKEN.match(line)
    if match:
        return int(match.group(1) or match.group(2))
    match = CITATION_MARKER.search(line)
    return int(match.group(1)) if match else None


def _make_source(title: str, url: str, ref_number: Optional[int]) -> Source:
    source = Source(title=title, url=url)
    if ref_number is not None:
        source["ref_number"] = ref_number
    return source


def _citation_map(citations: Sequence[str]) -> Dict[int, str]:
    return {index: url for index, url in enumerate(citations, start=1) if url}


def sources_from_citations(sources_text: str, citations: Sequence[str]) -> List[Source]:
    """
    Pair source-list lines with the positional citation URLs.

    URLs written in the lines fill in reference numbers the citations list
    does not cover; a citation URL always wins for its own number. When no
    line can be parsed, every citation becomes a source on its own.
    """
    url_by_ref = _citation_map(citations)
    sources: List[Source] = []

    for line in _source_lines(sources_text):
        parsed = parse_reference_line(line)
        if parsed:
            ref_number, description = parsed
            line_url = find_first_url(description)
            title = _clean_title(description, line_url)
        else:
            line_url = find_first_url(line)
            if not line_url:
                continue
            ref_number = recover_ref_number(line)
            title = _clean_title(LEADING_REFERENCE.sub("", line, count=1), line_url)

        if ref_number is None:
            sources.append(_make_source(title or domain_from_url(line_url), line_url, None))
            continue

        if line_url and ref_number not in url_by_ref:
            url_by_ref[ref_number] = line_url
        sources.append(
            _make_source(title or f"Source {ref_number}", url_by_ref.get(ref_number, ""), ref_number)
        )

    if not sources:
        logger.debug("No source lines parsed; building sources from %d citations", len(citations))
        for index, url in enumerate(citations, start=1):
            if url:
                sources.append(_make_source(f"Source {index}: {domain_from_url(url)}", url, index))

    return sources


def sources_from_text(sources_text: str) -> List[Source]:
    """Parse a source list that has no citations array to lean on."""
    sources: List[Source] = []
    for position, line in enumerate(_source_lines(sources_text), start=1):
        url = find_first_url(line)
        if url:
            ref_number = recover_ref_number(line)
            title = _clean_title(LEADING_REFERENCE.sub("", line, count=1), url)
            sources.append(_make_source(
                title or domain_from_url(url),
                url,
                ref_number if ref_number is not None else position,
            ))
            continue

        parsed = parse_reference_line(line)
        if parsed:
            ref_number, description = parsed
            title = _clean_title(description)
            sources.append(_make_source(title or f"Source {ref_number}", "", ref_number))
        elif len(line) > NORMALIZER_CONFIG.MIN_SOURCE_LINE_LENGTH:
            sources.append(_make_source(line, "", position))
    return sources


def sources_from_inline_urls(text: str) -> List[Source]:
    """Last resort: every distinct URL in the response, titled by its host."""
    sources: List[Source] = []
    seen = set()
    for url in find_urls(text):
        if url in seen:
            continue
        seen.add(url)
        sources.append(_make_source(domain_from_url(url) or url, url, None))
    return sources


def cited_ref_numbers(text: str) -> List[int]:
    """Distinct `[n]` markers in order of first appearance."""
    numbers: List[int] = []
    for match in CITATION_MARKER.finditer(text or ""):
        number = int(match.group(1))
        if number not in numbers:
            numbers.append(number)
    return numbers


def add_cited_sources(
    sources: List[Source],
    cited_refs: Iterable[int],
    citations: Sequence[str],
) -> List[Source]:
    """Give cited numbers that only exist in the citations array a source entry."""
    url_by_ref = _citation_map(citations)
    known_refs = {s["ref_number"] for s in sources if "ref_number" in s}
    known_urls = {s["url"] for s in sources if s.get("url")}
    result = list(sources)
    for ref_number in cited_refs:
        url = url_by_ref.get(ref_number)
        if not url or ref_number in known_refs or url in known_urls:
            continue
        result.append(_make_source(f"Source {ref_number}: {domain_from_url(url)}", url, ref_number))
        known_refs.add(ref_number)
        known_urls.add(url)
    return result


def dedupe_sources(sources: List[Source]) -> List[Source]:
    """Keep the first source per non-empty URL; URL-less sources always stay."""
    seen_urls = set()
    result = []
    for source in sources:
        url = source.get("url") or ""
        if url:
            if url in seen_urls:
                continue
            seen_urls.add(url)
        result.append(source)
    return result


def order_sources(sources: List[Source]) -> List[Source]:
    """
    Sort numbered sources ascending by ref number.

    Numbered sources are reordered among the slots they already occupy, so
    sources without a number keep their positions and the sort stays stable.
    """
    slots = [i for i, source in enumerate(sources) if source.get("ref_number") is not None]
    numbered = sorted((sources[i] for i in slots), key=lambda s: s["ref_number"])
    ordered = list(sources)
    for slot, source in zip(slots, numbered):
        ordered[slot] = source
    return ordered


def build_source_refs(sources: List[Source]) -> Dict[int, SourceRef]:
    refs: Dict[int, SourceRef] = {}
    for source in sources:
        ref_number = source.get("ref_number")
        if ref_number is None or ref_number in refs:
            continue
        refs[ref_number] = SourceRef(url=source.get("url", ""), title=source.get("title", ""))
    return refs


def extract_sources(
    text: str,
    citations: Optional[Sequence[str]] = None,
    cited_refs: Optional[Iterable[int]] = None,
) -> List[Source]:
    """
    Build the ordered, de-duplicated source list for a response.

    Args:
        text: Full LLM response text
        citations: URLs returned next to the text, positionally matching `[1]`, `[2]`, ...
        cited_refs: Reference numbers cited in the explanation
    Returns:
        Sources sorted by ref number where one is known
    """
    sources_text = extract_section(text, SOURCE_LABELS) or ""
    if isinstance(citations, str):
        logger.warning("Ignoring citations given as a single string")
        citations = None
    # Blank out bad entries so later URLs keep their reference numbers.
    citations = [c if isinstance(c, str) else "" for c in (citations or [])]

    if any(citations):
        sources = sources_from_citations(sources_text, citations)
        if cited_refs:
            sources = add_cited_sources(sources, cited_refs, citations)
    else:
        sources = sources_from_text(sources_text)
        if not sources:
            sources = sources_from_inline_urls(text)

    return order_sources(dedupe_sources(sources))
