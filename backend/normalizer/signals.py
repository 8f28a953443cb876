from typing import List

from config.constants import NORMALIZER_CONFIG
from models.fact_check import Source, SourceBalance


def detect_propaganda_indicators(text: str) -> List[str]:
    """Vocabulary terms found anywhere in the text, in vocabulary order."""
    if not text:
        return []
    lowered = text.lower()
    return [term for term in NORMALIZER_CONFIG.PROPAGANDA_TERMS if term in lowered]


def has_international_source(sources: List[Source]) -> bool:
    for source in sources:
        url = (source.get("url") or "").lower()
        if any(domain in url for domain in NORMALIZER_CONFIG.INTERNATIONAL_DOMAINS):
            return True
    return False


def assess_source_balance(sources: List[Source]) -> SourceBalance:
    return SourceBalance(
        has_multiple_sources=len(sources) > 1,
        has_international_sources=has_international_source(sources),
    )
