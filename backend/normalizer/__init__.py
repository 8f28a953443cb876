from .response_normalizer import (
    ResponseNormalizer,
    default_normalizer,
    normalize_response,
    normalize_text,
)
from .verdict import extract_verdict
from .explanation import extract_explanation, clean_explanation
from .sources import extract_sources, build_source_refs, dedupe_sources, order_sources
from .signals import detect_propaganda_indicators, assess_source_balance

__all__ = [
    "ResponseNormalizer",
    "default_normalizer",
    "normalize_response",
    "normalize_text",
    "extract_verdict",
    "extract_explanation",
    "clean_explanation",
    "extract_sources",
    "build_source_refs",
    "dedupe_sources",
    "order_sources",
    "detect_propaganda_indicators",
    "assess_source_balance",
]
