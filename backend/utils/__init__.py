from .parsing import extract_json_block, find_urls, find_first_url, domain_from_url, truncate_dump
from .text import summarize_text, extract_claims

__all__ = [
    "extract_json_block",
    "find_urls",
    "find_first_url",
    "domain_from_url",
    "truncate_dump",
    "summarize_text",
    "extract_claims",
]
