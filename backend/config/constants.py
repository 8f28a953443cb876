from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class LLMConfig:
    REQUEST_TIMEOUT: float = 30.0
    PREPROCESS_TIMEOUT: float = 30.0
    TEMPERATURE: float = 0.1
    SHORT_CLAIM_MAX_TOKENS: int = 1000
    LONG_CLAIM_MAX_TOKENS: int = 1500
    WEB_CONTENT_MAX_TOKENS: int = 1500
    SHORT_CLAIM_THRESHOLD: int = 100
    MAX_QUERY_LENGTH: int = 4000
    MIN_QUERY_LENGTH: int = 50
    API_KEY_PREFIX: str = "pplx-"

@dataclass(frozen=True)
class NormalizerConfig:
    HTML_SNIPPET_LIMIT: int = 500
    RESPONSE_DUMP_LIMIT: int = 500
    LOG_SNIPPET_LIMIT: int = 200
    MIN_EXPLANATION_LENGTH: int = 20
    MIN_SOURCE_LINE_LENGTH: int = 5

    PROPAGANDA_TERMS: Tuple[str, ...] = (
        "propaganda",
        "misleading",
        "deceptive",
        "exaggerated",
        "out of context",
        "bias",
        "cherry-picked",
        "misleadingly",
    )
    # Substring match on the URL, not a strict TLD check.
    INTERNATIONAL_DOMAINS: Tuple[str, ...] = (
        ".uk", ".au", ".ca", ".eu", ".in", ".cn", ".jp", ".ru",
    )

@dataclass(frozen=True)
class PreprocessConfig:
    """Limits for the heuristic claim/summary fallback."""
    SUMMARY_THRESHOLD: int = 300
    SUMMARY_SENTENCES: int = 3
    MIN_CLAIM_LENGTH: int = 20
    MAX_CLAIMS: int = 5

LLM_CONFIG = LLMConfig()
NORMALIZER_CONFIG = NormalizerConfig()
PREPROCESS_CONFIG = PreprocessConfig()
