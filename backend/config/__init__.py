import logging

from .settings import Settings, settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("truthshield")

from .constants import (
    LLM_CONFIG,
    NORMALIZER_CONFIG,
    PREPROCESS_CONFIG,
)

REQUIRED_KEYS = [
    "PERPLEXITY_API_KEY",
    "GEMINI_API_KEY",
]

def check_api_keys_on_startup():
    """Check for required API keys on startup."""
    missing_keys = []
    for key_name in REQUIRED_KEYS:
        if not getattr(settings, key_name, None):
            missing_keys.append(key_name)

    if missing_keys:
        logger.warning("Missing API keys: %s", ", ".join(missing_keys))
    else:
        logger.info("All required API keys are configured.")

    if settings.PERPLEXITY_API_KEY and not settings.PERPLEXITY_API_KEY.startswith(LLM_CONFIG.API_KEY_PREFIX):
        logger.warning(
            "PERPLEXITY_API_KEY does not start with '%s'; verification calls will be rejected.",
            LLM_CONFIG.API_KEY_PREFIX
        )
    return missing_keys

__all__ = [
    "logger",
    "settings",
    "Settings",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "NORMALIZER_CONFIG",
    "PREPROCESS_CONFIG",
]
