from typing import Any, Dict, List

from config import logger
from config.constants import PREPROCESS_CONFIG
from exceptions import LLMException
from models.llm_responses import PreprocessResult
from prompts import PREPROCESS_PROMPT
from utils.parsing import extract_json_block
from utils.text import extract_claims, summarize_text
from .llm import call_gemini


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def heuristic_preprocess(content: str) -> PreprocessResult:
    return PreprocessResult(
        claims=extract_claims(content)[:PREPROCESS_CONFIG.MAX_CLAIMS],
        summary=summarize_text(content),
        main_topics=[],
    )


async def preprocess_content(content: str) -> PreprocessResult:
    """
    Extract verifiable claims, a short summary and the main topics from content.
    Args:
        content: Article text or any other block of prose to be fact-checked
    Returns:
        PreprocessResult; falls back to sentence heuristics when the LLM is
        unavailable or answers with something other than the expected JSON
    """
    try:
        text = await call_gemini(PREPROCESS_PROMPT.format(content=content), json_output=True)
    except LLMException as e:
        logger.warning("Preprocessing LLM unavailable (%s). Using heuristic extraction.", e.message)
        return heuristic_preprocess(content)

    parsed: Dict[str, Any] = extract_json_block(text) or {}
    claims = _string_list(parsed.get("claims"))
    summary = parsed.get("summary")

    if not claims or not isinstance(summary, str) or not summary.strip():
        logger.warning("Could not parse preprocessing JSON from LLM. Falling back. Raw: %s", text[:200])
        return heuristic_preprocess(content)

    topics = parsed.get("mainTopics", parsed.get("main_topics"))
    result = PreprocessResult(
        claims=claims[:PREPROCESS_CONFIG.MAX_CLAIMS],
        summary=summary.strip(),
        main_topics=_string_list(topics),
    )
    logger.info("Preprocessed content into %d claims and %d topics.", len(result["claims"]), len(result["main_topics"]))
    return result
