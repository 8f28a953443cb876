import asyncio
from typing import Dict, List, Type

from pydantic import BaseModel, ValidationError

from config import check_api_keys_on_startup, logger
from config.constants import LLM_CONFIG
from exceptions import APIException, ParseError, ValidationException
from models.fact_check import FactCheckRecord
from models.llm_responses import PreprocessResult
from models.requests import AnalyzeUrlRequest, PreprocessRequest, VerifyRequest
from normalizer import ResponseNormalizer
from prompts import (
    ENHANCED_QUERY_FOOTER,
    ENHANCED_QUERY_HEADER,
    FALLBACK_QUERY_PREFIX,
    LONG_CLAIM_SYSTEM_PROMPT,
    LONG_CLAIM_USER_PROMPT,
    SHORT_CLAIM_SYSTEM_PROMPT,
    SHORT_CLAIM_USER_PROMPT,
    WEB_CONTENT_SYSTEM_PROMPT,
    WEB_CONTENT_USER_PROMPT,
)
from utils.text import summarize_text
from .llm import call_perplexity
from .preprocessing import preprocess_content


def _validated(request_model: Type[BaseModel], field: str, value) -> str:
    try:
        return getattr(request_model(**{field: value}), field)
    except ValidationError as e:
        raise ValidationException(field, e.errors()[0]["msg"])


def _messages(system_prompt: str, user_prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]


def build_enhanced_query(preprocessed: PreprocessResult, content: str) -> str:
    """Structured fact-check query from preprocessing output, bounded in length."""
    body = ""
    if preprocessed.get("summary"):
        body += f"OVERALL SUMMARY: {preprocessed['summary']}\n\n"

    claims = preprocessed.get("claims") or []
    if claims:
        body += "SPECIFIC CLAIMS TO VERIFY:\n"
        body += "".join(f"{i}. {claim}\n" for i, claim in enumerate(claims, start=1))
        body += "\n"

    topics = preprocessed.get("main_topics") or []
    if topics:
        body += f"MAIN TOPICS: {', '.join(topics)}\n\n"

    # Only the extracted part counts toward the minimum.
    if len(body.strip()) < LLM_CONFIG.MIN_QUERY_LENGTH:
        logger.warning("Preprocessing produced insufficient content. Using basic summarization.")
        query = FALLBACK_QUERY_PREFIX + summarize_text(content)
    else:
        query = ENHANCED_QUERY_HEADER + body + ENHANCED_QUERY_FOOTER

    if len(query) > LLM_CONFIG.MAX_QUERY_LENGTH:
        query = query[:LLM_CONFIG.MAX_QUERY_LENGTH - 3] + "..."

    return query


class VerificationService:
    """Runs claims, URLs and long-form content through the verification LLM."""

    def __init__(self, normalizer: ResponseNormalizer = None):
        self.normalizer = normalizer or ResponseNormalizer()
        check_api_keys_on_startup()

    async def verify_claim(self, claim: str) -> FactCheckRecord:
        claim = _validated(VerifyRequest, "claim", claim)
        return await self._verify(claim)

    async def _verify(self, claim: str) -> FactCheckRecord:
        if len(claim) < LLM_CONFIG.SHORT_CLAIM_THRESHOLD:
            messages = _messages(SHORT_CLAIM_SYSTEM_PROMPT, SHORT_CLAIM_USER_PROMPT.format(claim=claim))
            max_tokens = LLM_CONFIG.SHORT_CLAIM_MAX_TOKENS
        else:
            messages = _messages(LONG_CLAIM_SYSTEM_PROMPT, LONG_CLAIM_USER_PROMPT.format(claim=claim))
            max_tokens = LLM_CONFIG.LONG_CLAIM_MAX_TOKENS

        start_time = asyncio.get_event_loop().time()
        raw = await call_perplexity(messages, max_tokens)
        record = self.normalizer.normalize(raw)

        duration = round(asyncio.get_event_loop().time() - start_time, 2)
        logger.info(
            "Verification completed for claim '%s...' in %s seconds: %s", claim[:50], duration, record["verdict"]
        )
        return record

    async def analyze_web_content(self, url: str) -> FactCheckRecord:
        url = _validated(AnalyzeUrlRequest, "url", url)

        messages = _messages(WEB_CONTENT_SYSTEM_PROMPT, WEB_CONTENT_USER_PROMPT.format(url=url))
        raw = await call_perplexity(messages, LLM_CONFIG.WEB_CONTENT_MAX_TOKENS)
        record = self.normalizer.normalize(raw)
        logger.info("Web content analysis for %s: %s", url, record["verdict"])
        return record

    async def enhanced_fact_check(self, content: str) -> FactCheckRecord:
        """
        Preprocess long-form content into claims and a summary, then verify
        them with one structured query.

        If the upstream call fails the summarized content, cut to the query
        length limit, is verified as a plain claim instead. Validation errors
        and failures of that second attempt propagate to the caller.
        """
        content = _validated(PreprocessRequest, "content", content)

        try:
            preprocessed = await preprocess_content(content)
            query = build_enhanced_query(preprocessed, content)
            logger.info("Enhanced fact check query built (%d chars, %d claims).", len(query), len(preprocessed["claims"]))
            return await self._verify(query)
        except APIException as e:
            logger.error("Enhanced fact check failed: %s. Falling back to summary verification.", e.message)
            fallback_reason = e.message

        summary = summarize_text(content)
        if not summary:
            return self.normalizer.degraded(ParseError(fallback_reason), content)
        return await self._verify(summary[:LLM_CONFIG.MAX_QUERY_LENGTH])
