import json
from typing import Any, List, Optional, Sequence, Tuple

from config import logger
from config.constants import NORMALIZER_CONFIG, NormalizerConfig
from exceptions import (
    NormalizationException,
    ParseError,
    SchemaError,
    TransportFormatError,
)
from models.fact_check import (
    FactCheckRecord,
    SourceBalance,
    VERDICT_FALSE,
)
from utils.parsing import truncate_dump
from .explanation import extract_explanation
from .signals import assess_source_balance, detect_propaganda_indicators
from .sources import build_source_refs, cited_ref_numbers, extract_sources
from .verdict import extract_verdict


class ResponseNormalizer:
    """
    Turns a chat-completion response from the verification LLM into a
    FactCheckRecord.

    The normalizer holds no per-call state and never raises: transport,
    schema and parsing failures all come back as degraded records with a
    False verdict and an explanation naming the failure.
    """

    def __init__(self, config: NormalizerConfig = None):
        self.config = config or NORMALIZER_CONFIG

    def normalize(self, raw: Any) -> FactCheckRecord:
        """
        Normalize a deserialized chat-completion body.

        Args:
            raw: `{"choices": [{"message": {"content": ...}}], "citations": [...]}`,
                or whatever the HTTP layer got back instead (an HTML page, None, ...)
        Returns:
            A fully populated FactCheckRecord
        """
        try:
            content, citations = self._unwrap(raw)
        except TransportFormatError as e:
            return self.degraded(e, raw[:self.config.HTML_SNIPPET_LIMIT])
        except NormalizationException as e:
            return self.degraded(e, truncate_dump(raw, self.config.RESPONSE_DUMP_LIMIT))
        except Exception as e:
            logger.exception("Unexpected error while unwrapping LLM response.")
            return self.degraded(ParseError(str(e)), truncate_dump(raw, self.config.RESPONSE_DUMP_LIMIT))

        return self.normalize_text(content, citations)

    def normalize_text(
        self,
        message_text: str,
        citations: Optional[Sequence[str]] = None,
    ) -> FactCheckRecord:
        """Normalize message content that has already been pulled out of the response."""
        if not isinstance(message_text, str):
            return self.degraded(
                SchemaError("message content is not a string"),
                truncate_dump(message_text, self.config.RESPONSE_DUMP_LIMIT),
            )

        try:
            record = self._build_record(message_text, citations)
        except Exception as e:
            logger.exception("Error parsing fact check response.")
            return self.degraded(ParseError(str(e)), message_text)

        logger.debug(
            "Parsed fact check: verdict=%s, %d sources, %d refs",
            record["verdict"], len(record["sources"]), len(record["source_refs"])
        )
        return record

    def _unwrap(self, raw: Any) -> Tuple[str, List[str]]:
        if isinstance(raw, str):
            lowered = raw.lower()
            if "<!doctype" in lowered or "<html" in lowered:
                raise TransportFormatError(raw[:self.config.HTML_SNIPPET_LIMIT])
            try:
                raw = json.loads(raw)
            except ValueError:
                raise SchemaError("response body is not JSON")

        if not isinstance(raw, dict):
            raise SchemaError(f"expected an object, got {type(raw).__name__}")

        choices = raw.get("choices")
        if not isinstance(choices, list) or not choices:
            raise SchemaError("missing choices array")

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict) or not isinstance(message.get("content"), str):
            raise SchemaError("missing message content")

        return message["content"], self._citation_urls(raw.get("citations"))

    @staticmethod
    def _citation_urls(citations: Any) -> List[str]:
        """Citation URLs in order; entries may be plain strings or objects with a url."""
        if not isinstance(citations, list):
            return []
        urls = []
        for citation in citations:
            if isinstance(citation, dict):
                citation = citation.get("url")
            urls.append(citation if isinstance(citation, str) else "")
        return urls

    def _build_record(self, text: str, citations: Optional[Sequence[str]]) -> FactCheckRecord:
        explanation = extract_explanation(text)
        sources = extract_sources(text, citations, cited_refs=cited_ref_numbers(explanation))

        record = FactCheckRecord(
            verdict=extract_verdict(text),
            explanation=explanation,
            sources=sources,
            source_refs=build_source_refs(sources),
            source_balance=assess_source_balance(sources),
            full_response=text,
        )

        indicators = detect_propaganda_indicators(text)
        if indicators:
            record["propaganda_indicators"] = indicators
        return record

    def degraded(self, error: NormalizationException, full_response: str) -> FactCheckRecord:
        logger.error(
            "Returning degraded fact check (%s): %s | response: %s",
            error.__class__.__name__,
            error.message,
            full_response[:self.config.LOG_SNIPPET_LIMIT]
        )
        return FactCheckRecord(
            verdict=VERDICT_FALSE,
            explanation=error.message,
            sources=[],
            source_refs={},
            source_balance=SourceBalance(
                has_multiple_sources=False,
                has_international_sources=False,
            ),
            full_response=full_response,
            error=error.__class__.__name__,
        )


default_normalizer = ResponseNormalizer()


def normalize_response(raw: Any) -> FactCheckRecord:
    return default_normalizer.normalize(raw)


def normalize_text(message_text: str, citations: Optional[Sequence[str]] = None) -> FactCheckRecord:
    return default_normalizer.normalize_text(message_text, citations)
