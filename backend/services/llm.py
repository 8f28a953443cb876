from typing import Dict, Any, List, Union
import httpx
from utils.retry import async_retry
from exceptions import LLMException, RateLimitException
from config import settings, logger
from config.constants import LLM_CONFIG


def _is_client_error(error: BaseException) -> bool:
    return isinstance(error, httpx.HTTPStatusError) and error.response.status_code < 500


def _perplexity_key() -> str:
    key = settings.PERPLEXITY_API_KEY
    if not key:
        logger.critical("PERPLEXITY_API_KEY not configured.")
        raise LLMException("Perplexity API key is missing", recoverable=False, service="perplexity")
    if not key.startswith(LLM_CONFIG.API_KEY_PREFIX):
        logger.critical("PERPLEXITY_API_KEY has an invalid format (expected prefix %s).", LLM_CONFIG.API_KEY_PREFIX)
        raise LLMException(
            f"Invalid Perplexity API key format, the key should start with '{LLM_CONFIG.API_KEY_PREFIX}'",
            recoverable=False,
            service="perplexity"
        )
    return key


@async_retry(
    max_attempts=3,
    exceptions=(httpx.TransportError, httpx.HTTPStatusError),
    give_up=_is_client_error
)
async def _post_chat_completion(body: Dict[str, Any], api_key: str) -> httpx.Response:
    headers = {"Content-Type": "application/json", "Authorization": f"Bearer {api_key}"}
    async with httpx.AsyncClient(timeout=LLM_CONFIG.REQUEST_TIMEOUT) as client:
        response = await client.post(settings.PERPLEXITY_API_URL, headers=headers, json=body)
        response.raise_for_status()
        return response


async def call_perplexity(messages: List[Dict[str, str]], max_tokens: int) -> Union[Dict[str, Any], str]:
    """
    Send a chat-completion request to the search-augmented verification model.

    Returns the decoded JSON body. A body that is not JSON (an HTML error page
    from a proxy, for instance) comes back as text so the normalizer can
    report it as a transport failure.
    """
    api_key = _perplexity_key()
    body = {
        "model": settings.PERPLEXITY_MODEL,
        "messages": messages,
        "max_tokens": max_tokens,
        "temperature": LLM_CONFIG.TEMPERATURE,
    }
    logger.info("Calling Perplexity model %s (max_tokens=%d).", settings.PERPLEXITY_MODEL, max_tokens)

    try:
        response = await _post_chat_completion(body, api_key)
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.error("Perplexity HTTP error %s for URL %s: %s", status, e.request.url, e.response.text[:300])
        if status == 401:
            raise LLMException(
                "Authentication with Perplexity API failed. The API key is invalid or expired.",
                recoverable=False,
                service="perplexity"
            )
        if status == 429:
            retry_after = e.response.headers.get("Retry-After")
            raise RateLimitException("Perplexity", float(retry_after) if retry_after and retry_after.isdigit() else None)
        raise LLMException(f"HTTP {status}", recoverable=status >= 500, service="perplexity")
    except httpx.RequestError as e:
        logger.error("Perplexity request error: %s", str(e))
        raise LLMException("No response received from Perplexity API.", recoverable=True, service="perplexity")

    logger.info("Received response from Perplexity API. Status: %s", response.status_code)
    try:
        return response.json()
    except ValueError:
        logger.warning("Perplexity returned a non-JSON body (content-type %s).", response.headers.get("content-type"))
        return response.text


@async_retry(max_attempts=2, exceptions=(httpx.TransportError,))
async def _post_generate_content(body: Dict[str, Any], api_key: str) -> httpx.Response:
    headers = {"Content-Type": "application/json", "x-goog-api-key": api_key}
    async with httpx.AsyncClient(timeout=LLM_CONFIG.PREPROCESS_TIMEOUT) as client:
        response = await client.post(settings.GEMINI_ENDPOINT, headers=headers, json=body)
        response.raise_for_status()
        return response


async def call_gemini(prompt: str, json_output: bool = False) -> str:
    """Generate text with Gemini; used for claim preprocessing."""
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not configured.")
        raise LLMException("Gemini API key not configured", recoverable=False, service="gemini")

    body: Dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
    }
    if json_output:
        body["generationConfig"] = {"response_mime_type": "application/json"}

    try:
        response = await _post_generate_content(body, settings.GEMINI_API_KEY)
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Gemini HTTP error %s for URL %s: %s", e.response.status_code, e.request.url, e.response.text[:300])
        raise LLMException(f"HTTP {e.response.status_code}", recoverable=True, service="gemini")
    except httpx.RequestError as e:
        logger.error("Gemini request error: %s", str(e))
        raise LLMException("No response received from Gemini API.", recoverable=True, service="gemini")
    except ValueError as e:
        logger.error("Gemini returned a non-JSON body: %s", e)
        raise LLMException("Invalid JSON from Gemini API", recoverable=False, service="gemini")

    text = ""
    try:
        candidates = data.get("candidates", [])
        if isinstance(candidates, list) and candidates:
            parts = candidates[0].get("content", {}).get("parts", [])
            if isinstance(parts, list) and parts:
                text = parts[0].get("text", "")
    except (AttributeError, IndexError, TypeError) as e:
        logger.error("Error parsing Gemini response structure: %s. Response: %s", e, str(data)[:300])

    if not text:
        raise LLMException("Unexpected response structure from Gemini API", recoverable=False, service="gemini")
    return text
