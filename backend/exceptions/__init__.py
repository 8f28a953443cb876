from typing import Optional, Dict, Any

class TruthShieldException(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class APIException(TruthShieldException):
    pass

class RateLimitException(APIException):
    def __init__(self, api_name: str, retry_after: Optional[float] = None):
        super().__init__(
            f"Rate limit exceeded for {api_name}",
            {"api_name": api_name, "retry_after": retry_after}
        )

class ValidationException(TruthShieldException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason}
        )

class LLMException(APIException):
    def __init__(self, reason: str, recoverable: bool = True, service: str = "llm"):
        super().__init__(
            f"LLM service error: {reason}",
            {"reason": reason, "recoverable": recoverable, "service": service}
        )

class NormalizationException(TruthShieldException):
    """Base class for failures while turning an LLM response into a record."""
    pass

class TransportFormatError(NormalizationException):
    """Upstream returned an HTML page or other non-JSON body."""
    def __init__(self, snippet: str):
        super().__init__(
            "API error: Received HTML instead of JSON response. "
            "This may indicate a network or proxy issue.",
            {"snippet": snippet}
        )

class SchemaError(NormalizationException):
    """Upstream JSON lacks the choices/message-content shape."""
    def __init__(self, reason: str):
        super().__init__(
            f"Could not process API response: invalid response format ({reason}).",
            {"reason": reason}
        )

class ParseError(NormalizationException):
    def __init__(self, reason: str):
        super().__init__(
            f"Failed to analyze response data due to a processing error: {reason}",
            {"reason": reason}
        )
