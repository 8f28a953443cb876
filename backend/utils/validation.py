import re
from urllib.parse import urlparse

class ValidationError(ValueError):
    pass

class InputValidator:
    
    XSS_PATTERNS = [
        re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL),
        re.compile(r"javascript:", re.IGNORECASE),
        re.compile(r"<iframe", re.IGNORECASE),
    ]
    
    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')

    MAX_CLAIM_LENGTH = 5000
    MAX_CONTENT_LENGTH = 50000
    MAX_URL_LENGTH = 2048
    
    @staticmethod
    def sanitize_claim(claim: str) -> str:
        if not claim:
            raise ValidationError("Claim cannot be empty")
        
        claim = claim.strip()
        
        if len(claim) < 3:
            raise ValidationError("Claim must be at least 3 characters long")
        
        if len(claim) > InputValidator.MAX_CLAIM_LENGTH:
            raise ValidationError("Claim cannot exceed 5000 characters")
        
        for pattern in InputValidator.XSS_PATTERNS:
            if pattern.search(claim):
                raise ValidationError("Claim contains suspicious HTML/JavaScript patterns")
        
        claim = InputValidator.CONTROL_CHARS_PATTERN.sub('', claim)
        
        claim = re.sub(r'\s+', ' ', claim)
        
        return claim
    
    @staticmethod
    def sanitize_url(url: str) -> str:
        if not url:
            raise ValidationError("URL cannot be empty")

        url = url.strip()

        if len(url) > InputValidator.MAX_URL_LENGTH:
            raise ValidationError("URL is too long")

        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValidationError("URL must be an absolute http(s) address")

        return url

    @staticmethod
    def sanitize_content(content: str) -> str:
        """Multi-line content keeps its line breaks; only control chars go."""
        if not content or not content.strip():
            raise ValidationError("Content cannot be empty")

        content = InputValidator.CONTROL_CHARS_PATTERN.sub('', content).strip()

        if len(content) > InputValidator.MAX_CONTENT_LENGTH:
            content = content[:InputValidator.MAX_CONTENT_LENGTH]

        return content
