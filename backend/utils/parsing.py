import json
import re
from typing import Any, Optional, Dict, List
from urllib.parse import urlparse

URL_PATTERN = re.compile(r"https?://[^\s<>\"')\]]+", re.IGNORECASE)
TRAILING_URL_PUNCTUATION = ".,;:!?"


def extract_json_block(text: str) -> Optional[Dict[str, Any]]:
    """Extract the first valid JSON object from text."""
    if not text:
        return None
    
    start = text.find("{")
    if start == -1:
        return None
    
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                candidate = text[start : i + 1]
                try:
                    return json.loads(candidate)
                except json.JSONDecodeError:
                    try:
                        cleaned = re.sub(r"[\x00-\x1f]", "", candidate)
                        return json.loads(cleaned)
                    except Exception:
                        return None
    return None


def find_urls(text: str) -> List[str]:
    """Return every http(s) URL in text, in order, trailing punctuation removed."""
    if not text:
        return []
    return [m.group(0).rstrip(TRAILING_URL_PUNCTUATION) for m in URL_PATTERN.finditer(text)]


def find_first_url(text: str) -> Optional[str]:
    urls = find_urls(text)
    return urls[0] if urls else None


def domain_from_url(url: str) -> str:
    """Host part of a URL without a leading 'www.'; empty string if unparseable."""
    if not url:
        return ""
    try:
        host = urlparse(url).netloc
    except ValueError:
        return ""
    host = host.split("@")[-1].split(":")[0].lower()
    if host.startswith("www."):
        host = host[4:]
    return host


def truncate_dump(value: Any, limit: int) -> str:
    """Best-effort string form of any payload, cut to limit characters."""
    if isinstance(value, str):
        return value[:limit]
    try:
        dumped = json.dumps(value, default=str)
    except Exception:
        dumped = f"<unserializable {type(value).__name__}>"
    return dumped[:limit]
