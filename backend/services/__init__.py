from .llm import call_perplexity, call_gemini
from .preprocessing import preprocess_content, heuristic_preprocess
from .verification_service import VerificationService, build_enhanced_query

__all__ = [
    "call_perplexity",
    "call_gemini",
    "preprocess_content",
    "heuristic_preprocess",
    "VerificationService",
    "build_enhanced_query",
]
