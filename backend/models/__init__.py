from .fact_check import (
    VerdictType,
    VERDICT_TRUE,
    VERDICT_FALSE,
    VERDICT_PARTIALLY_TRUE,
    Source,
    SourceRef,
    SourceBalance,
    FactCheckRecord,
)
from .llm_responses import (
    ChatMessage,
    ChatChoice,
    ChatCompletionResponse,
    PreprocessResult,
)
from .requests import (
    VerifyRequest,
    AnalyzeUrlRequest,
    PreprocessRequest,
)

__all__ = [
    "VerdictType",
    "VERDICT_TRUE",
    "VERDICT_FALSE",
    "VERDICT_PARTIALLY_TRUE",
    "Source",
    "SourceRef",
    "SourceBalance",
    "FactCheckRecord",

    "ChatMessage",
    "ChatChoice",
    "ChatCompletionResponse",
    "PreprocessResult",

    "VerifyRequest",
    "AnalyzeUrlRequest",
    "PreprocessRequest",
]
