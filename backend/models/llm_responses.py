from typing import TypedDict, List

class ChatMessage(TypedDict, total=False):
    role: str
    content: str

class ChatChoice(TypedDict, total=False):
    index: int
    message: ChatMessage
    finish_reason: str

class ChatCompletionResponse(TypedDict, total=False):
    """Deserialized chat-completion body from the search-augmented LLM."""
    id: str
    model: str
    choices: List[ChatChoice]
    citations: List[str]

class PreprocessResult(TypedDict):
    """Claims, summary and topics extracted before verification."""
    claims: List[str]
    summary: str
    main_topics: List[str]
