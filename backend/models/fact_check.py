from typing import TypedDict, Literal, List, Dict

VerdictType = Literal["True", "False", "PartiallyTrue"]

VERDICT_TRUE: VerdictType = "True"
VERDICT_FALSE: VerdictType = "False"
VERDICT_PARTIALLY_TRUE: VerdictType = "PartiallyTrue"

class Source(TypedDict, total=False):
    """A titled reference; url may be empty, ref_number absent when unknown."""
    title: str
    url: str
    ref_number: int

class SourceRef(TypedDict):
    """Citation-to-source lookup entry keyed by ref number."""
    url: str
    title: str

class SourceBalance(TypedDict):
    has_multiple_sources: bool
    has_international_sources: bool

class FactCheckRecord(TypedDict, total=False):
    """Structured fact-check result handed to the presentation layer."""
    verdict: VerdictType
    explanation: str
    sources: List[Source]
    source_refs: Dict[int, SourceRef]
    propaganda_indicators: List[str]  # omitted when nothing matched
    source_balance: SourceBalance
    full_response: str
    error: str  # failure class name, degraded records only
