"""Request schema, recording and request processing."""

from realiser_core.contracts.processor import RequestProcessor
from realiser_core.contracts.recording import (
    RecordedRealisation,
    Recording,
    RecordSet,
    load_recording,
)
from realiser_core.contracts.schema import (
    CoordinatedNode,
    DocumentNode,
    ListNode,
    Node,
    RealisationRequest,
    RealisationResponse,
    StringNode,
    WordNode,
    parse_request,
)

__all__ = [
    "CoordinatedNode",
    "DocumentNode",
    "ListNode",
    "Node",
    "RealisationRequest",
    "RealisationResponse",
    "RecordSet",
    "RecordedRealisation",
    "Recording",
    "RequestProcessor",
    "StringNode",
    "WordNode",
    "load_recording",
    "parse_request",
]
