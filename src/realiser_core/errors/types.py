"""
Error taxonomy for the realization pipeline.

Aggregation never raises: a rule that cannot apply returns an empty result.
Everything below fails a single request and is reported back to its caller.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from realiser_core.framework.elements import Element


class ErrorType(str, Enum):
    """Machine-interpretable error types."""

    MALFORMED_TREE = "MALFORMED_TREE"
    """A node lacks its category or is otherwise unusable by a stage."""

    REQUEST_SCHEMA = "REQUEST_SCHEMA"
    """Request payload is not valid JSON or does not match the request schema."""

    PROTOCOL_FRAMING = "PROTOCOL_FRAMING"
    """Short read, zero-length or oversized payload on the wire."""

    CONFIGURATION = "CONFIGURATION"
    """Invalid settings, detected at startup."""


class RealisationError(Exception):
    """Base of all errors raised by the pipeline and its service layer."""

    error_type: ErrorType = ErrorType.MALFORMED_TREE

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details or {}

    def to_log_message(self) -> str:
        """Format error for logging."""
        return f"[{self.error_type.value}] {self.message}"


class MalformedTreeError(RealisationError):
    """A stage met a node it cannot process; identifies the node."""

    error_type = ErrorType.MALFORMED_TREE

    def __init__(self, element: "Element", message: str):
        category = element.category.value if element.category is not None else None
        super().__init__(
            message,
            details={
                "kind": type(element).__name__,
                "category": category,
                "tree": element.print_tree(),
            },
        )
        self.element = element

    def to_log_message(self) -> str:
        return (
            f"[{self.error_type.value}] {self.details['kind']}"
            f"(category={self.details['category']}): {self.message}"
        )


class RequestSchemaError(RealisationError):
    """Wire or HTTP payload failed validation."""

    error_type = ErrorType.REQUEST_SCHEMA


class ProtocolError(RealisationError):
    """Framing error on the length-prefixed wire protocol."""

    error_type = ErrorType.PROTOCOL_FRAMING


class ConfigurationError(RealisationError):
    """Invalid settings."""

    error_type = ErrorType.CONFIGURATION
