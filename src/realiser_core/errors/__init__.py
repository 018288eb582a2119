"""Error types raised by the realization pipeline."""

from realiser_core.errors.types import (
    ConfigurationError,
    ErrorType,
    MalformedTreeError,
    ProtocolError,
    RealisationError,
    RequestSchemaError,
)

__all__ = [
    "ConfigurationError",
    "ErrorType",
    "MalformedTreeError",
    "ProtocolError",
    "RealisationError",
    "RequestSchemaError",
]
