"""Document renderers."""

from __future__ import annotations

from typing import Optional

from realiser_core.errors import ConfigurationError
from realiser_core.format.base import Formatter
from realiser_core.format.html_formatter import HTMLFormatter
from realiser_core.format.numbered_prefix import NumberedPrefix
from realiser_core.format.text_formatter import TextFormatter

FORMATTERS: dict[str, type[Formatter]] = {
    "text": TextFormatter,
    "html": HTMLFormatter,
}


def create_formatter(name: Optional[str]) -> Optional[Formatter]:
    """
    Build a renderer by name.

    Args:
        name: "text", "html", or "none"/None for no formatting.

    Raises:
        ConfigurationError: for an unknown renderer name
    """
    if name is None or name == "none":
        return None
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown formatter {name!r}; expected one of {sorted(FORMATTERS)} or 'none'"
        ) from None


__all__ = [
    "FORMATTERS",
    "Formatter",
    "HTMLFormatter",
    "NumberedPrefix",
    "TextFormatter",
    "create_formatter",
]
