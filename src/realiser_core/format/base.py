"""
Shared dispatch for document renderers.

Both renderers walk an orthography-processed tree the same way: canned text
renders as itself, document categories go to the renderer, and constituent
groups surviving inside list items render as their space-joined children.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from realiser_core.errors import MalformedTreeError
from realiser_core.format.numbered_prefix import NumberedPrefix
from realiser_core.framework.categories import DocumentCategory
from realiser_core.framework.elements import (
    CoordinatedPhrase,
    Element,
    ListElement,
    StringLiteral,
)

logger = logging.getLogger(__name__)


class Formatter(ABC):
    """Base renderer; subclasses supply the markup per document category."""

    name: str = "base"

    def realise(self, element: Optional[Element]) -> Optional[StringLiteral]:
        """Render `element` into a single canned-text element."""
        if element is None:
            return None
        return StringLiteral(self.format(element))

    def format(self, element: Element) -> str:
        """
        Render `element` into a string.

        Raises:
            MalformedTreeError: if a node has no category
        """
        text = self._format(element, NumberedPrefix())
        logger.debug("%s formatter produced %d characters", self.name, len(text))
        return text.strip(" ")

    def _format(self, element: Element, prefix: NumberedPrefix) -> str:
        if isinstance(element, StringLiteral):
            return element.realisation
        category = element.category
        if category is None:
            raise MalformedTreeError(element, "Element has no category")
        if isinstance(category, DocumentCategory):
            return self.format_document(element, category, prefix)
        if isinstance(element, (ListElement, CoordinatedPhrase)):
            return "".join(self._child(child, prefix) + " " for child in element.children)
        return element.realisation

    def _child(self, element: Element, prefix: NumberedPrefix) -> str:
        return self._format(element, prefix).strip(" ")

    def _join(self, components: list[Element], prefix: NumberedPrefix, separator: str) -> str:
        return separator.join(self._child(component, prefix) for component in components)

    @staticmethod
    def _title(element: Element) -> Optional[str]:
        return getattr(element, "title", None)

    @abstractmethod
    def format_document(
        self, element: Element, category: DocumentCategory, prefix: NumberedPrefix
    ) -> str:
        """Render a node whose category is a document category."""
