from __future__ import annotations

from realiser_core.format.base import Formatter
from realiser_core.format.numbered_prefix import NumberedPrefix
from realiser_core.framework.categories import DocumentCategory
from realiser_core.framework.elements import Element


class HTMLFormatter(Formatter):
    """Tag-based renderer; numbering is left to the `<ol>` element."""

    name = "html"

    def format_document(
        self, element: Element, category: DocumentCategory, prefix: NumberedPrefix
    ) -> str:
        components = element.children
        title = self._title(element)

        if category is DocumentCategory.DOCUMENT:
            heading = f"<h1>{title}</h1>" if title else ""
            return heading + self._join(components, prefix, "")

        if category is DocumentCategory.SECTION:
            heading = f"<h2>{title}</h2>" if title else ""
            return heading + self._join(components, prefix, "")

        if category is DocumentCategory.LIST:
            return "<ul>" + self._join(components, prefix, "") + "</ul>"

        if category is DocumentCategory.ENUMERATED_LIST:
            return "<ol>" + self._join(components, prefix, "") + "</ol>"

        if category is DocumentCategory.PARAGRAPH:
            if not components:
                return ""
            return "<p>" + self._join(components, prefix, " ") + "</p>"

        if category is DocumentCategory.SENTENCE:
            return element.realisation

        # LIST_ITEM
        return "<li>" + self._join(components, prefix, " ") + "</li>"
