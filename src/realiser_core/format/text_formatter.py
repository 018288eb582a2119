from __future__ import annotations

from realiser_core.format.base import Formatter
from realiser_core.format.numbered_prefix import NumberedPrefix
from realiser_core.framework.categories import DocumentCategory
from realiser_core.framework.elements import Element


class TextFormatter(Formatter):
    """
    Plain-text renderer.

    Titles are followed by line breaks, paragraphs by a blank line, bullet
    items start with " * " and enumerated items with their dotted number.
    """

    name = "text"

    def format_document(
        self, element: Element, category: DocumentCategory, prefix: NumberedPrefix
    ) -> str:
        components = element.children
        title = self._title(element)

        if category is DocumentCategory.DOCUMENT:
            heading = f"{title}\n\n" if title else ""
            return heading + self._join(components, prefix, "")

        if category is DocumentCategory.SECTION:
            heading = f"{title}\n" if title else ""
            return heading + self._join(components, prefix, "")

        if category is DocumentCategory.LIST:
            return self._join(components, prefix, "")

        if category is DocumentCategory.ENUMERATED_LIST:
            return self._format_enumerated_list(components, title, prefix)

        if category is DocumentCategory.PARAGRAPH:
            return self._join(components, prefix, " ") + "\n\n"

        if category is DocumentCategory.SENTENCE:
            return element.realisation

        # LIST_ITEM
        container = element.parent
        marker = ""
        if container is not None and container.category is DocumentCategory.LIST:
            marker = " * "
        elif container is not None and container.category is DocumentCategory.ENUMERATED_LIST:
            marker = f"{prefix} - "
        return marker + self._join(components, prefix, " ") + "\n"

    def _format_enumerated_list(
        self, components: list[Element], title: str | None, prefix: NumberedPrefix
    ) -> str:
        prefix.up_a_level()
        text = f"{title}\n" if title else ""
        previous = None
        for index, component in enumerate(components):
            if index > 0:
                if not previous.endswith("\n"):
                    text += " "
                container = component.parent
                if container is not None and container.category is DocumentCategory.ENUMERATED_LIST:
                    prefix.increment()
            previous = self._child(component, prefix)
            text += previous
        prefix.down_a_level()
        return text
