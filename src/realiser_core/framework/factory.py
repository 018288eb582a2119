"""Shorthand constructors for building document trees."""

from __future__ import annotations

from realiser_core.framework.categories import (
    Category,
    DiscourseFunction,
    DocumentCategory,
    LexicalCategory,
)
from realiser_core.framework.elements import (
    CoordinatedPhrase,
    DocumentElement,
    Element,
    StringLiteral,
    Word,
)


def _as_element(value: Element | str) -> Element:
    return StringLiteral(value) if isinstance(value, str) else value


def _document(category: DocumentCategory, title: str | None, parts) -> DocumentElement:
    return DocumentElement(category, title, [_as_element(part) for part in parts])


def create_document(title: str | None = None, *components: Element | str) -> DocumentElement:
    return _document(DocumentCategory.DOCUMENT, title, components)


def create_section(title: str | None = None, *components: Element | str) -> DocumentElement:
    return _document(DocumentCategory.SECTION, title, components)


def create_paragraph(*components: Element | str) -> DocumentElement:
    return _document(DocumentCategory.PARAGRAPH, None, components)


def create_sentence(*components: Element | str, interrogative: bool = False) -> DocumentElement:
    """Sentence holding `components`; plain strings become canned text."""
    sentence = _document(DocumentCategory.SENTENCE, None, components)
    if interrogative:
        sentence.interrogative = True
    return sentence


def create_list(*items: Element | str) -> DocumentElement:
    return _document(DocumentCategory.LIST, None, items)


def create_enumerated_list(*items: Element | str, title: str | None = None) -> DocumentElement:
    return _document(DocumentCategory.ENUMERATED_LIST, title, items)


def create_list_item(*components: Element | str) -> DocumentElement:
    return _document(DocumentCategory.LIST_ITEM, None, components)


def coordinate(
    *coordinates: Element,
    conjunction: str = "and",
    category: Category | None = None,
) -> CoordinatedPhrase:
    """
    Lay out a coordination the way the syntax stage leaves it.

    A conjunction word tagged CONJUNCTION sits between each pair of
    coordinates, so ``coordinate(a, b, c)`` holds ``a and b and c``;
    orthography later turns all but the last conjunction into commas.

    Args:
        coordinates: The coordinated constituents, in order.
        conjunction: Surface form of the joining word.
        category: Category of the result; defaults to the first coordinate's.

    Returns:
        The coordinated phrase.
    """
    if category is None and coordinates:
        category = coordinates[0].category
    laid_out: list[Element] = []
    for index, element in enumerate(coordinates):
        if index > 0:
            laid_out.append(
                Word(conjunction, LexicalCategory.CONJUNCTION, function=DiscourseFunction.CONJUNCTION)
            )
        laid_out.append(element)
    return CoordinatedPhrase(laid_out, category, conjunction=conjunction)
