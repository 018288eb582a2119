"""
Orthography stage.

Turns a grammatically realized tree into punctuated text: sentences are
capitalized and terminated, modifier groups and coordinations get their
commas, and every SENTENCE collapses into a cached string. Document structure
above the sentence is kept for the formatting stage.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Optional

from realiser_core.errors import MalformedTreeError
from realiser_core.framework.categories import DiscourseFunction, DocumentCategory
from realiser_core.framework.elements import (
    CoordinatedPhrase,
    DocumentElement,
    Element,
    ListElement,
    StringLiteral,
)

logger = logging.getLogger(__name__)

_SPACED_COMMA = re.compile(" +,")
_COMMA_RUN = re.compile(",,+")
_CUE_FUNCTIONS = (DiscourseFunction.CUE_PHRASE, DiscourseFunction.FRONT_MODIFIER)


def clean_commas(text: str) -> str:
    """Attach commas to the preceding word and collapse comma runs."""
    return _COMMA_RUN.sub(",", _SPACED_COMMA.sub(",", text))


def capitalise_first_letter(text: str) -> str:
    """Upper-case position 0 if it holds an ASCII lowercase letter."""
    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text


def terminate_sentence(text: str, interrogative: bool = False) -> str:
    """Append `.` (or `?`) unless the text already ends in one."""
    if not text or text[-1] in ".?":
        return text
    return text + ("?" if interrogative else ".")


class OrthographyProcessor:
    """
    Recursive punctuation and capitalization pass.

    Args:
        comma_sep_premodifiers: Separate coordinated premodifiers with commas
            ("a big, red ball").
        comma_sep_cuephrase: Follow cue phrases and front modifiers with a
            comma ("However, ...").
    """

    def __init__(self, comma_sep_premodifiers: bool = True, comma_sep_cuephrase: bool = False):
        self.comma_sep_premodifiers = comma_sep_premodifiers
        self.comma_sep_cuephrase = comma_sep_cuephrase

    # =========================================================================
    # Entry points
    # =========================================================================

    def realise(self, element: Optional[Element]) -> Optional[Element]:
        """
        Realize one element and everything beneath it.

        Returns:
            The punctuated element, re-stamped with the input's category, or
            None for a missing input or an empty sentence or list item.

        Raises:
            MalformedTreeError: if a node has no category
        """
        if element is None:
            return None
        category = element.category
        if category is None:
            raise MalformedTreeError(element, "Element has no category")

        if element.elided:
            return StringLiteral("", category)

        if isinstance(element, ListElement):
            function = element.dispatch_function
        else:
            function = element.function

        realised: Optional[Element]
        if isinstance(element, DocumentElement) and isinstance(category, DocumentCategory):
            realised = self._realise_document(element, category)
        elif isinstance(element, ListElement):
            realised = StringLiteral(self._realise_group(element, function))
        elif isinstance(element, CoordinatedPhrase):
            realised = StringLiteral(self._realise_coordination(element.coordinates))
        else:
            realised = element

        if realised is None:
            return None
        realised.category = category

        text = realised.raw_realisation
        if function in _CUE_FUNCTIONS and self.comma_sep_cuephrase:
            text = realised.realisation
            if not text.endswith(","):
                text += ","
        if text is not None:
            text = clean_commas(text)
            if text != realised.raw_realisation:
                if realised is element and not isinstance(element, DocumentElement):
                    realised = element.copy()
                realised.realisation = text
        return realised

    def realise_all(self, elements: Iterable[Element]) -> list[Element]:
        """Realize each element, dropping those that realize to nothing."""
        realised_list = []
        for element in elements:
            realised = self.realise(element)
            if realised is not None:
                realised_list.append(realised)
        return realised_list

    # =========================================================================
    # Document structure
    # =========================================================================

    def _realise_document(
        self, element: DocumentElement, category: DocumentCategory
    ) -> Optional[Element]:
        components = element.components

        if category is DocumentCategory.SENTENCE:
            return self._realise_sentence(element)

        if category is DocumentCategory.LIST_ITEM:
            if not components:
                return None
            # Nested lists stay structured until formatting.
            item = ListElement(self.realise_all(components))
            item.parent = element.parent
            return item

        element.components = self.realise_all(components)
        return element

    def _realise_sentence(self, element: DocumentElement) -> Optional[Element]:
        if not element.components:
            # Already collapsed by an earlier pass.
            return element if element.is_realised else None
        text = self._realise_list(element.components, "")
        text = text.lstrip(" ,")
        text = capitalise_first_letter(text)
        text = terminate_sentence(text, element.interrogative)

        element.clear_components()
        element.realisation = text
        logger.debug("Realised sentence: %r", text)
        return element

    # =========================================================================
    # Constituent groups
    # =========================================================================

    def _realise_group(self, element: ListElement, function: Optional[DiscourseFunction]) -> str:
        children = element.components

        if function is DiscourseFunction.PRE_MODIFIER:
            all_appositive = all(child.appositive for child in children)
            text = self._realise_list(children, "," if self.comma_sep_premodifiers else "")
            if all_appositive:
                text = ", " + text + ", "
            return text

        if function is DiscourseFunction.POST_MODIFIER:
            text = ""
            for child in children:
                realised = self.realise(child)
                child_text = realised.realisation if realised is not None else ""
                if child.appositive:
                    text += ", " + child_text + ", "
                else:
                    text += child_text
                    if isinstance(child, ListElement) or child_text:
                        text += " "
            return text

        if function in _CUE_FUNCTIONS and self.comma_sep_cuephrase:
            return self._realise_list(children, ",")

        return self._realise_list(children, "")

    def _realise_list(self, components: list[Element], separator: str) -> str:
        """Space-join the non-blank realizations of `components`."""
        text = ""
        count = len(components)
        for index, component in enumerate(components):
            realised = self.realise(component)
            child_text = realised.realisation if realised is not None else ""
            if child_text and not child_text.isspace():
                text += child_text
                if count > 1 and index < count - 1:
                    text += separator
                text += " "
        return text[:-1] if text else text

    def _realise_coordination(self, coordinates: list[Element]) -> str:
        """Join coordinates, turning all but the last conjunction into commas."""
        text = ""
        count = len(coordinates)
        for index, coordinate in enumerate(coordinates):
            if index < count - 2 and coordinate.function is DiscourseFunction.CONJUNCTION:
                text += ", "
                continue
            realised = self.realise(coordinate)
            child_text = realised.realisation if realised is not None else ""
            if child_text:
                text += child_text + " "
        if text:
            text = text[:-1]
        return text.replace(" ,", ",")
