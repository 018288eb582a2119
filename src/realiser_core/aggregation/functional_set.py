"""
Pairings of corresponding constituents across parallel clauses.

A functional set groups the constituents that play the same discourse
function, with the same category, at the same position in two or more
clauses. Ellipsis rules inspect a set and elide all but one member.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from realiser_core.framework.categories import Category, DiscourseFunction, Periphery
from realiser_core.framework.elements import (
    CoordinatedPhrase,
    DocumentElement,
    Element,
    ListElement,
    StringLiteral,
    Word,
)


@dataclass
class FunctionalSet:
    """Constituents sharing function, category and periphery."""

    function: Optional[DiscourseFunction]
    category: Optional[Category]
    periphery: Periphery
    components: list[Element] = field(default_factory=list)

    @classmethod
    def new_instance(
        cls,
        function: Optional[DiscourseFunction],
        category: Optional[Category],
        periphery: Periphery,
        *components: Element,
    ) -> Optional["FunctionalSet"]:
        """Build a set, or return None when fewer than two components are given."""
        if len(components) < 2:
            return None
        return cls(function, category, periphery, list(components))

    def form_identical(self) -> bool:
        """True iff every component is structurally equal to the first."""
        first = self.components[0]
        return all(component == first for component in self.components[1:])

    def lemma_identical(self) -> bool:
        """True iff every component has the same head lexeme, ignoring inflection."""
        first = head_lemma(self.components[0])
        if first is None:
            return False
        return all(head_lemma(component) == first for component in self.components[1:])

    def elide_rightmost(self) -> None:
        """Elide every component except the leftmost."""
        for component in reversed(self.components[1:]):
            _elide(component)

    def elide_leftmost(self) -> None:
        """Elide every component except the rightmost."""
        for component in self.components[:-1]:
            _elide(component)


def head_lemma(element: Element) -> Optional[tuple[str, ...]]:
    """
    Lemma key of a constituent's head.

    A word contributes its base form, canned text its text. A group defers
    to its child tagged HEAD; lacking one, the lemmas of all its children
    form the key. Coordinations and document nodes have no single head.
    """
    if isinstance(element, Word):
        return (element.lemma,)
    if isinstance(element, StringLiteral):
        return (element.text,)
    if isinstance(element, (CoordinatedPhrase, DocumentElement)):
        return None
    if isinstance(element, ListElement):
        for child in element.components:
            if child.function is DiscourseFunction.HEAD:
                return head_lemma(child)
        key: tuple[str, ...] = ()
        for child in element.components:
            child_key = head_lemma(child)
            if child_key is None:
                return None
            key += child_key
        return key or None
    return None


def _elide(element: Element) -> None:
    if isinstance(element, ListElement):
        for child in element.components:
            _elide(child)
    else:
        element.elided = True
