"""
Element tree shared by every realization stage.

The tree arrives from the (external) syntax and morphology stages with words
already inflected and annotated with categories, discourse functions and
boolean features. Aggregation reads it and flags elided material;
orthography flattens it into cached strings; formatting turns it into text.

Element kinds form a closed set:

    Word              a single inflected word
    StringLiteral     canned text, never processed grammatically
    ListElement       an ordered group of constituents forming one constituent
    CoordinatedPhrase coordinates interleaved with conjunction words
    DocumentElement   document structure (document, section, ..., list item)

Parent links are weak and informational only: a stage may ask "what is my
container's category" but never walks or owns the tree through them.
"""

from __future__ import annotations

import copy
import weakref
from collections.abc import Iterable
from typing import Any

from realiser_core.framework.categories import (
    Category,
    DiscourseFunction,
    DocumentCategory,
    LexicalCategory,
    PhraseCategory,
)
from realiser_core.framework.features import Feature


class Element:
    """Base of all element kinds."""

    def __init__(
        self,
        category: Category | None = None,
        *,
        features: dict[str, Any] | None = None,
        function: DiscourseFunction | str | None = None,
        realisation: str | None = None,
    ):
        self.category = category
        self.features: dict[str, Any] = dict(features or {})
        if function is not None:
            self.function = DiscourseFunction(function)
        self._realisation = realisation
        self._parent: weakref.ref[Element] | None = None

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Element | None:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, value: Element | None) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    @property
    def children(self) -> list[Element]:
        return []

    def _adopt(self, elements: Iterable[Element]) -> list[Element]:
        adopted = []
        for element in elements:
            element.parent = self
            adopted.append(element)
        return adopted

    # ------------------------------------------------------------------
    # Realisation
    # ------------------------------------------------------------------

    @property
    def realisation(self) -> str:
        """Cached realisation without surrounding spaces ("" if absent)."""
        if self._realisation is None:
            return ""
        return self._realisation.strip(" ")

    @realisation.setter
    def realisation(self, value: str | None) -> None:
        self._realisation = value

    @property
    def raw_realisation(self) -> str | None:
        return self._realisation

    @property
    def is_realised(self) -> bool:
        return self._realisation is not None

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    def get_feature(self, name: str, default: Any = None) -> Any:
        return self.features.get(name, default)

    def set_feature(self, name: str, value: Any) -> None:
        self.features[name] = value

    def has_feature(self, name: str) -> bool:
        return name in self.features

    def remove_feature(self, name: str) -> None:
        self.features.pop(name, None)

    def _flag(self, name: str) -> bool:
        return bool(self.features.get(name, False))

    @property
    def function(self) -> DiscourseFunction | None:
        value = self.features.get(Feature.DISCOURSE_FUNCTION)
        return DiscourseFunction(value) if value is not None else None

    @function.setter
    def function(self, value: DiscourseFunction | str | None) -> None:
        if value is None:
            self.remove_feature(Feature.DISCOURSE_FUNCTION)
        else:
            self.features[Feature.DISCOURSE_FUNCTION] = DiscourseFunction(value)

    @property
    def elided(self) -> bool:
        return self._flag(Feature.ELIDED)

    @elided.setter
    def elided(self, value: bool) -> None:
        self.features[Feature.ELIDED] = bool(value)

    @property
    def appositive(self) -> bool:
        return self._flag(Feature.APPOSITIVE)

    @appositive.setter
    def appositive(self, value: bool) -> None:
        self.features[Feature.APPOSITIVE] = bool(value)

    @property
    def interrogative(self) -> bool:
        return self._flag(Feature.INTERROGATIVE)

    @interrogative.setter
    def interrogative(self, value: bool) -> None:
        self.features[Feature.INTERROGATIVE] = bool(value)

    @property
    def passive(self) -> bool:
        return self._flag(Feature.PASSIVE)

    @passive.setter
    def passive(self, value: bool) -> None:
        self.features[Feature.PASSIVE] = bool(value)

    # ------------------------------------------------------------------
    # Equality, copying, printing
    # ------------------------------------------------------------------

    def _signature(self) -> tuple:
        return (self.category, self.features)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element) or type(self) is not type(other):
            return NotImplemented
        return self._signature() == other._signature()

    __hash__ = None  # type: ignore[assignment]

    def __deepcopy__(self, memo: dict[int, Any]) -> Element:
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            if key != "_parent":
                setattr(clone, key, copy.deepcopy(value, memo))
        parent = self.parent
        clone._parent = None
        if parent is not None:
            clone.parent = memo.get(id(parent), parent)
        for child in clone.children:
            child.parent = clone
        return clone

    def copy(self) -> Element:
        """Deep copy of this subtree; parents inside the copy point into the copy."""
        return copy.deepcopy(self)

    def _describe(self) -> str:
        category = self.category.value if self.category is not None else None
        return f"{type(self).__name__}: category={category} realisation={self._realisation!r}"

    def print_tree(self, indent: str | None = None) -> str:
        """Indented dump of this subtree, one element per line."""
        indent = indent or ""
        parts = [self._describe(), "\n"]
        children = self.children
        for index, child in enumerate(children):
            last = index == len(children) - 1
            parts.append(indent + (" \\-" if last else " |-"))
            parts.append(child.print_tree(indent + ("   " if last else " | ")))
        return "".join(parts)

    def __repr__(self) -> str:
        category = self.category.value if self.category is not None else None
        return f"<{type(self).__name__} {category} {self.realisation!r}>"


class Word(Element):
    """An inflected word; `base_form` is its lemma, `form` its surface form."""

    def __init__(
        self,
        base_form: str,
        category: LexicalCategory | None = LexicalCategory.ANY,
        *,
        form: str | None = None,
        features: dict[str, Any] | None = None,
        function: DiscourseFunction | str | None = None,
    ):
        super().__init__(
            category,
            features=features,
            function=function,
            realisation=form if form is not None else base_form,
        )
        self.base_form = base_form
        self.form = form

    @property
    def lemma(self) -> str:
        return self.base_form

    def _signature(self) -> tuple:
        return (*super()._signature(), self.base_form, self.form)

    def _describe(self) -> str:
        return (
            f"Word: base={self.base_form!r} form={self.form!r} "
            f"category={self.category.value if self.category else None} "
            f"features={self.features}"
        )


class StringLiteral(Element):
    """Pre-rendered text passed through untouched by grammatical processing."""

    def __init__(
        self,
        text: str,
        category: Category | None = PhraseCategory.CANNED_TEXT,
        *,
        features: dict[str, Any] | None = None,
        function: DiscourseFunction | str | None = None,
    ):
        super().__init__(category, features=features, function=function, realisation=text)

    @property
    def text(self) -> str:
        return self._realisation or ""

    def _signature(self) -> tuple:
        return (*super()._signature(), self._realisation)


class ListElement(Element):
    """
    Ordered constituents forming one logical constituent.

    Its discourse function for dispatch is taken from its first child.
    """

    def __init__(
        self,
        components: Iterable[Element] | None = None,
        category: Category | None = None,
        *,
        features: dict[str, Any] | None = None,
        function: DiscourseFunction | str | None = None,
    ):
        super().__init__(category, features=features, function=function)
        self._components: list[Element] = self._adopt(components or [])

    @property
    def children(self) -> list[Element]:
        return self._components

    @property
    def components(self) -> list[Element]:
        return self._components

    @components.setter
    def components(self, value: Iterable[Element]) -> None:
        self._components = self._adopt(value)

    def add_component(self, element: Element) -> None:
        self._components.extend(self._adopt([element]))

    def add_components(self, elements: Iterable[Element]) -> None:
        self._components.extend(self._adopt(elements))

    @property
    def first(self) -> Element | None:
        return self._components[0] if self._components else None

    @property
    def dispatch_function(self) -> DiscourseFunction | None:
        first = self.first
        return first.function if first is not None else None

    def __len__(self) -> int:
        return len(self._components)

    def _signature(self) -> tuple:
        return (*super()._signature(), self._components)

    def _describe(self) -> str:
        category = self.category.value if self.category is not None else None
        return f"ListElement: category={category} features={self.features}"


class CoordinatedPhrase(Element):
    """
    Coordinates in surface order.

    After syntax realization the conjunction words sit between the
    coordinates as elements whose discourse function is CONJUNCTION.
    """

    def __init__(
        self,
        coordinates: Iterable[Element] | None = None,
        category: Category | None = None,
        *,
        conjunction: str = "and",
        features: dict[str, Any] | None = None,
        function: DiscourseFunction | str | None = None,
    ):
        super().__init__(category, features=features, function=function)
        self.features.setdefault(Feature.CONJUNCTION, conjunction)
        self._coordinates: list[Element] = self._adopt(coordinates or [])

    @property
    def children(self) -> list[Element]:
        return self._coordinates

    @property
    def coordinates(self) -> list[Element]:
        return self._coordinates

    @property
    def conjunction(self) -> str:
        return self.features.get(Feature.CONJUNCTION, "")

    @conjunction.setter
    def conjunction(self, value: str) -> None:
        self.features[Feature.CONJUNCTION] = value

    def _signature(self) -> tuple:
        return (*super()._signature(), self._coordinates)

    def _describe(self) -> str:
        category = self.category.value if self.category is not None else None
        return f"CoordinatedPhrase: category={category} conjunction={self.conjunction!r}"


class DocumentElement(Element):
    """A unit of document structure with an optional title."""

    def __init__(
        self,
        category: DocumentCategory,
        title: str | None = None,
        components: Iterable[Element] | None = None,
        *,
        features: dict[str, Any] | None = None,
    ):
        super().__init__(category, features=features)
        self.title = title
        self._components: list[Element] = []
        for component in components or []:
            self.add_component(component)

    @property
    def children(self) -> list[Element]:
        return self._components

    @property
    def components(self) -> list[Element]:
        return self._components

    @components.setter
    def components(self, value: Iterable[Element]) -> None:
        self._components = self._adopt(value)

    def add_component(self, element: Element) -> None:
        """
        Append `element`, promoting it if this category cannot hold it.

        A bare phrase is wrapped in a sentence, a sentence in a paragraph,
        until it fits. When no promotion fits, the element is added as-is
        so its text is not lost.
        """
        category = self.category
        if element.category is not None and isinstance(category, DocumentCategory):
            if not category.has_sub_part(element.category):
                element = self._promote(element) or element
        self._components.extend(self._adopt([element]))

    def add_components(self, elements: Iterable[Element]) -> None:
        for element in elements:
            self.add_component(element)

    def _promote(self, element: Element) -> Element | None:
        category = self.category
        if not isinstance(category, DocumentCategory):
            return None
        if category.has_sub_part(element.category):
            return element
        if not isinstance(element, DocumentElement):
            return self._promote(DocumentElement(DocumentCategory.SENTENCE, components=[element]))
        if element.category is DocumentCategory.SENTENCE:
            return self._promote(DocumentElement(DocumentCategory.PARAGRAPH, components=[element]))
        return None

    def remove_component(self, element: Element) -> bool:
        for index, component in enumerate(self._components):
            if component is element:
                del self._components[index]
                return True
        return False

    def clear_components(self) -> None:
        self._components = []

    def _signature(self) -> tuple:
        return (*super()._signature(), self.title, self._realisation, self._components)

    def _describe(self) -> str:
        category = self.category.value if self.category is not None else None
        described = f"DocumentElement: category={category}"
        if self.title:
            described += f" title={self.title!r}"
        if self._realisation is not None:
            described += f" realisation={self._realisation!r}"
        return described
