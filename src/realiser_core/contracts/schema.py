"""
JSON request schema for remote realization.

A request carries an operation and, for `realise`, a document tree whose
nodes are tagged by `kind`:

    {"op": "realise",
     "formatter": "html",
     "document": {"kind": "document", "category": "SENTENCE", "children": [
         {"kind": "word", "base": "dog", "category": "NOUN", "function": "SUBJECT"},
         {"kind": "string", "text": "barks"}]}}
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from realiser_core.errors import RequestSchemaError
from realiser_core.framework.categories import (
    DiscourseFunction,
    DocumentCategory,
    LexicalCategory,
    PhraseCategory,
    parse_category,
)
from realiser_core.framework.elements import (
    CoordinatedPhrase,
    DocumentElement,
    Element,
    ListElement,
    StringLiteral,
    Word,
)


class _NodeBase(BaseModel):
    """Fields shared by every node kind."""

    model_config = {"extra": "forbid"}

    category: Optional[str] = None
    function: Optional[DiscourseFunction] = None
    features: dict[str, Any] = Field(default_factory=dict)

    @field_validator("category")
    @classmethod
    def known_category(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return parse_category(value).value

    def _decorate(self, element: Element) -> Element:
        element.features.update(self.features)
        if self.function is not None:
            element.function = self.function
        return element


class WordNode(_NodeBase):
    kind: Literal["word"] = "word"
    base: str
    form: Optional[str] = None
    category: Optional[str] = LexicalCategory.ANY.value

    def to_element(self) -> Element:
        category = parse_category(self.category) if self.category else None
        return self._decorate(Word(self.base, category, form=self.form))


class StringNode(_NodeBase):
    kind: Literal["string"] = "string"
    text: str
    category: Optional[str] = PhraseCategory.CANNED_TEXT.value

    def to_element(self) -> Element:
        category = parse_category(self.category) if self.category else None
        return self._decorate(StringLiteral(self.text, category))


class ListNode(_NodeBase):
    kind: Literal["list"] = "list"
    children: list[Node] = Field(default_factory=list)

    def to_element(self) -> Element:
        category = parse_category(self.category) if self.category else None
        children = [child.to_element() for child in self.children]
        return self._decorate(ListElement(children, category))


class CoordinatedNode(_NodeBase):
    kind: Literal["coordinated"] = "coordinated"
    conjunction: str = "and"
    children: list[Node] = Field(default_factory=list)

    def to_element(self) -> Element:
        category = parse_category(self.category) if self.category else None
        children = [child.to_element() for child in self.children]
        return self._decorate(CoordinatedPhrase(children, category, conjunction=self.conjunction))


class DocumentNode(BaseModel):
    model_config = {"extra": "forbid"}

    kind: Literal["document"] = "document"
    category: DocumentCategory
    title: Optional[str] = None
    children: list[Node] = Field(default_factory=list)
    features: dict[str, Any] = Field(default_factory=dict)

    @field_validator("category", mode="before")
    @classmethod
    def upper_category(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    def to_element(self) -> Element:
        children = [child.to_element() for child in self.children]
        document = DocumentElement(self.category, self.title, children)
        document.features.update(self.features)
        return document


Node = Annotated[
    Union[WordNode, StringNode, ListNode, CoordinatedNode, DocumentNode],
    Field(discriminator="kind"),
]

for _model in (ListNode, CoordinatedNode, DocumentNode):
    _model.model_rebuild()


Operation = Literal["realise", "noop", "start_recording", "stop_recording"]


class RealisationRequest(BaseModel):
    """One request to the realization service."""

    op: Operation = "realise"
    document: Optional[Node] = None
    formatter: Optional[Literal["text", "html", "none"]] = None
    recording_path: Optional[str] = None

    @model_validator(mode="after")
    def document_for_realise(self) -> "RealisationRequest":
        if self.op == "realise" and self.document is None:
            raise ValueError("op 'realise' requires a document")
        return self

    def to_element(self) -> Element:
        if self.document is None:
            raise RequestSchemaError(f"op {self.op!r} carries no document")
        return self.document.to_element()


class RealisationResponse(BaseModel):
    """HTTP reply body."""

    realisation: str


def parse_request(payload: Union[str, bytes]) -> RealisationRequest:
    """
    Validate a JSON request payload.

    Raises:
        RequestSchemaError: if the payload is not valid JSON or does not match
            the request schema
    """
    try:
        return RealisationRequest.model_validate_json(payload)
    except ValidationError as e:
        raise RequestSchemaError(
            f"Invalid request: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e
