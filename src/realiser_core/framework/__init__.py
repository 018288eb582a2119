"""Element tree, categories and feature names."""

from realiser_core.framework.categories import (
    Category,
    DiscourseFunction,
    DocumentCategory,
    LexicalCategory,
    Periphery,
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
from realiser_core.framework.factory import (
    coordinate,
    create_document,
    create_enumerated_list,
    create_list,
    create_list_item,
    create_paragraph,
    create_section,
    create_sentence,
)
from realiser_core.framework.features import Feature

__all__ = [
    "Category",
    "CoordinatedPhrase",
    "DiscourseFunction",
    "DocumentCategory",
    "DocumentElement",
    "Element",
    "Feature",
    "LexicalCategory",
    "ListElement",
    "Periphery",
    "PhraseCategory",
    "StringLiteral",
    "Word",
    "coordinate",
    "create_document",
    "create_enumerated_list",
    "create_list",
    "create_list_item",
    "create_paragraph",
    "create_section",
    "create_sentence",
    "parse_category",
]
