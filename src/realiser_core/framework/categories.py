"""
Element categories and discourse functions.

Every element carries exactly one category drawn from one of three families:
lexical (single words), phrasal (realized syntactic constituents) and
document (text structure). Stages dispatch on the family and the member.
"""

from __future__ import annotations

import enum


class LexicalCategory(str, enum.Enum):
    """Word classes."""

    ANY = "ANY"
    SYMBOL = "SYMBOL"
    NOUN = "NOUN"
    ADJECTIVE = "ADJECTIVE"
    ADVERB = "ADVERB"
    VERB = "VERB"
    DETERMINER = "DETERMINER"
    PRONOUN = "PRONOUN"
    CONJUNCTION = "CONJUNCTION"
    PREPOSITION = "PREPOSITION"
    COMPLEMENTISER = "COMPLEMENTISER"
    MODAL = "MODAL"
    AUXILIARY = "AUXILIARY"


class PhraseCategory(str, enum.Enum):
    """Phrase types produced by the syntax stage."""

    CLAUSE = "CLAUSE"
    ADJECTIVE_PHRASE = "ADJECTIVE_PHRASE"
    ADVERB_PHRASE = "ADVERB_PHRASE"
    NOUN_PHRASE = "NOUN_PHRASE"
    PREPOSITIONAL_PHRASE = "PREPOSITIONAL_PHRASE"
    VERB_PHRASE = "VERB_PHRASE"
    CANNED_TEXT = "CANNED_TEXT"


class DocumentCategory(str, enum.Enum):
    """Document structure, outermost to innermost."""

    DOCUMENT = "DOCUMENT"
    SECTION = "SECTION"
    PARAGRAPH = "PARAGRAPH"
    SENTENCE = "SENTENCE"
    LIST = "LIST"
    ENUMERATED_LIST = "ENUMERATED_LIST"
    LIST_ITEM = "LIST_ITEM"

    def has_sub_part(self, category: Category | None) -> bool:
        """Whether an element of `category` may sit directly inside this one."""
        if category is None:
            return False
        if not isinstance(category, DocumentCategory):
            # Sentences and list items hold realized phrases and words.
            return self in (DocumentCategory.SENTENCE, DocumentCategory.LIST_ITEM)

        if self is DocumentCategory.DOCUMENT:
            return category not in (DocumentCategory.DOCUMENT, DocumentCategory.LIST_ITEM)
        if self is DocumentCategory.SECTION:
            return category in (DocumentCategory.PARAGRAPH, DocumentCategory.SECTION)
        if self is DocumentCategory.PARAGRAPH:
            return category in (DocumentCategory.SENTENCE, DocumentCategory.LIST)
        if self in (DocumentCategory.LIST, DocumentCategory.ENUMERATED_LIST):
            return category is DocumentCategory.LIST_ITEM
        return False


Category = LexicalCategory | PhraseCategory | DocumentCategory


class DiscourseFunction(str, enum.Enum):
    """Grammatical role a constituent plays inside its parent."""

    AUXILIARY = "AUXILIARY"
    COMPLEMENT = "COMPLEMENT"
    CONJUNCTION = "CONJUNCTION"
    CUE_PHRASE = "CUE_PHRASE"
    FRONT_MODIFIER = "FRONT_MODIFIER"
    HEAD = "HEAD"
    INDIRECT_OBJECT = "INDIRECT_OBJECT"
    OBJECT = "OBJECT"
    PRE_MODIFIER = "PRE_MODIFIER"
    POST_MODIFIER = "POST_MODIFIER"
    SPECIFIER = "SPECIFIER"
    SUBJECT = "SUBJECT"
    VERB_PHRASE = "VERB_PHRASE"


class Periphery(str, enum.Enum):
    """Position of a constituent relative to the clause's verb."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"


_CATEGORY_FAMILIES: tuple[type[enum.Enum], ...] = (
    DocumentCategory,
    PhraseCategory,
    LexicalCategory,
)


def parse_category(name: str) -> Category:
    """
    Look up a category by name, case-insensitively, across all families.

    Raises:
        ValueError: if no family defines `name`
    """
    key = name.strip().upper()
    for family in _CATEGORY_FAMILIES:
        if key in family.__members__:
            return family[key]
    raise ValueError(f"Unknown element category: {name!r}")
