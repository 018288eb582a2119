"""Tests for the orthography stage."""

from __future__ import annotations

import pytest

from realiser_core.errors import ErrorType, MalformedTreeError
from realiser_core.framework import (
    DiscourseFunction,
    DocumentCategory,
    DocumentElement,
    LexicalCategory,
    ListElement,
    PhraseCategory,
    StringLiteral,
    Word,
    coordinate,
    create_list,
    create_list_item,
    create_paragraph,
    create_sentence,
)
from realiser_core.orthography import (
    OrthographyProcessor,
    capitalise_first_letter,
    clean_commas,
    terminate_sentence,
)


@pytest.fixture
def orthography() -> OrthographyProcessor:
    return OrthographyProcessor()


def realise_text(processor: OrthographyProcessor, *components, interrogative: bool = False) -> str:
    return processor.realise(create_sentence(*components, interrogative=interrogative)).realisation


class TestSentences:
    def test_capitalises_and_terminates(self, orthography) -> None:
        assert realise_text(orthography, "the dog") == "The dog."

    def test_termination_is_idempotent(self, orthography) -> None:
        assert realise_text(orthography, "Is it raining?") == "Is it raining?"
        assert realise_text(orthography, "It rained.") == "It rained."
        assert realise_text(orthography, "it rained.", interrogative=True) == "It rained."

    def test_interrogative_gets_question_mark(self, orthography) -> None:
        assert realise_text(orthography, "is it raining", interrogative=True) == "Is it raining?"

    def test_only_position_zero_is_capitalised(self, orthography) -> None:
        assert realise_text(orthography, "1994 was a year") == "1994 was a year."
        assert realise_text(orthography, "éclair time") == "éclair time."

    def test_leading_spaces_and_commas_are_stripped(self, orthography) -> None:
        assert realise_text(orthography, ", , the dog") == "The dog."

    def test_components_are_space_joined(self, orthography) -> None:
        words = [
            Word("the", LexicalCategory.DETERMINER),
            Word("dog", LexicalCategory.NOUN),
            Word("bark", LexicalCategory.VERB, form="barks"),
        ]
        assert realise_text(orthography, *words) == "The dog barks."

    def test_blank_and_elided_components_are_skipped(self, orthography) -> None:
        hidden = Word("big", LexicalCategory.ADJECTIVE)
        hidden.elided = True
        text = realise_text(orthography, "the", "   ", hidden, "dog")
        assert text == "The dog."

    def test_realised_sentence_has_no_components(self, orthography) -> None:
        sentence = create_sentence("the dog")
        realised = orthography.realise(sentence)
        assert realised is sentence
        assert realised.components == []
        assert realised.category is DocumentCategory.SENTENCE

    def test_realising_twice_keeps_the_text(self, orthography) -> None:
        sentence = orthography.realise(create_sentence("the dog"))
        assert orthography.realise(sentence).realisation == "The dog."

    def test_empty_sentence_realises_to_nothing(self, orthography) -> None:
        assert orthography.realise(DocumentElement(DocumentCategory.SENTENCE)) is None

    def test_none_realises_to_none(self, orthography) -> None:
        assert orthography.realise(None) is None


class TestCommas:
    @pytest.mark.parametrize(
        "text, expected",
        [
            (" , ,", ","),
            ("a , b", "a, b"),
            ("a,,, b", "a, b"),
            ("no commas", "no commas"),
            ("a  ,", "a,"),
            (",  ,", ","),
            ("x  , y", "x, y"),
            ("a   ,  , b", "a, b"),
        ],
    )
    def test_cleanup(self, text: str, expected: str) -> None:
        assert clean_commas(text) == expected
        assert clean_commas(clean_commas(text)) == clean_commas(text)

    def test_helpers(self) -> None:
        assert capitalise_first_letter("") == ""
        assert capitalise_first_letter("dog") == "Dog"
        assert terminate_sentence("") == ""
        assert terminate_sentence("dog", interrogative=True) == "dog?"

    def test_premodifiers_are_comma_separated(self, orthography) -> None:
        group = ListElement(
            [
                Word("big", LexicalCategory.ADJECTIVE, function=DiscourseFunction.PRE_MODIFIER),
                Word("red", LexicalCategory.ADJECTIVE, function=DiscourseFunction.PRE_MODIFIER),
            ],
            PhraseCategory.ADJECTIVE_PHRASE,
        )
        assert orthography.realise(group).realisation == "big, red"

        plain = OrthographyProcessor(comma_sep_premodifiers=False)
        assert plain.realise(group).realisation == "big red"

    def test_appositive_premodifiers_are_wrapped(self, orthography) -> None:
        children = [
            Word("big", LexicalCategory.ADJECTIVE, function=DiscourseFunction.PRE_MODIFIER),
            Word("red", LexicalCategory.ADJECTIVE, function=DiscourseFunction.PRE_MODIFIER),
        ]
        for child in children:
            child.appositive = True
        group = ListElement(children, PhraseCategory.ADJECTIVE_PHRASE)
        assert orthography.realise(group).realisation == ", big, red,"

    def test_postmodifiers(self, orthography) -> None:
        group = ListElement(
            [
                StringLiteral("in the park", function=DiscourseFunction.POST_MODIFIER),
                StringLiteral("today", function=DiscourseFunction.POST_MODIFIER),
            ],
            PhraseCategory.PREPOSITIONAL_PHRASE,
        )
        assert orthography.realise(group).realisation == "in the park today"

    def test_appositive_postmodifier_is_set_off(self, orthography) -> None:
        apposition = StringLiteral("my friend", function=DiscourseFunction.POST_MODIFIER)
        apposition.appositive = True
        group = ListElement([apposition], PhraseCategory.NOUN_PHRASE)
        assert orthography.realise(group).realisation == ", my friend,"

        sentence = create_sentence("John", group, "arrived")
        assert orthography.realise(sentence).realisation == "John, my friend, arrived."

    def test_cue_phrase_comma_is_optional(self) -> None:
        def sentence() -> DocumentElement:
            cue = Word("however", LexicalCategory.ADVERB, function=DiscourseFunction.CUE_PHRASE)
            return create_sentence(cue, "it rained")

        assert OrthographyProcessor().realise(sentence()).realisation == "However it rained."
        with_comma = OrthographyProcessor(comma_sep_cuephrase=True)
        assert with_comma.realise(sentence()).realisation == "However, it rained."

    def test_cue_phrase_comma_does_not_mutate_input(self) -> None:
        cue = Word("however", LexicalCategory.ADVERB, function=DiscourseFunction.CUE_PHRASE)
        realised = OrthographyProcessor(comma_sep_cuephrase=True).realise(cue)
        assert realised.realisation == "however,"
        assert cue.realisation == "however"

    def test_front_modifier_group_is_comma_joined(self) -> None:
        group = ListElement(
            [
                StringLiteral("yesterday", function=DiscourseFunction.FRONT_MODIFIER),
                StringLiteral("at noon", function=DiscourseFunction.FRONT_MODIFIER),
            ],
            PhraseCategory.ADVERB_PHRASE,
        )
        processor = OrthographyProcessor(comma_sep_cuephrase=True)
        assert processor.realise(group).realisation == "yesterday, at noon,"


class TestCoordination:
    def test_serial_comma(self, orthography) -> None:
        phrase = coordinate(StringLiteral("A"), StringLiteral("B"), StringLiteral("C"))
        assert orthography.realise(phrase).realisation == "A, B and C"

    def test_two_coordinates_keep_the_conjunction(self, orthography) -> None:
        phrase = coordinate(StringLiteral("A"), StringLiteral("B"), conjunction="or")
        assert orthography.realise(phrase).realisation == "A or B"

    def test_four_coordinates(self, orthography) -> None:
        phrase = coordinate(*(StringLiteral(letter) for letter in "ABCD"))
        assert orthography.realise(phrase).realisation == "A, B, C and D"

    def test_result_keeps_category(self, orthography) -> None:
        phrase = coordinate(
            StringLiteral("cats", PhraseCategory.NOUN_PHRASE),
            StringLiteral("dogs", PhraseCategory.NOUN_PHRASE),
        )
        realised = orthography.realise(phrase)
        assert isinstance(realised, StringLiteral)
        assert realised.category is PhraseCategory.NOUN_PHRASE


class TestDocumentStructure:
    def test_list_item_stays_structured(self, orthography) -> None:
        item = create_list_item("in the room")
        bullet_list = create_list(item)

        realised = orthography.realise(bullet_list)

        realised_item = realised.components[0]
        assert isinstance(realised_item, ListElement)
        assert realised_item.category is DocumentCategory.LIST_ITEM
        assert realised_item.parent is realised
        assert realised_item.components[0].realisation == "in the room"

    def test_paragraph_sentences_are_realised_in_place(self, orthography) -> None:
        paragraph = create_paragraph(create_sentence("one"), create_sentence("two"))
        realised = orthography.realise(paragraph)
        assert realised is paragraph
        assert [sentence.realisation for sentence in realised.components] == ["One.", "Two."]

    def test_empty_sentences_are_dropped_from_their_container(self, orthography) -> None:
        paragraph = create_paragraph(create_sentence("one"), DocumentElement(DocumentCategory.SENTENCE))
        assert len(orthography.realise(paragraph).components) == 1

    def test_elided_element_realises_to_empty_text(self, orthography) -> None:
        word = Word("dog", LexicalCategory.NOUN)
        word.elided = True
        realised = orthography.realise(word)
        assert realised.realisation == ""
        assert realised.category is LexicalCategory.NOUN

    def test_missing_category_is_reported(self, orthography) -> None:
        group = ListElement([StringLiteral("oops")])
        with pytest.raises(MalformedTreeError) as excinfo:
            orthography.realise(create_sentence(group))

        error = excinfo.value
        assert error.error_type is ErrorType.MALFORMED_TREE
        assert error.element is group
        assert error.details["kind"] == "ListElement"
        assert error.details["category"] is None
        assert "ListElement" in error.to_log_message()
