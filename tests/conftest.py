import json
import os
from pathlib import Path

import pytest

from realiser_core import settings as core_settings
from realiser_core.framework import (
    DiscourseFunction,
    LexicalCategory,
    ListElement,
    PhraseCategory,
    Word,
)
from realiser_core.realiser import Realiser
from realiser_core.settings import Settings
from realiser_service import settings as service_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep host REALISER_* variables and .env files out of every test."""
    for key in list(os.environ):
        if key.startswith("REALISER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(core_settings, "_settings", None)
    monkeypatch.setattr(service_settings, "_settings", None)
    yield


@pytest.fixture
def settings() -> Settings:
    return Settings(
        comma_sep_premodifiers=True,
        comma_sep_cuephrase=False,
        formatter="text",
        debug=False,
    )


@pytest.fixture
def realiser(settings: Settings) -> Realiser:
    return Realiser(settings=settings)


def make_clause(subject: str, verb: str, verb_form: str, obj: str | None = None) -> ListElement:
    """Clause as the syntax stage leaves it: subject, then a verb phrase."""
    vp_children = [Word(verb, LexicalCategory.VERB, form=verb_form, function=DiscourseFunction.HEAD)]
    if obj is not None:
        vp_children.append(Word(obj, LexicalCategory.NOUN, function=DiscourseFunction.OBJECT))
    vp = ListElement(vp_children, PhraseCategory.VERB_PHRASE, function=DiscourseFunction.VERB_PHRASE)
    subject_word = Word(subject, LexicalCategory.NOUN, function=DiscourseFunction.SUBJECT)
    return ListElement([subject_word, vp], PhraseCategory.CLAUSE)


@pytest.fixture
def clause_factory():
    return make_clause


@pytest.fixture
def dog_barks_payload() -> str:
    return json.dumps(
        {
            "op": "realise",
            "document": {
                "kind": "document",
                "category": "SENTENCE",
                "children": [
                    {
                        "kind": "list",
                        "category": "NOUN_PHRASE",
                        "function": "SUBJECT",
                        "children": [
                            {"kind": "word", "base": "the", "category": "DETERMINER", "function": "SPECIFIER"},
                            {"kind": "word", "base": "dog", "category": "NOUN", "function": "HEAD"},
                        ],
                    },
                    {"kind": "word", "base": "bark", "form": "barks", "category": "VERB", "function": "HEAD"},
                ],
            },
        }
    )


@pytest.fixture
def malformed_tree_payload() -> str:
    return json.dumps(
        {
            "op": "realise",
            "document": {
                "kind": "document",
                "category": "SENTENCE",
                "children": [{"kind": "list", "children": [{"kind": "string", "text": "oops"}]}],
            },
        }
    )
