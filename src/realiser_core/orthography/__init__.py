"""Orthography stage: capitalization, termination and commas."""

from realiser_core.orthography.processor import (
    OrthographyProcessor,
    capitalise_first_letter,
    clean_commas,
    terminate_sentence,
)

__all__ = [
    "OrthographyProcessor",
    "capitalise_first_letter",
    "clean_commas",
    "terminate_sentence",
]
