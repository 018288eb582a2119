"""Feature names read by the realization stages."""

from __future__ import annotations


class Feature:
    """
    Keys of the per-element feature map.

    The map stays open to any string key so upstream stages can carry their
    own annotations through; these are the ones this package reads or writes.
    Elements expose typed accessors for them.
    """

    ELIDED = "elided"
    APPOSITIVE = "appositive"
    DISCOURSE_FUNCTION = "discourse_function"
    INTERROGATIVE = "interrogative"
    PASSIVE = "passive"
    CONJUNCTION = "conjunction"
    DEBUG = "debug"
