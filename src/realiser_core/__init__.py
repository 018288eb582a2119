"""Surface realization: element trees to punctuated, formatted text."""

from realiser_core.realiser import Realiser

__all__ = ["Realiser"]
