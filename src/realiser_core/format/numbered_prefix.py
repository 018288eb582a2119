from __future__ import annotations


class NumberedPrefix:
    """
    Dotted-decimal position inside nested enumerated lists ("1.2.3").

    One instance lives for one top-level formatting call and is threaded
    through the recursion, so concurrent calls never share numbering.
    """

    def __init__(self, prefix: str = "0"):
        self.prefix = prefix

    def increment(self) -> None:
        """Bump the last component: "2.2" -> "2.3"."""
        head, dot, last = self.prefix.rpartition(".")
        self.prefix = f"{head}{dot}{int(last) + 1}"

    def up_a_level(self) -> None:
        """Enter a nested list: "0" -> "1", otherwise append ".1"."""
        if self.prefix == "0":
            self.prefix = "1"
        else:
            self.prefix += ".1"

    def down_a_level(self) -> None:
        """Leave a nested list: drop the last component, or reset to "0"."""
        head, dot, _ = self.prefix.rpartition(".")
        self.prefix = head if dot else "0"

    def __str__(self) -> str:
        return self.prefix

    def __repr__(self) -> str:
        return f"NumberedPrefix({self.prefix!r})"
