"""Character cursor over a format template."""

from __future__ import annotations


class Scanner:
    """A read position over an immutable string.

    ``mark()`` and ``reset()`` let a caller attempt a parse and roll back
    to where it started if the attempt fails.
    """

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Return the character *offset* past the cursor, or "" past the end."""
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def advance(self) -> str:
        """Consume and return one character ("" at the end)."""
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def take_digits(self) -> str:
        """Consume a run of ASCII digits and return it (possibly empty)."""
        start = self.pos
        while "0" <= self.peek() <= "9":
            self.pos += 1
        return self.text[start : self.pos]

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int) -> None:
        self.pos = mark
