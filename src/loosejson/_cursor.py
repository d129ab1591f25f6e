"""Read position over an immutable input buffer."""

from __future__ import annotations

from typing import Final

# Characters on either side of the failure position shown in diagnostics
CONTEXT_RADIUS: Final = 10

_LINE_TERMINATORS: Final = frozenset("\n\r")


class Cursor:
    """Bounds-checked lookahead and single-step advance over a text buffer.

    The position is always in ``[0, length]``; ``length`` stands for end of
    input and is never dereferenced.
    """

    __slots__ = ("length", "pos", "text")

    def __init__(self, text: str) -> None:
        self.text: Final = text
        self.length: Final = len(text)
        self.pos = 0

    def has_value(self, offset: int = 0) -> bool:
        """Returns whether ``pos + offset`` indexes a character."""
        index = self.pos + offset
        return 0 <= index < self.length

    def character(self, offset: int = 0) -> str:
        """Returns the character at ``pos + offset``.

        Callers check ``has_value`` with the same offset first.
        """
        return self.text[self.pos + offset]

    def advance(self) -> bool:
        """Moves forward one character, returns False at end of input."""
        if self.pos < self.length:
            self.pos += 1
            return True
        return False

    def skip_space(self) -> None:
        """Skips whitespace and ``//`` line comments."""
        text = self.text
        while self.pos < self.length:
            char = text[self.pos]

            if char.isspace():
                self.pos += 1
                continue

            if char == "/" and self.has_value(1) and text[self.pos + 1] == "/":
                while (
                    self.pos < self.length
                    and text[self.pos] not in _LINE_TERMINATORS
                ):
                    self.pos += 1
                # terminator itself is eaten as whitespace
                continue

            break


def context_window(text: str, pos: int) -> str:
    """Returns up to 20 characters of ``text`` centred on ``pos``."""
    start = max(0, pos - CONTEXT_RADIUS)
    length = min(2 * CONTEXT_RADIUS, len(text) - start)
    return text[start : start + length]
