from __future__ import annotations


class SourceCursor:
    """A position in a loaded source buffer with one character of lookahead.

    End of input is reported as the empty string.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def read(self) -> str:
        c = self.peek()
        if c:
            self.pos += 1
        return c

    def try_read(self, c: str) -> bool:
        if self.peek() == c:
            self.pos += 1
            return True
        return False

    def putback(self) -> None:
        if self.pos == 0:
            raise IndexError("putback at start of input")
        self.pos -= 1

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def slice(self, start: int) -> str:
        return self.text[start:self.pos]
