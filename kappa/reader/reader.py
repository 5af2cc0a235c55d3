"""
  Kappa Reader

- Reads straight from a character cursor, one character of lookahead,
  no separate token stream.
- Emits Python values:

    - integers   -> int  (grammar: (+|-)?[0-9]+, signed 64-bit)
    - other atoms -> Symbol (source spelling kept)
    - ()         -> Empty
    - lists      -> Python list
    - )          -> NO_VALUE (closes the list being read)
    - ; ...      -> comment to end of line, skipped
"""

from __future__ import annotations

import re
from typing import Iterator

from kappa import SExpression
from kappa.errors import EndOfInput, KappaSyntaxError
from kappa.reader.cursor import SourceCursor
from kappa.types.nil import Empty
from kappa.types.symbol import Symbol
from kappa.types.values import INT64_MAX, INT64_MIN, make_list

NUMBER_RE = re.compile(r"[+-]?[0-9]+")


class _NoValue:
    """Sentinel returned by `Reader.read` for a closing parenthesis."""
    __slots__ = ()

    def __repr__(self):
        return "NO_VALUE"

    def __bool__(self):
        return False


NO_VALUE = _NoValue()


def is_number(token: str) -> bool:
    return NUMBER_RE.fullmatch(token) is not None


def atom_from_token(token: str) -> SExpression:
    if not is_number(token):
        return Symbol(token)
    n = int(token, 10)
    if not INT64_MIN <= n <= INT64_MAX:
        raise KappaSyntaxError(f"integer literal out of range: {token}")
    return n


class Reader:
    """Reads one top-level value per `read()` call from a shared cursor."""

    def __init__(self, source: str | SourceCursor):
        self.cursor = source if isinstance(source, SourceCursor) else SourceCursor(source)

    def _skip_spaces(self) -> None:
        while True:
            c = self.cursor.read()
            if not c or not c.isspace():
                break
        if c:
            self.cursor.putback()

    def _skip_comment(self) -> None:
        while True:
            c = self.cursor.read()
            if not c or c == "\n":
                break

    def _read_token(self) -> str:
        start = self.cursor.pos
        while True:
            c = self.cursor.read()
            if not c:
                break
            if c.isspace() or c in "()":
                self.cursor.putback()
                break
        return self.cursor.slice(start)

    def _read_list(self) -> list[SExpression]:
        items = []
        while True:
            item = self.read()
            if item is NO_VALUE:
                return items
            items.append(item)

    def read(self) -> SExpression:
        """Read the next value.

        Returns NO_VALUE for a `)`. Raises EndOfInput when the input runs out,
        also in the middle of an unfinished list.
        """
        while True:
            self._skip_spaces()
            c = self.cursor.peek()
            if not c:
                raise EndOfInput()
            if c != ";":
                break
            self._skip_comment()

        if c == ")":
            self.cursor.read()
            return NO_VALUE
        if c == "(":
            self.cursor.read()
            self._skip_spaces()
            if self.cursor.try_read(")"):
                return Empty
            return make_list(self._read_list())
        return atom_from_token(self._read_token())

    def read_all(self) -> Iterator[SExpression]:
        """Yield every top-level value until input ends; stray `)` yield nothing."""
        while True:
            try:
                value = self.read()
            except EndOfInput:
                return
            if value is not NO_VALUE:
                yield value


def read_source(text: str) -> list[SExpression]:
    return list(Reader(text).read_all())
