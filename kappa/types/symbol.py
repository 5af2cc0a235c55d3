from __future__ import annotations
import sys


class Symbol:
    """A name read from source text.

    `id` keeps the spelling from the source for printing; `key` is the
    case-folded form used for equality, hashing and environment lookups.
    """
    __slots__ = ("id", "key")

    def __init__(self, name: str):
        self.id = name
        # Intern to ensure fast equality/hash and reduce memory
        self.key = sys.intern(name.lower())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
