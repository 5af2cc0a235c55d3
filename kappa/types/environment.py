"""Runtime environment frames for Kappa.

A frame is an open-hashing table from symbol names to values plus a link to
a parent frame. Keys compare case-insensitively; the spelling of the first
binding is kept for display. Lookup here never leaves the frame: walking the
parent chain is the evaluator's job.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Union

from kappa import LispValue
from kappa.config import get_env_init_size
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Bucket count of a new frame, read once from the environment
DEFAULT_SIZE = get_env_init_size()

_HASH_MASK = (1 << 64) - 1

Key = Union[Symbol, str]


def _key_text(key: Key) -> str:
    return key.id if isinstance(key, Symbol) else key


def hash_key(key: Key) -> int:
    """Left-shift-and-accumulate hash over the case-folded key bytes."""
    h = 0
    for byte in _key_text(key).lower().encode("utf-8"):
        h = ((h << 1) + byte * 131) & _HASH_MASK
    return h


class _Entry:
    __slots__ = ("key_hash", "key", "folded", "value", "next")

    def __init__(self, key_hash: int, key: str, value: LispValue, next_entry: Optional[_Entry]):
        self.key_hash = key_hash
        self.key = key
        self.folded = key.lower()
        self.value = value
        self.next = next_entry


class Environment:
    """One frame of the environment chain."""

    __slots__ = ("_slots", "_count", "parent")

    def __init__(self, parent: Optional[Environment] = None, size: Optional[int] = None):
        size = size if size is not None else DEFAULT_SIZE
        if size < 1:
            raise ValueError(f"Environment size must be positive, got {size}")
        self._slots: list[Optional[_Entry]] = [None] * size
        self._count = 0
        self.parent: Optional[Environment] = parent

    @property
    def bucket_count(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Key) -> bool:
        return self._find(key) is not None

    def __repr__(self) -> str:
        return f"Environment(entries={self._count}, buckets={len(self._slots)}, root={self.parent is None})"

    def _find(self, key: Key) -> Optional[_Entry]:
        text = _key_text(key)
        h = hash_key(text)
        folded = text.lower()
        entry = self._slots[h % len(self._slots)]
        while entry is not None:
            if entry.key_hash == h and entry.folded == folded:
                return entry
            entry = entry.next
        return None

    def _rehash(self) -> None:
        old_slots = self._slots
        new_size = len(old_slots) * 2 + 1
        logger.debug("rehash frame: %d entries, %d -> %d buckets", self._count, len(old_slots), new_size)
        self._slots = [None] * new_size
        for head in old_slots:
            entry = head
            while entry is not None:
                following = entry.next
                index = entry.key_hash % new_size
                entry.next = self._slots[index]
                self._slots[index] = entry
                entry = following

    def add(self, key: Key, value: LispValue) -> None:
        """Bind `key` in this frame, overwriting an existing local binding.

        The table grows before the insert whenever it is at least half full.
        """
        if self._count * 2 >= len(self._slots):
            self._rehash()

        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        text = _key_text(key)
        h = hash_key(text)
        index = h % len(self._slots)
        self._slots[index] = _Entry(h, text, value, self._slots[index])
        self._count += 1

    def lookup(self, key: Key) -> Optional[LispValue]:
        """Return the value bound to `key` in this frame, or None."""
        entry = self._find(key)
        return entry.value if entry is not None else None

    def update(self, mapping: dict[Key, LispValue]) -> None:
        """Bulk-add a mapping of names to values in this frame."""
        for key, value in mapping.items():
            self.add(key, value)

    def keys(self) -> Iterator[str]:
        for head in self._slots:
            entry = head
            while entry is not None:
                yield entry.key
                entry = entry.next

    def release(self) -> None:
        """Drop every binding; used when a call frame is torn down."""
        self._slots = [None] * len(self._slots)
        self._count = 0
