from __future__ import annotations


class EmptyType:
    """The empty value: `()` and the result of forms that produce nothing."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Empty"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return 0


Empty = EmptyType()
