from __future__ import annotations


class UndefinedType:
    """Non-value produced by mutation-only forms such as define and set!."""

    _instance: UndefinedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Undefined"
    def __str__(self): return "#<undefined>"

    def __eq__(self, other):
        return isinstance(other, UndefinedType)

    def __hash__(self):
        return hash(UndefinedType)


Undefined = UndefinedType()
