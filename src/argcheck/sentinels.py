"""The UNDEFINED sentinel."""

from __future__ import annotations

from typing import Any


class _Undefined:
    """Marks a key that is present with no value.

    Distinct from ``None``: ``None`` is a value, ``UNDEFINED`` is not.
    """

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def is_undefined(value: object) -> bool:
    return value is UNDEFINED
