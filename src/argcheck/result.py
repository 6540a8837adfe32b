"""ValidationResult — per-argument errors or normalized values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import ArgumentValidationError


def default_errors_factory() -> dict[str, list[str]]:
    """Factory for mutable default dict in ValidationResult dataclass fields."""
    return {}


@dataclass
class ValidationResult:
    """Outcome of one validation call.

    Exactly one side is populated: ``values`` on success, ``errors`` on
    failure.

    Usage::

        result = ValidationResult.success({"a": 1})
        result = ValidationResult.failure({"a": ["argument missing"]})
    """

    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)
    values: dict[str, Any] | None = None

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, values: dict[str, Any] | None = None) -> ValidationResult:
        return cls(values=dict(values or {}))

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors=errors)

    def add_error(self, arg: str, message: str) -> None:
        """Add a single error for *arg*; drops any values."""
        self.errors.setdefault(arg, []).append(message)
        self.values = None

    def raise_for_errors(self) -> dict[str, Any]:
        """Return the values, or raise :class:`ArgumentValidationError`."""
        if not self.is_valid:
            raise ArgumentValidationError(self.errors)
        return dict(self.values or {})

    def __bool__(self) -> bool:
        return self.is_valid
