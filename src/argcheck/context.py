"""ValidationContext — state owned by one in-flight validation call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .sentinels import UNDEFINED

if TYPE_CHECKING:
    from collections.abc import Mapping


def default_values_factory() -> dict[str, Any]:
    return {}


def default_errors_factory() -> dict[str, list[str]]:
    return {}


@dataclass
class ValidationContext:
    """Input, rules and accumulators threaded through every check.

    ``args`` and ``template`` are read only. ``values`` and ``errors`` are
    mutated by the executor and belong to exactly one call.
    """

    args: Mapping[str, Any]
    template: Mapping[str, Mapping[str, Any]]
    values: dict[str, Any] = field(default_factory=default_values_factory)
    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @classmethod
    def create(
        cls,
        args: Mapping[str, Any],
        template: Mapping[str, Mapping[str, Any]],
    ) -> ValidationContext:
        """Seed ``values`` with every template argument present in *args*."""
        values = {arg: args[arg] for arg in template if arg in args}
        return cls(args=args, template=template, values=values)

    def has(self, arg: str) -> bool:
        """True when *arg* is a key of the input, whatever its value."""
        return arg in self.args

    def get(self, arg: str) -> Any:
        """The input value for *arg*, or ``UNDEFINED`` when absent."""
        return self.args.get(arg, UNDEFINED)

    def rules(self, arg: str) -> Mapping[str, Any]:
        return self.template.get(arg, {})

    def add_error(self, arg: str, message: str) -> None:
        self.errors.setdefault(arg, []).append(message)
