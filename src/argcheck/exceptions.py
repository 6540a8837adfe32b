"""Exceptions raised by argcheck.

Two disjoint families: :class:`TemplateError` for programming mistakes in a
template or call site (raised before any check runs), and
:class:`ArgumentValidationError` for data failures, raised only by the
convenience surfaces that opt into exceptions.
"""

from __future__ import annotations


class ArgCheckError(Exception):
    """Root exception for the argcheck library."""


class TemplateError(ArgCheckError):
    """Raised when a template or call site is malformed.

    Never delivered through the completion channel; the caller must fix the
    template or the call.
    """


class InvocationError(TemplateError):
    """Raised when ``validate``/``check`` is called with bad arguments."""


class UnknownRuleError(TemplateError):
    """Raised when a rule set contains a key that is not a known rule."""

    def __init__(self, argument: str, rule: object) -> None:
        self.argument = argument
        self.rule = rule
        super().__init__(f"{argument}: unknown template option: {rule}")


class ArgumentValidationError(ArgCheckError):
    """Raised when argument validation fails.

    Carries structured errors: ``{argument: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        super().__init__(str(self.errors))
