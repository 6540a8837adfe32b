"""Check predicates.

Every predicate is ``async (context, arg) -> list[str]`` and returns the
failure messages for *arg*; an empty list means the check passed.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, Protocol

from .sentinels import UNDEFINED

if TYPE_CHECKING:
    from .context import ValidationContext

logger = logging.getLogger("argcheck.checks")

MISSING = "argument missing"
MISSING_OR_UNDEFINED = "argument missing or undefined"
INVALID_VALUE = "invalid value"
UNKNOWN_ARGUMENT = "unknown argument"


class CheckPredicate(Protocol):
    async def __call__(self, context: ValidationContext, arg: str) -> list[str]: ...


async def check_required(context: ValidationContext, arg: str) -> list[str]:
    if context.has(arg):
        return []
    return [MISSING]


async def check_defined(context: ValidationContext, arg: str) -> list[str]:
    if context.has(arg) and context.get(arg) is not UNDEFINED:
        return []
    return [MISSING_OR_UNDEFINED]


async def check_default(context: ValidationContext, arg: str) -> list[str]:
    """Inject the default when *arg* is wholly absent from the input."""
    if not context.has(arg):
        context.values[arg] = context.rules(arg)["default"]
    return []


async def check_validator(context: ValidationContext, arg: str) -> list[str]:
    """Run the user-supplied validator against the input value.

    The function is called with the value alone, not with a callback. It
    returns ``True`` or any falsy value other than ``False`` to accept,
    ``False`` or a message to reject, or an awaitable resolving to one of
    those. A ``ValueError`` raised by the function is a rejection carrying
    its message.
    """
    func = context.rules(arg)["validator"]
    try:
        outcome: Any = func(context.get(arg))
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except ValueError as exc:
        logger.debug("Validator for %r raised %r", arg, exc)
        return [str(exc) or INVALID_VALUE]
    return _messages_from(outcome)


def _messages_from(outcome: Any) -> list[str]:
    if outcome is False:
        return [INVALID_VALUE]
    if not outcome or outcome is True:
        return []
    return [str(outcome)]


async def check_requires(context: ValidationContext, arg: str) -> list[str]:
    return [
        f"requires key '{required}'"
        for required in context.rules(arg)["requires"]
        if not context.has(required)
    ]


async def check_excludes(context: ValidationContext, arg: str) -> list[str]:
    return [
        f"excludes key '{excluded}'"
        for excluded in context.rules(arg)["excludes"]
        if context.has(excluded)
    ]


async def check_extra_argument(context: ValidationContext, arg: str) -> list[str]:
    if arg in context.template:
        return []
    return [UNKNOWN_ARGUMENT]
