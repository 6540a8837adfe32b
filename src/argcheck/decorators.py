"""validate_arguments — validates keyword arguments before a coroutine runs."""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import InvocationError
from .validator import ArgumentValidator

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .template import Template
    from .validator import Options

T = TypeVar("T")


def validate_arguments(
    template: Template,
    options: Options = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Validate a coroutine function's keyword arguments against *template*.

    The wrapped function receives the normalized values (defaults injected)
    on top of any undeclared keyword arguments.
    Failures raise :class:`~argcheck.exceptions.ArgumentValidationError`
    instead of calling it. Positional arguments pass through untouched.

    Usage::

        @validate_arguments({"limit": {"default": 10}})
        async def search(query, **kwargs): ...
    """
    validator = ArgumentValidator(template, options)

    def decorator(
        func: Callable[..., Awaitable[T]],
    ) -> Callable[..., Awaitable[T]]:
        if not inspect.iscoroutinefunction(func):
            raise InvocationError(
                f"{getattr(func, '__name__', func)!r} must be a coroutine function"
            )

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            values = await validator.validate_or_raise(kwargs)
            return await func(*args, **{**kwargs, **values})

        wrapper.validator = validator  # type: ignore[attr-defined]
        return wrapper

    return decorator
