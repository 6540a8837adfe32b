"""Entry points: ArgumentValidator, validate, validate_or_raise, check."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .context import ValidationContext
from .exceptions import InvocationError
from .executor import CheckExecutor
from .options import resolve_options
from .template import compile_template

if TYPE_CHECKING:
    from collections.abc import Callable

    from .options import ValidatorOptions
    from .result import ValidationResult
    from .template import CheckPlan, Template

    Options = ValidatorOptions | Mapping[str, Any] | None
    Done = Callable[..., Any]

logger = logging.getLogger("argcheck.validator")


def _require_mapping(value: object, name: str) -> None:
    if not isinstance(value, Mapping):
        raise InvocationError(f"{name} must be an object")


class ArgumentValidator:
    """A compiled template that can validate any number of inputs.

    The template is checked and compiled once, in the constructor, so a
    malformed template fails before anything runs. The compiled plan is
    never mutated and one instance may serve concurrent calls.

    Usage::

        validator = ArgumentValidator({"name": {"required": True}})
        result = await validator.validate({"name": "Alice"})
    """

    def __init__(self, template: Template, options: Options = None) -> None:
        _require_mapping(template, "template")
        self.options = resolve_options(options)
        self.plan: CheckPlan = compile_template(template, self.options)

    @property
    def template(self) -> Template:
        return self.plan.template

    async def validate(self, args: Mapping[str, Any]) -> ValidationResult:
        """Run every check against *args* and return the result."""
        _require_mapping(args, "args")
        context = ValidationContext.create(args, self.plan.template)
        return await CheckExecutor(self.plan, context).run()

    async def validate_or_raise(self, args: Mapping[str, Any]) -> dict[str, Any]:
        """Return the normalized values or raise ``ArgumentValidationError``."""
        result = await self.validate(args)
        return result.raise_for_errors()


async def validate(
    args: Mapping[str, Any],
    template: Template,
    options: Options = None,
) -> ValidationResult:
    """Validate *args* against *template*.

    Template and call-site errors raise :class:`TemplateError`; data errors
    are reported in the returned :class:`ValidationResult`.
    """
    _require_mapping(args, "args")
    return await ArgumentValidator(template, options).validate(args)


async def validate_or_raise(
    args: Mapping[str, Any],
    template: Template,
    options: Options = None,
) -> dict[str, Any]:
    result = await validate(args, template, options)
    return result.raise_for_errors()


def check(
    args: Mapping[str, Any],
    template: Template,
    options: Options | Done = None,
    done: Done | None = None,
) -> asyncio.Task[None] | None:
    """Callback form of :func:`validate`.

    ``done`` is called exactly once, as ``done(errors)`` on failure or
    ``done(None, values)`` on success. ``options`` may be left out and the
    callback passed in its place. Only ``done`` is a callback: template
    ``validator`` functions take the value alone and return (or await) their
    outcome, see :func:`~argcheck.checks.check_validator`.

    Structural errors raise here, before anything is scheduled. Inside a
    running event loop the checks run as a task, which is returned; without
    one they run to completion before ``check`` returns ``None``.
    """
    if callable(options) and done is None:
        done, options = options, None

    _require_mapping(args, "args")
    _require_mapping(template, "template")
    if not callable(done):
        raise InvocationError("done must be a function")
    callback: Done = done
    validator = ArgumentValidator(template, options)  # type: ignore[arg-type]

    async def deliver() -> None:
        result = await validator.validate(args)
        if result.is_valid:
            callback(None, result.values)
        else:
            callback(result.errors)

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.debug("No running event loop; validating synchronously")
        asyncio.run(deliver())
        return None
    return loop.create_task(deliver())
