"""CheckExecutor — runs a compiled plan one check at a time."""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import TYPE_CHECKING

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .context import ValidationContext
    from .template import Check, CheckPlan

logger = logging.getLogger("argcheck.executor")


class ValidationState(str, enum.Enum):
    """Lifecycle of one validation call."""

    COMPILING = "compiling"
    RUNNING_PRE_CHECKS = "running_pre_checks"
    RUNNING_POST_CHECKS = "running_post_checks"
    DELIVERED = "delivered"


class CheckExecutor:
    """Runs pre-checks, then post-checks, then assembles the result.

    Checks run strictly in plan order and never concurrently. Control is
    handed back to the event loop after every check. A failing check never
    stops the ones after it; post-checks run even when pre-checks failed.
    """

    def __init__(self, plan: CheckPlan, context: ValidationContext) -> None:
        self._plan = plan
        self._context = context
        self.state = ValidationState.COMPILING

    async def run(self) -> ValidationResult:
        if self.state is not ValidationState.COMPILING:
            raise RuntimeError(f"executor already {self.state.value}")

        self.state = ValidationState.RUNNING_PRE_CHECKS
        await self._run_checks(self._plan.pre_checks)

        self.state = ValidationState.RUNNING_POST_CHECKS
        await self._run_checks(self._plan.post_checks_for(self._context.args))

        self.state = ValidationState.DELIVERED
        errors = self._context.errors
        if errors:
            logger.debug("Validation failed for %s", sorted(errors))
            return ValidationResult.failure(errors)
        return ValidationResult.success(self._context.values)

    async def _run_checks(self, checks: Iterable[Check]) -> None:
        for check in checks:
            messages = await check.predicate(self._context, check.arg)
            for message in messages:
                self._context.add_error(check.arg, message)
            if messages:
                logger.debug("%s failed for %r: %s", check.name, check.arg, messages)
            # Yield between checks.
            await asyncio.sleep(0)
