"""Validator configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvocationError

ENV_VARIABLES = ("ARGCHECK_ENV", "PYTHON_ENV")


class ValidatorOptions(BaseModel):
    """Options for one validator or validation call.

    ``check_template=False`` is the production fast path: template structure
    (unknown rules, non-callable validators, non-list requires/excludes) is
    no longer checked, so a malformed template may fail later or silently.
    """

    extra_arguments: bool = Field(default=True, alias="extraArguments")
    check_template: bool = Field(default=True, alias="checkTemplate")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ValidatorOptions:
        """Build options from the process environment.

        A value starting with ``prod`` in ``ARGCHECK_ENV`` (or ``PYTHON_ENV``)
        turns template checking off.
        """
        env = os.environ if environ is None else environ
        stage = ""
        for name in ENV_VARIABLES:
            if env.get(name):
                stage = env[name]
                break
        return cls(check_template=not stage.lower().startswith("prod"))


DEFAULT_OPTIONS = ValidatorOptions()


def resolve_options(
    options: ValidatorOptions | Mapping[str, Any] | None,
) -> ValidatorOptions:
    """Coerce *options* to a :class:`ValidatorOptions`."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, ValidatorOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvocationError("options must be an object")
    try:
        return ValidatorOptions.model_validate(dict(options))
    except PydanticValidationError as exc:
        names = ", ".join(
            ".".join(str(p) for p in error.get("loc", ("__root__",)))
            for error in exc.errors()
        )
        raise InvocationError(f"invalid options: {names}") from exc
