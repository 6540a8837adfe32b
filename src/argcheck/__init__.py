"""argcheck — template-driven validation of key/value arguments.

Pydantic is used for option handling only; templates are plain mappings.
"""

from __future__ import annotations

from .checks import (
    INVALID_VALUE,
    MISSING,
    MISSING_OR_UNDEFINED,
    UNKNOWN_ARGUMENT,
)
from .context import ValidationContext
from .decorators import validate_arguments

# ── Exceptions ──────────────────────────────────────────────────
from .exceptions import (
    ArgCheckError,
    ArgumentValidationError,
    InvocationError,
    TemplateError,
    UnknownRuleError,
)
from .executor import CheckExecutor, ValidationState

# ── Configuration ───────────────────────────────────────────────
from .options import DEFAULT_OPTIONS, ValidatorOptions
from .result import ValidationResult
from .sentinels import UNDEFINED, is_undefined

# ── Template ────────────────────────────────────────────────────
from .template import RULE_KEYS, Check, CheckPlan, compile_template

# ── Entry points ────────────────────────────────────────────────
from .validator import ArgumentValidator, check, validate, validate_or_raise

__all__: list[str] = [
    # Entry points
    "ArgumentValidator",
    "check",
    "validate",
    "validate_arguments",
    "validate_or_raise",
    # Results & sentinels
    "UNDEFINED",
    "ValidationResult",
    "is_undefined",
    # Configuration
    "DEFAULT_OPTIONS",
    "ValidatorOptions",
    # Template & execution
    "RULE_KEYS",
    "Check",
    "CheckExecutor",
    "CheckPlan",
    "ValidationContext",
    "ValidationState",
    "compile_template",
    # Messages
    "INVALID_VALUE",
    "MISSING",
    "MISSING_OR_UNDEFINED",
    "UNKNOWN_ARGUMENT",
    # Exceptions
    "ArgCheckError",
    "ArgumentValidationError",
    "InvocationError",
    "TemplateError",
    "UnknownRuleError",
]
