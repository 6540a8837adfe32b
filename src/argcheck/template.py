"""Template compiler: turns a template into an ordered plan of checks."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .checks import (
    check_default,
    check_defined,
    check_excludes,
    check_extra_argument,
    check_required,
    check_requires,
    check_validator,
)
from .exceptions import InvocationError, TemplateError, UnknownRuleError

if TYPE_CHECKING:
    from .checks import CheckPredicate
    from .options import ValidatorOptions

logger = logging.getLogger("argcheck.template")

RULE_KEYS = (
    "required",  # argument must be present
    "defined",  # argument must be present and not UNDEFINED
    "default",  # value used when the argument is absent
    "validator",  # callable run against the value
    "requires",  # other arguments that must be present
    "excludes",  # other arguments that must be absent
)

Template = Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True)
class Check:
    """One unit of work: a predicate applied to one argument."""

    arg: str
    predicate: CheckPredicate

    @property
    def name(self) -> str:
        return str(getattr(self.predicate, "__name__", repr(self.predicate)))


@dataclass(frozen=True)
class CheckPlan:
    """Compiled, immutable checks for one template.

    Pre-checks look at a single argument; post-checks relate arguments to
    each other and run only after every pre-check has finished.
    """

    template: Template
    pre_checks: tuple[Check, ...]
    post_checks: tuple[Check, ...]
    extra_arguments: bool = True

    def post_checks_for(self, args: Mapping[str, Any]) -> tuple[Check, ...]:
        """Post-checks for one input, including undeclared-key rejections."""
        if self.extra_arguments:
            return self.post_checks
        extra = tuple(
            Check(arg, check_extra_argument) for arg in args if arg not in self.template
        )
        return self.post_checks + extra


def _is_list(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def check_template_structure(template: object) -> None:
    """Raise :class:`TemplateError` when *template* is malformed."""
    if not isinstance(template, Mapping):
        raise InvocationError("template must be an object")
    for arg, rules in template.items():
        if not isinstance(rules, Mapping):
            raise InvocationError(f"{arg}: rule set must be an object")
        for rule in rules:
            if rule not in RULE_KEYS:
                raise UnknownRuleError(arg, rule)
        if "validator" in rules and not callable(rules["validator"]):
            raise TemplateError(f"{arg}: passed validator is not a function")
        for rule in ("requires", "excludes"):
            if rule in rules and not _is_list(rules[rule]):
                raise TemplateError(f"{arg}: passed {rule}-list should be an array")


def _freeze_rules(rules: Mapping[str, Any]) -> Mapping[str, Any]:
    snapshot = dict(rules)
    for rule in ("requires", "excludes"):
        if _is_list(snapshot.get(rule)):
            snapshot[rule] = tuple(snapshot[rule])
    return MappingProxyType(snapshot)


def compile_template(template: Template, options: ValidatorOptions) -> CheckPlan:
    """Compile *template* into a :class:`CheckPlan`.

    Structural checks are skipped when ``options.check_template`` is off.
    """
    if options.check_template:
        check_template_structure(template)

    frozen: Template = MappingProxyType(
        {arg: _freeze_rules(rules) for arg, rules in template.items()}
    )
    pre: list[Check] = []
    post: list[Check] = []
    for arg, rules in frozen.items():
        if rules.get("required"):
            pre.append(Check(arg, check_required))
        if rules.get("defined"):
            pre.append(Check(arg, check_defined))
        if "default" in rules:
            pre.append(Check(arg, check_default))
        if rules.get("validator") is not None:
            pre.append(Check(arg, check_validator))
        if rules.get("requires"):
            post.append(Check(arg, check_requires))
        if rules.get("excludes"):
            post.append(Check(arg, check_excludes))

    logger.debug(
        "Compiled template with %d arguments: %d pre-checks, %d post-checks",
        len(template),
        len(pre),
        len(post),
    )
    return CheckPlan(
        template=frozen,
        pre_checks=tuple(pre),
        post_checks=tuple(post),
        extra_arguments=options.extra_arguments,
    )
