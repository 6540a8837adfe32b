import pytest
from pydantic import ValidationError as PydanticValidationError

from argcheck import (
    DEFAULT_OPTIONS,
    InvocationError,
    UnknownRuleError,
    ValidatorOptions,
    validate,
)
from argcheck.options import resolve_options


def test_default_options() -> None:
    assert DEFAULT_OPTIONS.extra_arguments is True
    assert DEFAULT_OPTIONS.check_template is True
    assert DEFAULT_OPTIONS.model_dump(by_alias=True) == {
        "extraArguments": True,
        "checkTemplate": True,
    }


def test_options_are_frozen() -> None:
    with pytest.raises(PydanticValidationError):
        DEFAULT_OPTIONS.extra_arguments = False  # type: ignore[misc]


def test_resolve_accepts_alias_and_field_names() -> None:
    assert resolve_options({"extraArguments": False}).extra_arguments is False
    assert resolve_options({"extra_arguments": False}).extra_arguments is False
    assert resolve_options(None) is DEFAULT_OPTIONS


def test_resolve_rejects_unknown_option() -> None:
    with pytest.raises(InvocationError, match="invalid options: nope"):
        resolve_options({"nope": True})


def test_resolve_rejects_non_mapping() -> None:
    with pytest.raises(InvocationError, match="options must be an object"):
        resolve_options(["extraArguments"])  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({}, True),
        ({"ARGCHECK_ENV": "development"}, True),
        ({"ARGCHECK_ENV": "production"}, False),
        ({"PYTHON_ENV": "prod"}, False),
        ({"ARGCHECK_ENV": "staging", "PYTHON_ENV": "production"}, True),
    ],
)
def test_from_env(environ, expected) -> None:
    assert ValidatorOptions.from_env(environ).check_template is expected


def test_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.delenv("PYTHON_ENV", raising=False)
    monkeypatch.setenv("ARGCHECK_ENV", "production")

    assert ValidatorOptions.from_env().check_template is False


# --- Behaviour ---


@pytest.mark.asyncio
async def test_extra_arguments_rejected_when_disabled() -> None:
    template = {"a": {"requires": ["b"]}}
    options = ValidatorOptions(extra_arguments=False)

    result = await validate({"a": 1, "x": 2, "y": 3}, template, options)

    assert result.errors == {
        "a": ["requires key 'b'"],
        "x": ["unknown argument"],
        "y": ["unknown argument"],
    }


@pytest.mark.asyncio
async def test_extra_arguments_allowed_by_default() -> None:
    result = await validate({"a": 1, "x": 2}, {"a": {}})

    assert result.values == {"a": 1}


@pytest.mark.asyncio
async def test_fast_path_skips_template_checks() -> None:
    options = ValidatorOptions(check_template=False)

    result = await validate({"a": 1}, {"a": {"bogus": True}}, options)

    assert result.values == {"a": 1}


@pytest.mark.asyncio
async def test_template_checks_on_by_default() -> None:
    with pytest.raises(UnknownRuleError):
        await validate({"a": 1}, {"a": {"bogus": True}})
