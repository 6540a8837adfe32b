from pytest_archon import archrule


def test_engine_independent_of_entry_points() -> None:
    """
    The check engine (template, checks, executor) must not reach back into
    the public entry points or decorators built on top of it.
    """
    (
        archrule("engine_independence")
        .match("argcheck.template")
        .match("argcheck.checks")
        .match("argcheck.context")
        .match("argcheck.executor")
        .match("argcheck.result")
        .should_not_import("argcheck.validator")
        .should_not_import("argcheck.decorators")
        .check("argcheck")
    )


def test_predicates_free_of_pydantic() -> None:
    """
    Predicates operate on plain mappings; pydantic stays in configuration.
    """
    (
        archrule("predicates_plain")
        .match("argcheck.checks")
        .match("argcheck.context")
        .match("argcheck.sentinels")
        .should_not_import("pydantic*")
        .check("argcheck")
    )


def test_exceptions_are_leaves() -> None:
    """
    Exceptions and sentinels sit at the bottom and import nothing from the
    rest of the package.
    """
    (
        archrule("leaf_modules")
        .match("argcheck.exceptions")
        .match("argcheck.sentinels")
        .should_not_import("argcheck.template")
        .should_not_import("argcheck.checks")
        .should_not_import("argcheck.executor")
        .should_not_import("argcheck.options")
        .should_not_import("argcheck.validator")
        .check("argcheck")
    )
