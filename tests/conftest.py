"""Shared fixtures for argcheck tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def dependency_template():
    """``a`` needs ``b`` and conflicts with ``c``."""
    return {
        "a": {"requires": ["b"], "excludes": ["c"]},
        "b": {"required": False},
        "c": {},
    }
