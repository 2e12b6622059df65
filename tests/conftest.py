"""Pytest configuration and shared fixtures for the md2delta test suite.

This module registers the test markers and Hypothesis profiles, and
provides small helpers for building Delta expectations.
"""

import os
from typing import Any, Callable, Optional

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - Markdown parsed with mistune end to end")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


@pytest.fixture
def op() -> Callable[..., dict[str, Any]]:
    """Build a Delta op dict in the serialized shape.

    Returns
    -------
    callable
        ``op(insert, **attributes)``; attribute names with underscores are
        written with hyphens (``code_block`` -> ``code-block``).

    """

    def _op(insert: Any, **attributes: Any) -> dict[str, Any]:
        result: dict[str, Any] = {"insert": insert}
        if attributes:
            result["attributes"] = {name.replace("_", "-"): value for name, value in attributes.items()}
        return result

    return _op


@pytest.fixture
def quote_line() -> Callable[..., list[dict[str, Any]]]:
    """Build the ops of one quoted line: optional text and its terminator."""

    def _quote_line(text: Optional[str], indent: int = 0) -> list[dict[str, Any]]:
        attributes: dict[str, Any] = {"blockquote": True}
        if indent:
            attributes["indent"] = indent
        ops: list[dict[str, Any]] = [{"insert": text}] if text else []
        ops.append({"insert": "\n", "attributes": attributes})
        return ops

    return _quote_line
