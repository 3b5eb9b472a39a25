"""Shared test fixtures for argus-engine."""

from pathlib import Path

import pytest

from argus_engine.merger import AUTO_END, AUTO_START, CUSTOM_END, CUSTOM_START

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def custom_doc():
    """A previously generated file carrying two user sections."""
    return (FIXTURES / "claude-with-custom.md").read_text()


@pytest.fixture
def auto_only_doc():
    return f"{AUTO_START}\nstale\n{AUTO_END}"


@pytest.fixture
def two_custom_doc():
    return (
        f"{AUTO_START}\nauto\n{AUTO_END}\n\n"
        f"{CUSTOM_START}\n## A\nfirst\n{CUSTOM_END}\n\n"
        f"{CUSTOM_START}\n## B\nsecond\n{CUSTOM_END}"
    )
