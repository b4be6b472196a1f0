"""Shared fixtures for colonmark tests."""

import pytest

from colonmark.config import reset_diagnostics_config
from colonmark.diagnostics import CollectingSink


@pytest.fixture(autouse=True)
def _default_diagnostics_config():
    reset_diagnostics_config()
    yield
    reset_diagnostics_config()


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()
