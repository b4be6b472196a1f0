"""Tests for the public package surface."""

import colonmark


def test_version() -> None:
    assert colonmark.__version__ == "0.1.0"


def test_all_exports_resolve() -> None:
    for name in colonmark.__all__:
        assert hasattr(colonmark, name), name
