# ============================================================================
# TypedExceptions - Test Configuration and Fixtures
#
# Purpose: Shared pytest fixtures for testing
# Inputs: None
# Outputs: Native and structural error fixtures
# Dependencies: pytest
# Usage: pytest tests/ (fixtures are automatically available)
#
# Changelog:
#   2026-09-28: Initial fixtures for native and structural errors
# ============================================================================

from types import SimpleNamespace

import pytest


def _raised(error: BaseException) -> BaseException:
    """Raise and catch error so it carries a real traceback."""
    try:
        raise error
    except BaseException as caught:
        return caught


@pytest.fixture
def raised():
    """Factory fixture: raised(ValueError("bad")) returns the caught exception."""
    return _raised


@pytest.fixture
def structural_error():
    """An error-like object that is not a BaseException (JS-style fields)."""
    return SimpleNamespace(message="Index out of range", stack="at line 1", name="RangeError")


class SlottedError:
    """Error-like object that cannot take new instance attributes."""

    __slots__ = ("message", "stack", "kind")

    def __init__(self, message: str, stack: str, kind: str):
        self.message = message
        self.stack = stack
        self.kind = kind


@pytest.fixture
def slotted_error():
    return SlottedError("frozen", "at line 2", "Frozen")
