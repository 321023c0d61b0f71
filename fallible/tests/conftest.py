"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest
import structlog

from fallible.result import Err, Ok


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def never_called():
    """Callback that must not be invoked."""
    return MagicMock(name="never_called")


@pytest.fixture
def mixed_results():
    """Results in a fixed order: two Ok, one Err, one Ok, one Err."""
    return [Ok(1), Ok(2), Err("bad"), Ok(3), Err("worse")]
