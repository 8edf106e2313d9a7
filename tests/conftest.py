"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from bigint import BigInteger
from tests.helpers import SAMPLE_VALUES


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo structlog.configure() calls made by the CLI under test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_values() -> list[BigInteger]:
    """BigIntegers around limb boundaries, int64 extremes and zero."""
    return [BigInteger(v) for v in SAMPLE_VALUES]
