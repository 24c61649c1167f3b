"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any

from memsafe_app.aggregation import BufferAllocator
from memsafe_app.logging.config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Keep diagnostics on stderr and out of captured stdout."""
    configure_logging(level="WARNING")


@pytest.fixture
def allocator() -> BufferAllocator:
    """Fresh instrumented allocator."""
    return BufferAllocator()


@pytest.fixture
def sample_values() -> list[int]:
    """Buffer contents used by the demo program."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def sample_overrides() -> Dict[str, Any]:
    """Programmatic configuration overrides for testing."""
    return {
        "aggregation": {
            "vector_values": [10, 20, 30],
            "array_values": [2, 4, 6, 8, 10],
        },
        "speakers": {
            "roster": [
                {"kind": "cat", "name": "Tom"},
                {"kind": "dog", "name": "Rex"},
                {"kind": "cat", "name": "Felix"},
            ],
        },
    }
