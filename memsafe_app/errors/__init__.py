"""
Error classification system for the demo library.

Buffer lifecycle violations are kept apart from program-level failures so
callers can tell resource misuse from configuration or output problems.
"""

from .lifecycle import (
    BufferLifecycleError,
    BufferLeakError,
    DoubleReleaseError,
    BufferAccessError,
    BufferSizeError,
    BufferBoundsError,
)
from .system_failures import (
    SystemFailureError,
    SpeakerError,
    UnknownSpeakerKindError,
    ConfigurationError,
    DeliveryError,
)

__all__ = [
    # Buffer Lifecycle Errors
    "BufferLifecycleError",
    "BufferLeakError",
    "DoubleReleaseError",
    "BufferAccessError",
    "BufferSizeError",
    "BufferBoundsError",
    # System Failures
    "SystemFailureError",
    "SpeakerError",
    "UnknownSpeakerKindError",
    "ConfigurationError",
    "DeliveryError",
]
