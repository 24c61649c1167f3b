"""
Buffer lifecycle error classifications.

These exceptions represent misuse of a scoped buffer: leaked allocations,
double releases, access outside the held scope and wrong buffer sizes.
"""

from typing import Optional, Dict, Any


class BufferLifecycleError(Exception):
    """Base class for buffer acquisition/release violations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class BufferLeakError(BufferLifecycleError):
    """One or more allocations were never released."""

    def __init__(self, message: str, handles: Optional[list[int]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.handles = handles or []


class DoubleReleaseError(BufferLifecycleError):
    """An allocation was released more than once, or was never issued."""

    def __init__(self, message: str, handle: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.handle = handle


class BufferAccessError(BufferLifecycleError):
    """Buffer contents touched while the buffer is not held."""

    def __init__(self, message: str, handle: Optional[int] = None,
                 state: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.handle = handle
        self.state = state


class BufferSizeError(BufferLifecycleError, ValueError):
    """Buffer contents do not match the fixed buffer length."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 actual: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class BufferBoundsError(BufferLifecycleError, IndexError):
    """Index falls outside the held buffer."""

    def __init__(self, message: str, index: Optional[int] = None,
                 size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.size = size
