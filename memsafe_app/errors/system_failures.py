"""
System-level error classifications for the demo program.

These cover configuration, speaker construction and output delivery
failures surfaced by the engine.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for program-level failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class SpeakerError(SystemFailureError):
    """Base class for speaker registry errors."""


class UnknownSpeakerKindError(SpeakerError, ValueError):
    """Requested speaker kind is not part of the closed variant set."""

    def __init__(self, message: str, kind: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind


class ConfigurationError(SystemFailureError):
    """Loaded configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class DeliveryError(SystemFailureError):
    """Output delivery failures."""

    def __init__(self, message: str, delivery_method: Optional[str] = None,
                 line: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.delivery_method = delivery_method
        self.line = line
