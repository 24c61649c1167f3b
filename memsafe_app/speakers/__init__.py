"""
Speaker registry module.

One abstract speak capability implemented by exactly two variants.
"""

from .models import Cat, Dog, Speaker, SpeakerKind
from .registry import SPEAKER_TYPES, create, resolve_kind

__all__ = [
    "Cat",
    "Dog",
    "Speaker",
    "SpeakerKind",
    "SPEAKER_TYPES",
    "create",
    "resolve_kind",
]
