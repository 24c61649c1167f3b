"""Factory for the closed speaker variant set."""

from typing import Union

import structlog

from ..errors import UnknownSpeakerKindError
from .models import Cat, Dog, Speaker, SpeakerKind

logger = structlog.get_logger(__name__)

SPEAKER_TYPES: dict[SpeakerKind, type[Speaker]] = {
    SpeakerKind.DOG: Dog,
    SpeakerKind.CAT: Cat,
}


def resolve_kind(kind: Union[SpeakerKind, str]) -> SpeakerKind:
    """Map a SpeakerKind or its case-insensitive string value to a SpeakerKind."""
    if isinstance(kind, SpeakerKind):
        return kind

    try:
        return SpeakerKind(str(kind).strip().lower())
    except ValueError:
        raise UnknownSpeakerKindError(
            f"Unknown speaker kind: {kind!r}",
            kind=str(kind),
            context={"known_kinds": [k.value for k in SpeakerKind]}
        ) from None


def create(kind: Union[SpeakerKind, str], name: str) -> Speaker:
    """
    Build a speaker of the given kind.

    Args:
        kind: Variant tag, as SpeakerKind or its string value
        name: Name the speaker uses when it speaks

    Returns:
        Dog or Cat instance

    Raises:
        UnknownSpeakerKindError: If kind is outside the variant set
    """
    speaker_kind = resolve_kind(kind)
    speaker = SPEAKER_TYPES[speaker_kind](name)

    logger.debug("Speaker created", kind=speaker_kind.value, name=name)
    return speaker
