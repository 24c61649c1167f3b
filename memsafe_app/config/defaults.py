"""Default configuration parameters for the demo program."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AggregationParams:
    """Inputs for the two summation demos."""
    vector_values: tuple[int, ...] = (1, 2, 3, 4, 5)    # Resizable sequence
    array_values: tuple[int, ...] = (1, 2, 3, 4, 5)     # Fixed buffer, exactly 5


@dataclass(frozen=True)
class SpeakerEntry:
    """One roster slot."""
    kind: str
    name: str


@dataclass(frozen=True)
class SpeakerParams:
    """Speakers voiced by the program, in order."""
    roster: tuple[SpeakerEntry, ...] = field(default_factory=lambda: (
        SpeakerEntry(kind="dog", name="Buddy"),
        SpeakerEntry(kind="cat", name="Whiskers"),
    ))


@dataclass(frozen=True)
class OutputParams:
    """Program output parameters."""
    format: str = "plain"  # plain, json


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostic logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    aggregation: AggregationParams
    speakers: SpeakerParams
    output: OutputParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        aggregation=AggregationParams(),
        speakers=SpeakerParams(),
        output=OutputParams(),
        logging=LoggingParams(),
    )
