"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..aggregation.buffer import FIXED_BUFFER_SIZE, STORAGE_MAX, STORAGE_MIN
from ..speakers.models import SpeakerKind

OUTPUT_FORMATS = ("plain", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int_sequence(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and all(isinstance(item, int) and not isinstance(item, bool) for item in value)
    )


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_aggregation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate aggregation parameters."""
        errors = []

        if "vector_values" in params:
            value = params["vector_values"]
            if not _is_int_sequence(value):
                errors.append(ValidationError(
                    field="vector_values",
                    message="Must be a list of integers",
                    value=value
                ))

        if "array_values" in params:
            value = params["array_values"]
            if not _is_int_sequence(value):
                errors.append(ValidationError(
                    field="array_values",
                    message="Must be a list of integers",
                    value=value
                ))
            elif len(value) != FIXED_BUFFER_SIZE:
                errors.append(ValidationError(
                    field="array_values",
                    message=f"Must hold exactly {FIXED_BUFFER_SIZE} integers",
                    value=value
                ))
            elif any(item < STORAGE_MIN or item > STORAGE_MAX for item in value):
                errors.append(ValidationError(
                    field="array_values",
                    message=f"Integers must lie in [{STORAGE_MIN}, {STORAGE_MAX}]",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_speaker_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate the speaker roster."""
        errors = []

        roster = params.get("roster", [])
        if not isinstance(roster, (list, tuple)):
            return [ValidationError(field="roster", message="Must be a list", value=roster)]

        known_kinds = {kind.value for kind in SpeakerKind}
        for index, entry in enumerate(roster):
            if not isinstance(entry, dict):
                errors.append(ValidationError(
                    field=f"roster[{index}]",
                    message="Must be a mapping with kind and name",
                    value=entry
                ))
                continue

            kind = entry.get("kind")
            if not isinstance(kind, str) or kind.strip().lower() not in known_kinds:
                errors.append(ValidationError(
                    field=f"roster[{index}].kind",
                    message=f"Must be one of {sorted(known_kinds)}",
                    value=kind
                ))

            name = entry.get("name")
            if not isinstance(name, str) or not name:
                errors.append(ValidationError(
                    field=f"roster[{index}].name",
                    message="Must be a non-empty string",
                    value=name
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "format" in params and params["format"] not in OUTPUT_FORMATS:
            errors.append(ValidationError(
                field="format",
                message=f"Must be one of {list(OUTPUT_FORMATS)}",
                value=params["format"]
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {list(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a merged configuration, prefixing fields with their section."""
        section_validators = {
            "aggregation": cls.validate_aggregation_params,
            "speakers": cls.validate_speaker_params,
            "output": cls.validate_output_params,
            "logging": cls.validate_logging_params,
        }

        errors = []
        for section, validator in section_validators.items():
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=params))
                continue
            for error in validator(params):
                errors.append(ValidationError(
                    field=f"{section}.{error.field}",
                    message=error.message,
                    value=error.value
                ))

        return errors
