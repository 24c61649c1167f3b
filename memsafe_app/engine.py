"""
Demo program coordinator.

Loads configuration, runs the vector and fixed-buffer summations, voices
the speaker roster and hands the resulting lines to stdout delivery.
"""

import sys
from typing import Any, Optional

import structlog

from .aggregation import BufferAllocator, sum_fixed_buffer, sum_of_elements
from .config.defaults import OutputParams, get_default_config
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .delivery import DeliveryResult, DeliveryStatus, StdoutDelivery
from .errors import (
    BufferLifecycleError,
    ConfigurationError,
    DeliveryError,
    SystemFailureError,
)
from .logging.config import configure_logging
from .speakers import Speaker, create

VECTOR_SUM_TEMPLATE = "The sum of the elements in the vector is: {total}"
ARRAY_SUM_TEMPLATE = "The sum of the elements in the array is: {total}"

logger = structlog.get_logger(__name__)


class DemoEngine:
    """
    Coordinator for the demo program.

    Pipeline:
    Config → Vector sum → Fixed buffer sum → Speakers → Stdout
    """

    def __init__(
        self,
        config_dir: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> None:
        """Load and validate configuration; raises ConfigurationError when invalid."""
        self.config_loader = ConfigLoader.create(config_dir)
        self.config = self.config_loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(self.config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            raise ConfigurationError("Configuration validation failed", errors=error_msgs)

        self.allocator = BufferAllocator()
        self.delivery = StdoutDelivery(
            config=OutputParams(format=self.config["output"]["format"])
        )

    def vector_sum(self) -> int:
        return sum_of_elements(list(self.config["aggregation"]["vector_values"]))

    def array_sum(self) -> int:
        total = sum_fixed_buffer(self.config["aggregation"]["array_values"], self.allocator)
        self.allocator.assert_no_leaks()
        return total

    def speakers(self) -> list[Speaker]:
        return [create(entry["kind"], entry["name"]) for entry in self.config["speakers"]["roster"]]

    def build_lines(self) -> list[str]:
        """Produce every output line, in program order."""
        lines = [
            VECTOR_SUM_TEMPLATE.format(total=self.vector_sum()),
            ARRAY_SUM_TEMPLATE.format(total=self.array_sum()),
        ]
        lines.extend(speaker.utterance() for speaker in self.speakers())
        return lines

    def run(self) -> list[DeliveryResult]:
        """Build the output lines and deliver them."""
        lines = self.build_lines()
        results = self.delivery.deliver(lines)

        failed = [line for line, result in zip(lines, results) if result.status != DeliveryStatus.SUCCESS]
        if failed:
            raise DeliveryError(
                f"{len(failed)} of {len(lines)} line(s) not delivered",
                delivery_method=self.delivery.name,
                line=failed[0]
            )

        logger.info(
            "Demo run complete",
            lines=len(lines),
            buffers_acquired=self.allocator.acquired,
            buffers_released=self.allocator.released,
            delivery_stats=self.delivery.get_stats()
        )
        return results


def main() -> int:
    """Program entry point; returns the process exit code."""
    defaults = get_default_config()
    configure_logging(level=defaults.logging.level, format_json=defaults.logging.format_json)

    try:
        engine = DemoEngine()
    except ConfigurationError as e:
        logger.error("Invalid configuration", errors=e.errors)
        return 1

    logging_config = engine.config["logging"]
    configure_logging(level=logging_config["level"], format_json=logging_config["format_json"])

    try:
        engine.run()
    except (BufferLifecycleError, SystemFailureError) as e:
        logger.error("Demo run failed", error=str(e), context=e.context)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
