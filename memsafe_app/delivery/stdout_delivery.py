"""Standard output delivery mechanism."""

import json
import sys

from ..config.defaults import OutputParams
from .base import BaseDelivery, DeliveryResult, DeliveryStatus


class StdoutDelivery(BaseDelivery):
    """Writes program output lines to stdout."""

    def __init__(self, name: str = "stdout", config: OutputParams = OutputParams()):
        super().__init__(name, config)
        self.config: OutputParams = config

    def deliver(self, lines: list[str]) -> list[DeliveryResult]:
        """Deliver lines to stdout."""
        results = []

        for line in lines:
            try:
                print(self._format_line(line), file=sys.stdout, flush=True)

                self.logger.debug("Line printed to stdout", delivery_name=self.name)

                results.append(self._record(DeliveryResult(
                    status=DeliveryStatus.SUCCESS,
                    message="Printed to stdout"
                )))

            except OSError as e:
                self.logger.error(
                    "Failed to print line to stdout",
                    delivery_name=self.name,
                    error=str(e)
                )
                results.append(self._record(DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message=f"Stdout error: {str(e)}",
                    error=e
                )))

        return results

    def _format_line(self, line: str) -> str:
        """Format a line for stdout output."""
        if self.config.format == "json":
            return json.dumps({"line": line})
        return line

    def health_check(self) -> bool:
        """Check if stdout is available."""
        try:
            return sys.stdout.writable()
        except (OSError, ValueError):
            return False
