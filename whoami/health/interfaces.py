"""Typed interfaces for health-state responsibilities."""

from typing import Protocol


class HealthStatePort(Protocol):
    """Port definition for reading and replacing the reported health status code."""

    def health_get_status(self) -> int:
        """Return the currently reported status code.

        Returns:
            int: Status code last stored, or the initial default.

        Raises:
            RuntimeError: Raised if the state cannot be read.
        """

    def health_set_status(self, status_code: int) -> None:
        """Replace the reported status code.

        Args:
            status_code: New status code. Any integer is accepted.

        Returns:
            None: Subsequent reads observe the new value.

        Raises:
            RuntimeError: Raised if the state cannot be written.
        """
