"""Remote execution interfaces following Black Box Design principles."""
from typing import Protocol

from errandctl.modules.api.models import ErrandResult


class DirectorError(Exception):
    """Raised when the director cannot run an errand or report its result."""


class ExecuteErrand(Protocol):
    """Protocol for remote errand execution - allows swappable implementations."""

    def run_errand(self, name: str, keep_alive: bool) -> ErrandResult:
        """
        Run an errand and wait for it to finish.

        Args:
            name: Errand name
            keep_alive: Keep errand instances running afterwards

        Returns:
            Errand result; a non-zero exit code is not an error here

        Raises:
            DirectorError: on transport or RPC failure
        """
        ...
