"""Output sink interfaces following Black Box Design principles."""
from typing import Protocol


class UI(Protocol):
    """Protocol for user-facing output: ordered, append-only lines."""

    def say(self, line: str) -> None:
        """Display one line to the user."""
        ...
