"""Terminal implementation of the UI sink."""

import click


class ConsoleUI:
    """Writes lines to the terminal."""

    def say(self, line: str) -> None:
        click.echo(line)

    def error(self, line: str) -> None:
        """Display an error line on stderr."""
        click.echo(line, err=True)
