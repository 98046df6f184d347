"""Prefixed progress and warning output."""

import click


class Console:
    """Writes [INFO] lines to stdout and [WARN] lines to stderr."""

    def __init__(self, quiet: bool = False):
        self._quiet = quiet

    def info(self, message: str) -> None:
        if not self._quiet:
            click.echo(f"[INFO] {message}")

    def warn(self, message: str) -> None:
        click.echo(f"[WARN] {message}", err=True)

    def error(self, message: str) -> None:
        click.echo(f"Error: {message}", err=True)
