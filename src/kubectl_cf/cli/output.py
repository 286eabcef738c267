"""Output utilities for CLI commands with clear intent.

user_output() is for humans and goes to stderr. machine_output() is for data
that shells consume (export statements, JSON) and goes to stdout, so
`eval "$(kubectl-cf --export dev)"` only ever sees the data.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users (stderr)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output structured data for machine or shell consumption (stdout)."""
    click.echo(message, nl=nl)
