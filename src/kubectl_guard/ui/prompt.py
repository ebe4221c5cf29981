"""Terminal messages and the yes/no confirmation prompt."""

from __future__ import annotations

import click


def print_success(message: str, *, err: bool = False) -> None:
    click.secho(f"✓ {message}", fg="green", err=err)


def print_warning(message: str, *, err: bool = False) -> None:
    click.secho(f"⚠️  {message}", fg="yellow", err=err)


def print_info(message: str, *, err: bool = False) -> None:
    click.echo(message, err=err)


def _accepts(response: str) -> bool:
    return response.strip().lower() in {"y", "yes"}


def confirm(message: str) -> bool:
    """Ask for explicit confirmation; anything but y/yes declines.

    Written to stderr so piped kubectl output stays clean.
    """
    print_warning(message, err=True)
    try:
        response = click.prompt(
            "Confirm? [y/N]",
            default="",
            show_default=False,
            prompt_suffix=": ",
            err=True,
        )
    except click.Abort:
        click.echo(err=True)
        return False
    return _accepts(response)
