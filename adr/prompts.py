"""
Interactive prompts for the `new` command.

Invalid answers are reported and asked again; only an aborted prompt
(Ctrl-C / EOF) ends the command.
"""

from __future__ import annotations

from typing import Optional, Sequence

import typer

STATUSES = ("Accepted", "Proposed", "Rejected", "Superseeded")

TITLE_MIN_EXCLUSIVE = 3
TITLE_MAX_EXCLUSIVE = 64


def validate_title(title: str) -> Optional[str]:
    """Error message for an out-of-bounds title, or None when acceptable."""
    if len(title) >= TITLE_MAX_EXCLUSIVE:
        return f"Title must be shorter than {TITLE_MAX_EXCLUSIVE} characters"
    if len(title) <= TITLE_MIN_EXCLUSIVE:
        return f"Title must be longer than {TITLE_MIN_EXCLUSIVE} characters"
    return None


def match_status(answer: str, choices: Sequence[str] = STATUSES) -> Optional[str]:
    """Resolve a 1-based index or a case-insensitive label to a choice."""
    answer = answer.strip()
    if answer.isdigit():
        index = int(answer)
        if 1 <= index <= len(choices):
            return choices[index - 1]
        return None
    for choice in choices:
        if choice.lower() == answer.lower():
            return choice
    return None


def ask_title() -> str:
    while True:
        title = typer.prompt("Name")
        error = validate_title(title)
        if error is None:
            return title
        typer.secho(error, fg=typer.colors.RED, err=True)


def ask_status(choices: Sequence[str] = STATUSES) -> str:
    for index, choice in enumerate(choices, start=1):
        typer.echo(f"  {index}) {choice}")
    while True:
        status = match_status(typer.prompt("Status"), choices)
        if status is not None:
            return status
        typer.secho(f"Choose one of: {', '.join(choices)}", fg=typer.colors.RED, err=True)


__all__ = [
    "STATUSES",
    "ask_status",
    "ask_title",
    "match_status",
    "validate_title",
]
