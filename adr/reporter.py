from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from adr.domain.models import Record
from adr.naming import MARKDOWN_SUFFIX, filename_for


def print_records(records: Sequence[Record], console: Optional[Console] = None) -> None:
    """
    Render records as a rich table, in the order given (directory order,
    same as README.md).
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No records found.[/yellow]")
        return

    table = Table(
        title="Architecture Decision Records",
        box=box.ROUNDED,
        caption=f"{len(records)} record(s)",
    )

    table.add_column("#", justify="right", style="magenta", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Date", style="green", no_wrap=True)
    table.add_column("Status", style="bold")
    table.add_column("File", style="dim")

    for record in records:
        table.add_row(
            f"{record.number:04d}",
            record.name,
            record.date,
            record.status,
            filename_for(record) + MARKDOWN_SUFFIX,
        )

    console.print(table)


__all__ = ["print_records"]
