"""
Table-of-contents generation.

Every sidecar in the record directory becomes one entry of README.md. Links
are recomputed from each sidecar's number and name rather than taken from
the markdown files on disk, and entries keep lexical filename order.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from adr.domain.models import Record, TocEntry
from adr.errors import RecordStoreError
from adr.naming import MARKDOWN_SUFFIX, filename_for
from adr.renderer import render_template
from adr.store import iter_records
from adr.utils.logging import get_logger

log = get_logger(__name__)

TOC_FILENAME = "README.md"


def toc_entry(record: Record) -> TocEntry:
    return TocEntry(
        number=record.number,
        name=record.name,
        link=filename_for(record) + MARKDOWN_SUFFIX,
    )


def collect_entries(directory: Union[str, Path]) -> List[TocEntry]:
    return [toc_entry(record) for record in iter_records(directory)]


def build_toc(directory: Union[str, Path], template: str) -> Path:
    """
    Render `template` over all entries and overwrite `<directory>/README.md`.

    Returns
    -------
    Path
        The index file written.
    """
    directory = Path(directory)
    entries = collect_entries(directory)
    content = render_template(template, {"entries": entries}, name=TOC_FILENAME)

    path = directory / TOC_FILENAME
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RecordStoreError(f"cannot write {path}: {exc}") from exc

    log.debug("TOC written", extra={"path": str(path), "entries": len(entries)})
    return path


__all__ = ["TOC_FILENAME", "build_toc", "collect_entries", "toc_entry"]
