"""
Record storage: numbering, creation and sidecar decoding.

A record lives on disk as a pair sharing one base filename:

- `<base>.md`   rendered from a template, never read back;
- `<base>.yaml` the sidecar holding number, name, date and status.

Creation writes the markdown file first and the sidecar second. There is no
rollback: if the sidecar write fails the markdown file stays behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Union

import yaml
from pydantic import ValidationError

from adr.domain.models import Record
from adr.errors import RecordStoreError, SidecarDecodeError
from adr.naming import (
    MARKDOWN_SUFFIX,
    SIDECAR_SUFFIX,
    filename_for,
    record_number_from_filename,
)
from adr.renderer import render_template
from adr.utils.logging import get_logger

log = get_logger(__name__)


def _sorted_names(directory: Path) -> List[str]:
    try:
        return sorted(entry.name for entry in directory.iterdir())
    except OSError as exc:
        raise RecordStoreError(f"cannot read directory {directory}: {exc}") from exc


def next_number(directory: Union[str, Path]) -> int:
    """
    One past the highest number prefixing a markdown file in `directory`.

    Gaps are not reused: with 0001 and 0003 present the result is 4.
    Markdown files without a numeric prefix (README.md) count as 0.
    """
    highest = 0
    for name in _sorted_names(Path(directory)):
        if name.endswith(MARKDOWN_SUFFIX):
            highest = max(highest, record_number_from_filename(name))
    return highest + 1


def encode_record(record: Record) -> str:
    try:
        return yaml.safe_dump(
            record.sidecar_data(), sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    except yaml.YAMLError as exc:
        raise RecordStoreError(f"cannot serialize record {record.number}: {exc}") from exc


def create_record(record: Record, template: str, directory: Union[str, Path]) -> Path:
    """
    Render `record` with `template` and write its markdown file and sidecar
    into `directory`, replacing any files with the same base name.

    Returns
    -------
    Path
        The markdown file written.
    """
    base = Path(directory) / filename_for(record)
    markdown_path = base.with_name(base.name + MARKDOWN_SUFFIX)
    sidecar_path = base.with_name(base.name + SIDECAR_SUFFIX)

    context = dict(record.sidecar_data(), record=record)
    content = render_template(template, context, name=markdown_path.name)

    try:
        markdown_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RecordStoreError(f"cannot write {markdown_path}: {exc}") from exc

    document = encode_record(record)
    try:
        sidecar_path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise RecordStoreError(f"cannot write {sidecar_path}: {exc}") from exc

    log.debug(
        "Record written",
        extra={"number": record.number, "markdown": str(markdown_path), "sidecar": str(sidecar_path)},
    )
    return markdown_path


def read_record(path: Union[str, Path]) -> Record:
    """Decode a single sidecar file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SidecarDecodeError(f"cannot read {path}: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SidecarDecodeError(f"malformed sidecar {path}: {exc}") from exc
    # Empty file or absent keys decode to zero values.
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SidecarDecodeError(f"malformed sidecar {path}: expected a mapping")

    try:
        return Record.model_validate(data)
    except ValidationError as exc:
        raise SidecarDecodeError(f"invalid sidecar {path}: {exc}") from exc


def iter_records(directory: Union[str, Path]) -> Iterator[Record]:
    """
    Decode every sidecar in `directory`, in lexical filename order.

    The first unreadable or undecodable sidecar raises; nothing is skipped.
    """
    directory = Path(directory)
    for name in _sorted_names(directory):
        if name.endswith(SIDECAR_SUFFIX):
            record = read_record(directory / name)
            log.debug("Sidecar decoded", extra={"sidecar": name, "number": record.number})
            yield record


def load_records(directory: Union[str, Path]) -> List[Record]:
    return list(iter_records(directory))


__all__ = [
    "create_record",
    "encode_record",
    "iter_records",
    "load_records",
    "next_number",
    "read_record",
]
