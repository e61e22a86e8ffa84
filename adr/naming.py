"""
Filename derivation for record pairs.

Both files of a record share one base name: the zero-padded number, a hyphen,
and a slug built from the title. The function is pure, so the TOC builder can
recompute links from sidecar contents alone.
"""
from __future__ import annotations

import re

from adr.domain.models import Record

MARKDOWN_SUFFIX = ".md"
SIDECAR_SUFFIX = ".yaml"

# ASCII word characters only; everything else becomes a separator.
_NON_WORD = re.compile(r"[^A-Za-z0-9_]")
_NUMBER_PREFIX = re.compile(r"[+-]?[0-9]+")


def slugify(name: str) -> str:
    """
    Lower-case, hyphen-joined words of `name`.

    A name without any word characters yields an empty slug.
    """
    return "-".join(token.lower() for token in _NON_WORD.sub(" ", name).split())


def record_filename(number: int, name: str) -> str:
    """
    Base filename (no extension) shared by a record's markdown and sidecar.

    >>> record_filename(1, "Use Postgres, not MySQL!")
    '0001-use-postgres-not-mysql'
    """
    return f"{number:04d}-{slugify(name)}"


def filename_for(record: Record) -> str:
    return record_filename(record.number, record.name)


def record_number_from_filename(filename: str) -> int:
    """
    Number encoded before the first hyphen of `filename`; 0 when absent
    or not an integer.
    """
    prefix = filename.split("-", 1)[0]
    if not _NUMBER_PREFIX.fullmatch(prefix):
        return 0
    return int(prefix)


__all__ = [
    "MARKDOWN_SUFFIX",
    "SIDECAR_SUFFIX",
    "filename_for",
    "record_filename",
    "record_number_from_filename",
    "slugify",
]
