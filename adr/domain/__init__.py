"""
Domain package for the ADR tool.

Exports the record models shared by the store, the TOC builder and the CLI.
Keep this package focused on data definitions and validation concerns.
"""

from adr.domain.models import Record, TocEntry

__all__ = [
    "Record",
    "TocEntry",
]
