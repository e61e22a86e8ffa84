"""
Domain models for the ADR tool.

`Record` is the machine-facing content of a metadata sidecar; `TocEntry` is
the projection of a record listed in the generated README.md.
"""
from __future__ import annotations

import datetime as dt
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class Record(BaseModel):
    """
    One architecture decision, as stored in its YAML sidecar.
    """

    number: int = Field(0, description="Sequential record number, assigned once.")
    name: str = Field("", description="Human-readable title.")
    date: str = Field("", description="Creation date rendered with the configured format.")
    status: str = Field("", description="Free-form status label, e.g. Accepted.")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("name", "date", "status", mode="before")
    @classmethod
    def _scalar_to_text(cls, value: Any) -> Any:
        # Hand-edited sidecars may hold unquoted dates or numbers.
        if isinstance(value, (dt.date, dt.datetime)):
            return value.isoformat()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def sidecar_data(self) -> Dict[str, Any]:
        """Field mapping in sidecar key order."""
        return {
            "number": self.number,
            "name": self.name,
            "date": self.date,
            "status": self.status,
        }


class TocEntry(BaseModel):
    """A single line of the table of contents."""

    number: int
    name: str
    link: str

    model_config = {"frozen": True}


__all__ = ["Record", "TocEntry"]
