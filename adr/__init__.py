"""
adr - architecture decision records from templates.

Scaffolds numbered markdown records with YAML sidecar metadata in a single
directory and regenerates a README.md index from the sidecars:

- `adr init`  writes `.adr.yaml`, the record directory and record 1
- `adr new`   asks for a title and status and creates the next record
- `adr toc`   rebuilds README.md from every sidecar
- `adr list`  prints the records as a table
"""

from __future__ import annotations

__version__ = "0.1.0"
__commit__ = "none"
__build_date__ = "unknown"
__built_by__ = "unknown"
__license__ = "MIT"

# Public API exports
from adr.config import Settings, load_settings
from adr.domain.models import Record, TocEntry
from adr.lifecycle import init_project, list_records, new_record, rebuild_toc
from adr.naming import record_filename
from adr.renderer import OverridePolicy, read_template, render_template
from adr.store import create_record, load_records, next_number
from adr.toc import build_toc
from adr.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "load_settings",
    # Domain
    "Record",
    "TocEntry",
    # Naming / rendering
    "record_filename",
    "OverridePolicy",
    "read_template",
    "render_template",
    # Store / index
    "create_record",
    "load_records",
    "next_number",
    "build_toc",
    # Commands
    "init_project",
    "list_records",
    "new_record",
    "rebuild_toc",
    # Logging
    "configure_logging",
    "get_logger",
]
