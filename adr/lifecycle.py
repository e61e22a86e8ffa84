"""
Record lifecycle use-cases behind the CLI commands.

Each function receives the invocation's `Settings` (or the config path, for
`init`) explicitly; nothing reads ambient configuration.

Usage:
    from adr.config import load_settings
    from adr.lifecycle import new_record, rebuild_toc

    settings = load_settings(".adr.yaml")
    new_record(settings, name="Pick a database", status="Proposed")
    rebuild_toc(settings)
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from adr.config import Settings, load_settings, write_default_config
from adr.domain.models import Record
from adr.errors import PreconditionError, RecordStoreError
from adr.renderer import OverridePolicy, read_template
from adr.store import create_record, load_records, next_number
from adr.templates import FIRST_TEMPLATE, RECORD_TEMPLATE, TOC_TEMPLATE
from adr.toc import build_toc
from adr.utils.logging import get_logger

log = get_logger(__name__)

FIRST_RECORD_NAME = "Record architecture decisions"
FIRST_RECORD_STATUS = "Accepted"


def _override_policy(settings: Settings) -> OverridePolicy:
    return OverridePolicy.STRICT if settings.strict_templates else OverridePolicy.FALLBACK


def format_date(settings: Settings, now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime(settings.date_format)


def require_config(config_path: Union[str, Path]) -> None:
    """Raise PreconditionError unless the configuration file exists."""
    if not Path(config_path).exists():
        raise PreconditionError(f"{config_path} missing, run init first")


def init_project(
    config_path: Union[str, Path],
    now: Optional[datetime] = None,
    notify: Optional[Callable[[str], None]] = None,
) -> Path:
    """
    Write the default configuration, create the record directory and record 1.

    Refuses to touch anything when `config_path` already exists.

    Returns
    -------
    Path
        Markdown file of the bootstrap record.
    """
    config_path = Path(config_path)
    if config_path.exists():
        raise PreconditionError("config already exists, project initialised")

    if notify is not None:
        notify(f"creating config at {config_path}")
    write_default_config(config_path)
    settings = load_settings(config_path, notify=notify)

    directory = settings.directory
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RecordStoreError(f"cannot create directory {directory}: {exc}") from exc

    record = Record(
        number=1,
        name=FIRST_RECORD_NAME,
        date=format_date(settings, now),
        status=FIRST_RECORD_STATUS,
    )
    log.info("Project initialised", extra={"adr_directory": str(directory)})
    return create_record(record, FIRST_TEMPLATE, directory)


def new_record(
    settings: Settings,
    name: str,
    status: str,
    now: Optional[datetime] = None,
) -> Path:
    """
    Create the next record in the configured directory.

    Returns
    -------
    Path
        Markdown file of the new record.
    """
    directory = settings.directory
    record = Record(
        number=next_number(directory),
        name=name,
        date=format_date(settings, now),
        status=status,
    )
    template = read_template(settings.adr_template, RECORD_TEMPLATE, _override_policy(settings))
    return create_record(record, template, directory)


def rebuild_toc(settings: Settings) -> Path:
    """Regenerate README.md from every sidecar in the configured directory."""
    template = read_template(settings.toc_template, TOC_TEMPLATE, _override_policy(settings))
    return build_toc(settings.directory, template)


def list_records(settings: Settings) -> List[Record]:
    return load_records(settings.directory)


__all__ = [
    "FIRST_RECORD_NAME",
    "FIRST_RECORD_STATUS",
    "format_date",
    "init_project",
    "list_records",
    "new_record",
    "rebuild_toc",
    "require_config",
]
