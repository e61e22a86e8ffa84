"""
Exception taxonomy for the ADR tool.

Library code raises these (chaining the underlying OSError, YAML, pydantic or
Jinja2 exception); the CLI layer turns any `AdrError` into a one-line message
on stderr and a non-zero exit status.
"""

from __future__ import annotations


class AdrError(Exception):
    """Base class for every fatal condition surfaced to the user."""


class ConfigError(AdrError):
    """The configuration file exists but cannot be read or decoded."""


class PreconditionError(AdrError):
    """A command was invoked in a state it does not accept."""


class TemplateError(AdrError):
    """A template could not be loaded, parsed or rendered."""


class TemplateParseError(TemplateError):
    """Malformed template syntax."""


class TemplateRenderError(TemplateError):
    """Template parsed but failed while rendering (e.g. unknown field)."""


class RecordStoreError(AdrError):
    """I/O failure while scanning the record directory or writing a record."""


class SidecarDecodeError(AdrError):
    """A metadata sidecar is unreadable or does not decode into a record."""


__all__ = [
    "AdrError",
    "ConfigError",
    "PreconditionError",
    "TemplateError",
    "TemplateParseError",
    "TemplateRenderError",
    "RecordStoreError",
    "SidecarDecodeError",
]
