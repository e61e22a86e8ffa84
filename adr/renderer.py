"""
Template rendering for records and the table of contents.

Templates are Jinja2 source strings. Unknown fields are errors rather than
blanks (`StrictUndefined`), so a typo in an override template aborts the
command instead of producing a half-empty document.
"""
from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Mapping, Union

import jinja2

from adr.errors import TemplateError, TemplateParseError, TemplateRenderError
from adr.utils.logging import get_logger

log = get_logger(__name__)

_ENVIRONMENT = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


class OverridePolicy(str, enum.Enum):
    """What to do when a configured override template cannot be read."""

    FALLBACK = "fallback"  # use the built-in template
    STRICT = "strict"  # raise TemplateError


def compile_template(source: str, name: str = "<template>") -> jinja2.Template:
    try:
        return _ENVIRONMENT.from_string(source)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateParseError(f"{name}: line {exc.lineno}: {exc.message}") from exc


def render_template(source: str, context: Mapping[str, Any], name: str = "<template>") -> str:
    """
    Render Jinja2 `source` with `context`.

    Raises
    ------
    TemplateParseError
        The source is not valid template syntax.
    TemplateRenderError
        Rendering failed, e.g. the template references an unknown field.
    """
    template = compile_template(source, name)
    try:
        return template.render(**context)
    except jinja2.TemplateError as exc:
        raise TemplateRenderError(f"{name}: {exc}") from exc


def read_template(
    location: Union[str, Path, None],
    default: str,
    policy: OverridePolicy = OverridePolicy.FALLBACK,
) -> str:
    """
    Source of the override template at `location`, or `default`.

    An empty location always selects `default`. An unreadable location selects
    `default` under `OverridePolicy.FALLBACK` and raises under `STRICT`.
    """
    if not location:
        return default

    path = Path(location)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        if policy is OverridePolicy.STRICT:
            raise TemplateError(f"cannot read template {path}: {exc}") from exc
        log.debug("Override template unreadable, using built-in", extra={"template": str(path)})
        return default


__all__ = [
    "OverridePolicy",
    "compile_template",
    "read_template",
    "render_template",
]
