"""
Built-in Jinja2 templates.

`FIRST_TEMPLATE` renders record 1 created by `init`, `RECORD_TEMPLATE` every
record created by `new`, and `TOC_TEMPLATE` the README.md index. Record
templates receive `number`, `name`, `date`, `status` (and `record`); the TOC
template receives `entries`.
"""

FIRST_TEMPLATE = """\
# {{ number }}. {{ name }}

Date: {{ date }}

## Status

{{ status }}

## Context

We need to record the architectural decisions made on this project.

## Decision

We will use Architecture Decision Records, as described by Michael Nygard in
[Documenting Architecture Decisions](http://thinkrelevance.com/blog/2011/11/15/documenting-architecture-decisions).

Each record is a markdown file in this directory, paired with a YAML file
holding its number, name, date and status. Run `adr new` to add a record and
`adr toc` to regenerate the index in README.md.

## Consequences

See Michael Nygard's article, linked above. For a lightweight ADR toolset,
records are numbered sequentially and never renumbered; superseded decisions
stay in place with their status updated.
"""

RECORD_TEMPLATE = """\
# {{ number }}. {{ name }}

Date: {{ date }}

## Status

{{ status }}

## Context

The issue motivating this decision, and any context that influences or
constrains the decision.

## Decision

The change that we're proposing or have agreed to implement.

## Consequences

What becomes easier or more difficult to do and any risks introduced by the
change that will need to be mitigated.
"""

TOC_TEMPLATE = """\
# Architecture Decision Records

{% for entry in entries -%}
* [{{ entry.number }}. {{ entry.name }}]({{ entry.link }})
{% endfor -%}
"""

__all__ = ["FIRST_TEMPLATE", "RECORD_TEMPLATE", "TOC_TEMPLATE"]
