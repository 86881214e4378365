"""Split a rule body into ordered declarations."""

from __future__ import annotations

from ns_tailwind.model.declaration import Declaration

__all__ = ["parse_declarations"]


def parse_declarations(body: str) -> list[Declaration]:
    """Parse ``prop: value; prop: value`` text into declarations.

    Segments are split on every ``;`` and then on the first ``:``.  Segments
    without a colon, or with an empty property or value, are skipped.
    Semicolons inside parentheses are not special-cased; the generator never
    emits them.
    """
    declarations: list[Declaration] = []
    for segment in body.split(";"):
        prop, sep, value = segment.partition(":")
        if not sep:
            continue
        prop = prop.strip()
        value = value.strip()
        if prop and value:
            declarations.append(Declaration(property=prop, value=value))
    return declarations
