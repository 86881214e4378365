"""CLI command: ns-tailwind check -- is a declaration supported by NativeScript?"""

from __future__ import annotations

import sys

import click

from ns_tailwind.config import TransformOptions
from ns_tailwind.model.declaration import Declaration, Drop
from ns_tailwind.support import CUSTOM_PROPERTY_PREFIX, is_bookkeeping_variable, is_supported
from ns_tailwind.transforms import transform_declaration


@click.command()
@click.argument("prop")
@click.argument("value", required=False, default="")
def check(prop: str, value: str) -> None:
    """Report what happens to the declaration PROP: VALUE.

    With no VALUE only the property name is checked.  Exits with code 0 if
    the declaration survives, 1 if it is dropped.
    """
    if not value:
        custom = prop.startswith(CUSTOM_PROPERTY_PREFIX) and not is_bookkeeping_variable(prop)
        if custom or is_supported(prop):
            click.echo(f"supported: {prop}")
            sys.exit(0)
        click.echo(f"unsupported: {prop}")
        sys.exit(1)

    result = transform_declaration(Declaration(property=prop, value=value), TransformOptions())
    if isinstance(result, Drop):
        click.echo(f"dropped: {prop}: {value}")
        sys.exit(1)
    for line in result.render():
        click.echo(line)
