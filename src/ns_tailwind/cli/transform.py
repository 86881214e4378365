"""CLI command: ns-tailwind transform -- rewrite one or more stylesheets."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TextIO

import click

from ns_tailwind.config import TransformOptions
from ns_tailwind.transforms import safe_transform

logger = logging.getLogger(__name__)


@click.command()
@click.argument("files", nargs=-1, type=click.File("r", encoding="utf-8"))
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    show_default=True,
    help="Where to write the transformed CSS.",
)
@click.option("--debug", is_flag=True, default=False, help="Log conversions and dropped at-rules.")
def transform(files: tuple[TextIO, ...], output: TextIO, debug: bool) -> None:
    """Transform Tailwind CSS FILES (default: stdin) for NativeScript.

    A file that fails to transform is written through unchanged and an
    error is printed; the command still exits 0.
    """
    options = TransformOptions.from_env()
    if debug:
        options = replace(options, debug=True)
    if options.debug:
        logging.basicConfig(level=logging.INFO, format="[ns-tailwind] %(message)s")

    if not files:
        files = (click.open_file("-"),)

    results: list[str] = []
    for handle in files:
        name = getattr(handle, "name", "<stdin>")
        source = handle.read()
        transformed = safe_transform(source, options)
        if transformed is None:
            click.echo(f"Error transforming {name}; passing it through unchanged", err=True)
            transformed = source
        elif options.debug:
            logger.info("Transformed: %s", name)
        results.append(transformed)

    text = "\n\n".join(r for r in results if r)
    if text:
        output.write(text + "\n")
