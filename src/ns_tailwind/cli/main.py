"""ns-tailwind CLI entry point: Click group with subcommands."""

import click

from ns_tailwind import __version__


@click.group()
@click.version_option(version=__version__, prog_name="ns-tailwind")
def cli() -> None:
    """ns-tailwind - rewrite Tailwind CSS output for NativeScript."""


# Import and register subcommands
from ns_tailwind.cli.transform import transform  # noqa: E402
from ns_tailwind.cli.check import check  # noqa: E402

cli.add_command(transform)
cli.add_command(check)
