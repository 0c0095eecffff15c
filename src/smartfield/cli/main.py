"""smartfield CLI entry point."""

import click

from smartfield.config import Settings


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """smartfield: form field validation engine CLI."""
    settings = Settings.from_env()
    settings.configure_logging()
    ctx.obj = settings


# Register subcommands
from smartfield.cli.fields_cmd import fields  # noqa: E402
from smartfield.cli.field_cmd import check, simulate  # noqa: E402

cli.add_command(fields)
cli.add_command(check)
cli.add_command(simulate)
