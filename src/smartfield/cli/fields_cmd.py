"""Field catalog CLI commands: list and validate."""

import click

from smartfield.catalog import FieldCatalog, FieldCatalogError, validate_catalog_dir
from smartfield.config import Settings


@click.group()
def fields():
    """Field catalog commands."""
    pass


@fields.command("list")
@click.pass_obj
def list_cmd(settings: Settings):
    """List catalog fields and their rule counts."""
    catalog = FieldCatalog(settings.catalog_path)
    try:
        catalog.load_all()
    except FieldCatalogError as e:
        click.echo(click.style(f"Failed to load field catalog: {e}", fg="red"), err=True)
        raise SystemExit(1)

    click.echo(f"{len(catalog.fields)} field(s) in {settings.catalog_path}:")
    for name in catalog.list_fields():
        definition = catalog.get(name)
        click.echo(
            f"  {name} ({definition.display_name}, {len(definition.rules)} rules, "
            f"type: {definition.type.value})"
        )


@fields.command("validate")
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors.",
)
@click.pass_obj
def validate_cmd(settings: Settings, strict: bool):
    """Validate field definition YAML files against the JSON Schema."""
    issues = validate_catalog_dir(settings.catalog_path, strict=strict)

    errors = [i for i in issues if i.severity == "error"]
    warnings = [i for i in issues if i.severity == "warning"]

    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if warnings:
        click.echo(click.style(f"{len(warnings)} warning(s) found.", fg="yellow"))

    click.echo(click.style("All field definitions are valid.", fg="green", bold=True))
