"""Single-field CLI commands: check a value, replay interaction events."""

from dataclasses import replace

import click

from smartfield.catalog import FieldCatalog, FieldCatalogError, UnknownFieldError
from smartfield.config import Settings
from smartfield.controller import FieldValidationController
from smartfield.validation import FieldValidationConfig, ValidationMode, ValidationResult, validate_value

_MODE_CHOICE = click.Choice([m.value for m in ValidationMode])


def _load_config(settings: Settings, field_name: str, mode: str) -> FieldValidationConfig:
    catalog = FieldCatalog(settings.catalog_path)
    try:
        catalog.load_all()
        config = catalog.build_config(field_name, ValidationMode(mode))
    except (FieldCatalogError, UnknownFieldError) as e:
        click.echo(click.style(str(e), fg="red"), err=True)
        raise SystemExit(1)

    if settings.autofill_min_change is not None:
        autofill = replace(config.autofill, min_change_threshold=settings.autofill_min_change)
        config = replace(config, autofill=autofill)
    return config


def _format_errors(errors) -> str:
    return "; ".join(errors) if errors else "-"


@click.command()
@click.argument("field_name")
@click.argument("value")
@click.option("--mode", type=_MODE_CHOICE, default="optional", show_default=True)
@click.pass_obj
def check(settings: Settings, field_name: str, value: str, mode: str):
    """Evaluate VALUE against the rules of FIELD_NAME."""
    config = _load_config(settings, field_name, mode)
    result = validate_value(value, config)

    if result.is_valid:
        click.echo(click.style(f"✓ {field_name}: valid", fg="green"))
        return

    click.echo(click.style(f"✗ {field_name}: {len(result.errors)} error(s)", fg="red"))
    for error in result.errors:
        click.echo(f"  - {error}")
    raise SystemExit(1)


@click.command()
@click.argument("field_name")
@click.argument("events", nargs=-1, required=True)
@click.option("--mode", type=_MODE_CHOICE, default="optional", show_default=True)
@click.option("--initial", default="", help="Value the field starts with.")
@click.pass_obj
def simulate(settings: Settings, field_name: str, events: tuple[str, ...], mode: str, initial: str):
    """Replay interaction EVENTS on FIELD_NAME and show displayed errors.

    Events are "focus", "blur", "change:<value>", "disable" and "enable".
    """
    config = _load_config(settings, field_name, mode)
    reported: list[ValidationResult] = []
    controller = FieldValidationController(
        config, initial, on_validation_change=reported.append
    )
    click.echo(f"mount            valid={controller.is_valid!s:<5} shown: -")

    for event in events:
        kind, _, argument = event.partition(":")
        if kind == "focus":
            controller.on_focus()
        elif kind == "blur":
            controller.on_blur()
        elif kind == "change":
            controller.on_change(argument)
        elif kind in ("disable", "enable"):
            controller.set_enabled(kind == "enable")
        else:
            raise click.BadParameter(f"Unknown event '{event}'", param_hint="EVENTS")

        flags = " touched" if controller.touched else ""
        flags += " autofilled" if controller.autofilled else ""
        click.echo(
            f"{event:<16} valid={controller.is_valid!s:<5} "
            f"shown: {_format_errors(controller.display_errors)}{flags}"
        )

    click.echo(f"\n{len(reported)} validation callback(s)")
