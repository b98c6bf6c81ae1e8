"""Typer CLI for inspecting registered document models."""

from __future__ import annotations

import json
from typing import Any

import typer

from docmap.domain import UnpackedField
from docmap.exceptions import RegistryError

from .deps import load_class, registry, report_registry_error

app = typer.Typer(help="docmap command-line interface")


def _type_name(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, str):
        return value
    return getattr(value, "__qualname__", None) or repr(value)


def _field_row(unpacked: UnpackedField) -> dict[str, Any]:
    return {
        "property": unpacked.class_property_name,
        "db_name": unpacked.db_property_name,
        "type": _type_name(unpacked.field_type),
        "nullable": unpacked.is_nullable,
        "default": repr(unpacked.default_value),
        "primary": unpacked.is_primary,
    }


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved registry settings."""

    settings = registry().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Document Attribute:\t" + settings.document_attribute)
    typer.echo("Strict Defaults:\t" + str(settings.strict_defaults).lower())


@app.command("inspect")
def inspect_model(
    target: str = typer.Argument(..., help="package.module:ClassName"),
    field_name: str | None = typer.Option(None, "--field", help="Print only this property's field"),
) -> None:
    """Validate a model and print its collection, primary field and fields as JSON."""

    cls = load_class(target)
    try:
        info = registry().collect_model_information(cls)
    except RegistryError as exc:
        report_registry_error(exc)
    if field_name is not None:
        unpacked = info.field_by_property(field_name)
        if unpacked is None:
            typer.echo(f"{cls.__qualname__} has no field {field_name!r}", err=True)
            raise typer.Exit(code=1)
        typer.echo(json.dumps(_field_row(unpacked), indent=2))
        return
    payload = {
        "model": cls.__qualname__,
        "collection": info.collection,
        "primary_field": info.primary_field.class_property_name,
        "fields": [_field_row(unpacked) for unpacked in info.fields],
    }
    typer.echo(json.dumps(payload, indent=2))


@app.command("fields")
def list_fields(target: str = typer.Argument(..., help="package.module:ClassName")) -> None:
    """List every resolved field of a class, inherited ones included."""

    cls = load_class(target)
    fields = registry().get_unpacked_fields(cls)
    if not fields:
        typer.echo(f"{cls.__qualname__} declares no fields")
        return
    for unpacked in fields:
        marker = "*" if unpacked.is_primary else " "
        typer.echo(f"{marker} {unpacked.class_property_name}\t{unpacked.db_property_name}\t{_type_name(unpacked.field_type)}")
