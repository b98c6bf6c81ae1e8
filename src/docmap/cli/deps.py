"""Shared CLI dependency helpers."""

from __future__ import annotations

from importlib import import_module
from typing import NoReturn

import typer

from docmap.exceptions import RegistryError
from docmap.registry import FieldRegistry, get_registry


def registry() -> FieldRegistry:
    """Return the registry CLI commands operate on."""

    return get_registry()


def report_registry_error(exc: RegistryError) -> NoReturn:
    """Print a registry error and exit with status 1."""

    typer.echo(f"{type(exc).__name__}: {exc}", err=True)
    raise typer.Exit(code=1) from exc


def load_class(target: str) -> type:
    """Import ``package.module:ClassName`` and return the class."""

    module_name, _, qualname = target.partition(":")
    if not module_name or not qualname:
        raise typer.BadParameter("target must look like 'package.module:ClassName'")
    try:
        obj: object = import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"cannot import module {module_name!r}: {exc}") from exc
    except RegistryError as exc:
        # declaration errors surface while the module body runs
        report_registry_error(exc)
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise typer.BadParameter(f"{module_name!r} has no attribute {qualname!r}") from exc
    if not isinstance(obj, type):
        raise typer.BadParameter(f"{target} is not a class")
    return obj
