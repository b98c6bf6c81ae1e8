"""Model declaration errors raised by the registry."""

from __future__ import annotations

from typing import Any

from docmap.domain import FieldDescriptor, UnpackedField

AnyField = FieldDescriptor | UnpackedField


def _name(model: Any) -> str:
    return getattr(model, "__qualname__", repr(model))


class RegistryError(RuntimeError):
    """Base class for invalid model declarations."""

    def __init__(self, message: str, *, model: Any) -> None:
        super().__init__(message)
        self.model = model


class PropertyAlreadyDefinedError(RegistryError):
    """Raised when a class declares the same property twice."""

    def __init__(self, model: Any, previous_field: AnyField, current_field: AnyField) -> None:
        msg = f"{_name(model)}.{current_field.class_property_name} is already declared as a field"
        super().__init__(msg, model=model)
        self.previous_field = previous_field
        self.current_field = current_field


class PrimaryKeyAlreadyDefinedError(RegistryError):
    """Raised when a second field is marked as the primary key."""

    def __init__(self, model: Any, previous_field: AnyField, current_field: AnyField) -> None:
        msg = (
            f"{_name(model)} already uses {previous_field.class_property_name!r} as primary key, "
            f"cannot also use {current_field.class_property_name!r}"
        )
        super().__init__(msg, model=model)
        self.previous_field = previous_field
        self.current_field = current_field


class PrimaryKeyNotDefinedError(RegistryError):
    """Raised when a model has no primary key field."""

    def __init__(self, model: Any) -> None:
        super().__init__(f"{_name(model)} does not declare a primary key field", model=model)


class ModelNotFoundError(RegistryError):
    """Raised when a class was never bound to a collection."""

    def __init__(self, model: Any) -> None:
        super().__init__(f"{_name(model)} is not registered as a model", model=model)


class EmptyFieldsListError(RegistryError):
    """Raised when a model declares no fields at all."""

    def __init__(self, model: Any) -> None:
        super().__init__(f"{_name(model)} does not declare any fields", model=model)


class InvalidDefaultValueError(RegistryError):
    """Raised when a non-nullable field declares ``None`` as its default."""

    def __init__(self, model: Any, current_field: FieldDescriptor) -> None:
        msg = (
            f"{_name(model)}.{current_field.class_property_name} is not nullable "
            "but declares None as its default value"
        )
        super().__init__(msg, model=model)
        self.current_field = current_field


__all__ = [
    "EmptyFieldsListError",
    "InvalidDefaultValueError",
    "ModelNotFoundError",
    "PrimaryKeyAlreadyDefinedError",
    "PrimaryKeyNotDefinedError",
    "PropertyAlreadyDefinedError",
    "RegistryError",
]
