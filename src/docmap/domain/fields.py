"""Field descriptor records produced and consumed by the registry."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, model_validator

from .base import DomainModel


class FieldDescriptor(DomainModel):
    """Raw description of one persisted class attribute, as declared."""

    class_property_name: Annotated[str, Field(min_length=1)]
    db_property_name: Annotated[str, Field(min_length=1)]
    field_type: Any = None
    is_nullable: bool = True
    default_value: Any = None
    is_identifier: bool = False

    @model_validator(mode="before")
    @classmethod
    def default_db_property_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("db_property_name") is None:
            data = {**data, "db_property_name": data.get("class_property_name")}
        return data

    @property
    def is_primary(self) -> bool:
        return self.is_identifier


class UnpackedField(DomainModel):
    """Resolved descriptor with every default applied."""

    class_property_name: str
    db_property_name: str
    field_type: Any = None
    is_nullable: bool = True
    default_value: Any = None
    is_primary: bool = False


class ModelInformation(DomainModel):
    """Validated summary of a model handed to the store layer."""

    collection: str
    primary_field: UnpackedField
    fields: tuple[UnpackedField, ...]

    def field_by_property(self, class_property_name: str) -> UnpackedField | None:
        for item in self.fields:
            if item.class_property_name == class_property_name:
                return item
        return None


__all__ = ["FieldDescriptor", "ModelInformation", "UnpackedField"]
