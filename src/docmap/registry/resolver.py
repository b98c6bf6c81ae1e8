"""Resolution of raw field descriptors."""

from __future__ import annotations

from docmap.domain import FieldDescriptor, UnpackedField


def unpack_field(descriptor: FieldDescriptor) -> UnpackedField:
    """Return the resolved form of ``descriptor``. Pure and deterministic."""

    return UnpackedField(
        class_property_name=descriptor.class_property_name,
        db_property_name=descriptor.db_property_name or descriptor.class_property_name,
        field_type=descriptor.field_type,
        is_nullable=descriptor.is_nullable,
        default_value=descriptor.default_value,
        is_primary=descriptor.is_identifier,
    )


__all__ = ["unpack_field"]
