"""Registry record types."""

from .base import DomainModel
from .enums import MetaKey, ObjectKind
from .fields import FieldDescriptor, ModelInformation, UnpackedField

__all__ = [
    "DomainModel",
    "FieldDescriptor",
    "MetaKey",
    "ModelInformation",
    "ObjectKind",
    "UnpackedField",
]
