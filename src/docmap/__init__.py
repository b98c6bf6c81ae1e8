"""Object-document mapping metadata registry."""

from .config import RegistrySettings
from .declarations import MISSING, Document, FieldDeclaration, data_mapper, field, identifier, model
from .domain import FieldDescriptor, MetaKey, ModelInformation, ObjectKind, UnpackedField
from .exceptions import (
    EmptyFieldsListError,
    InvalidDefaultValueError,
    ModelNotFoundError,
    PrimaryKeyAlreadyDefinedError,
    PrimaryKeyNotDefinedError,
    PropertyAlreadyDefinedError,
    RegistryError,
)
from .registry import FieldRegistry, MetadataStore, get_registry

__all__ = [
    "MISSING",
    "Document",
    "EmptyFieldsListError",
    "FieldDeclaration",
    "FieldDescriptor",
    "FieldRegistry",
    "InvalidDefaultValueError",
    "MetaKey",
    "MetadataStore",
    "ModelInformation",
    "ModelNotFoundError",
    "ObjectKind",
    "PrimaryKeyAlreadyDefinedError",
    "PrimaryKeyNotDefinedError",
    "PropertyAlreadyDefinedError",
    "RegistryError",
    "RegistrySettings",
    "UnpackedField",
    "data_mapper",
    "field",
    "get_registry",
    "identifier",
    "model",
]
