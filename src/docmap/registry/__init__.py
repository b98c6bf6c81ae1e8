"""Field metadata registry exports."""

from .accessors import document_property, install_accessors, internal_document
from .fields import FieldRegistry, Unpacker
from .hierarchy import iter_hierarchy, walk_hierarchy
from .introspection import find_primary_field, summarize_model
from .resolver import unpack_field
from .store import MetadataStore

registry = FieldRegistry()


def get_registry() -> FieldRegistry:
    """Return the process-wide registry."""

    return registry


__all__ = [
    "FieldRegistry",
    "MetadataStore",
    "Unpacker",
    "document_property",
    "find_primary_field",
    "get_registry",
    "install_accessors",
    "internal_document",
    "iter_hierarchy",
    "registry",
    "summarize_model",
    "unpack_field",
    "walk_hierarchy",
]
