"""Document-backed attribute accessors."""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from copy import deepcopy
from typing import Any

from docmap.domain import UnpackedField

logger = logging.getLogger(__name__)

_IMMUTABLE_DEFAULTS = (type(None), bool, int, float, complex, str, bytes, frozenset)


def internal_document(instance: Any, document_attribute: str) -> MutableMapping[str, Any]:
    """Return the instance's internal document, creating an empty one if needed."""

    document = getattr(instance, document_attribute, None)
    if document is None:
        document = {}
        setattr(instance, document_attribute, document)
    return document


def document_property(unpacked: UnpackedField, document_attribute: str) -> property:
    """Build a property reading and writing ``unpacked.db_property_name`` in the document."""

    key = unpacked.db_property_name
    default = unpacked.default_value

    def fget(instance: Any) -> Any:
        document = internal_document(instance, document_attribute)
        if key in document:
            return document[key]
        if isinstance(default, _IMMUTABLE_DEFAULTS):
            return default
        # mutable defaults are stored so in-place changes persist
        document[key] = deepcopy(default)
        return document[key]

    def fset(instance: Any, value: Any) -> None:
        internal_document(instance, document_attribute)[key] = value

    return property(fget, fset, doc=f"Document field {key!r}.")


def install_accessors(
    target: type,
    fields: Iterable[UnpackedField],
    document_attribute: str,
) -> tuple[str, ...]:
    """Define a document property on ``target`` for every field.

    ``fields`` is ordered most-derived first; when a property name repeats,
    the first occurrence wins. Returns the installed property names.
    """

    installed: list[str] = []
    for unpacked in fields:
        if unpacked.class_property_name in installed:
            continue
        setattr(target, unpacked.class_property_name, document_property(unpacked, document_attribute))
        installed.append(unpacked.class_property_name)
    logger.debug("Installed %d accessors on %s", len(installed), target.__qualname__)
    return tuple(installed)


__all__ = ["document_property", "install_accessors", "internal_document"]
