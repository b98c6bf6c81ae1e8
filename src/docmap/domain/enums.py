"""Enumerations used across the registry."""

from __future__ import annotations

from enum import StrEnum


class ObjectKind(StrEnum):
    """How a class participates in document mapping."""

    MODEL = "model"
    DATA_MAPPER = "data-mapper"


class MetaKey(StrEnum):
    """Kinds of per-class metadata held by the metadata store."""

    FIELDS_APPLIED = "fields_applied"
    ACCESSORS = "accessors"
    COLLECTION = "collection"
    OBJECT_KIND = "object_kind"
    FIELDS = "fields"
    UNPACKED_FIELDS = "unpacked_fields"


__all__ = ["MetaKey", "ObjectKind"]
