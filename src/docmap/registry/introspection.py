"""Validated model summaries for the store layer."""

from __future__ import annotations

from collections.abc import Sequence

from docmap.domain import ModelInformation, UnpackedField
from docmap.exceptions import (
    EmptyFieldsListError,
    ModelNotFoundError,
    PrimaryKeyAlreadyDefinedError,
    PrimaryKeyNotDefinedError,
)


def find_primary_field(target: type, fields: Sequence[UnpackedField]) -> UnpackedField:
    primary: UnpackedField | None = None
    for unpacked in fields:
        if not unpacked.is_primary:
            continue
        if primary is not None:
            raise PrimaryKeyAlreadyDefinedError(target, primary, unpacked)
        primary = unpacked
    if primary is None:
        raise PrimaryKeyNotDefinedError(target)
    return primary


def summarize_model(
    target: type,
    collection: str | None,
    fields: Sequence[UnpackedField],
) -> ModelInformation:
    """Validate a model's inherited field set and summarize it."""

    if collection is None:
        raise ModelNotFoundError(target)
    if not fields:
        raise EmptyFieldsListError(target)
    primary_field = find_primary_field(target, fields)
    return ModelInformation(collection=collection, primary_field=primary_field, fields=tuple(fields))


__all__ = ["find_primary_field", "summarize_model"]
