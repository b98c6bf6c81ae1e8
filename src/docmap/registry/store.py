"""Process-wide per-class metadata storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from docmap.domain import MetaKey

MetaEntry = tuple[MetaKey, type, str | None]


@dataclass(slots=True)
class MetadataStore:
    """Key/value storage scoped to exact classes.

    Values are keyed by ``(key, target)`` or, for property-level metadata, by
    ``(key, target, property_name)``. Nothing is inherited: a value stored on a
    base class is invisible when querying a subclass.
    """

    _entries: dict[MetaEntry, Any] = field(default_factory=dict)

    def get(
        self,
        key: MetaKey,
        target: type,
        property_name: str | None = None,
        default: Any = None,
    ) -> Any:
        return self._entries.get((key, target, property_name), default)

    def has(self, key: MetaKey, target: type, property_name: str | None = None) -> bool:
        return (key, target, property_name) in self._entries

    def set(
        self,
        key: MetaKey,
        value: Any,
        target: type,
        property_name: str | None = None,
    ) -> None:
        self._entries[(key, target, property_name)] = value


__all__ = ["MetadataStore"]
