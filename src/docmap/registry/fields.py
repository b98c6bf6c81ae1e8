"""Per-class field registry."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from docmap.config import RegistrySettings
from docmap.domain import FieldDescriptor, MetaKey, ModelInformation, ObjectKind, UnpackedField
from docmap.exceptions import PrimaryKeyAlreadyDefinedError, PropertyAlreadyDefinedError

from .accessors import install_accessors
from .hierarchy import walk_hierarchy
from .introspection import summarize_model
from .resolver import unpack_field
from .store import MetadataStore

logger = logging.getLogger(__name__)

Unpacker = Callable[[FieldDescriptor], UnpackedField]


@dataclass(slots=True)
class FieldRegistry:
    """Records persisted fields per class and derives model views from them."""

    settings: RegistrySettings = field(default_factory=RegistrySettings.from_env)
    store: MetadataStore = field(default_factory=MetadataStore)
    unpacker: Unpacker = unpack_field
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    # registration

    def add_own_field(self, target: type, descriptor: FieldDescriptor) -> None:
        """Append ``descriptor`` to the fields declared directly on ``target``."""

        with self._lock:
            own = self.get_own_fields(target)
            for existing in own:
                if existing.is_primary and descriptor.is_primary:
                    raise PrimaryKeyAlreadyDefinedError(target, existing, descriptor)
                if existing.class_property_name == descriptor.class_property_name:
                    raise PropertyAlreadyDefinedError(target, existing, descriptor)
            if self.store.has(MetaKey.UNPACKED_FIELDS, target):
                logger.warning(
                    "Field %s registered on %s after its fields were resolved; "
                    "it will not be visible through resolved views",
                    descriptor.class_property_name,
                    target.__qualname__,
                )
            self.store.set(MetaKey.FIELDS, (*own, descriptor), target)
        logger.debug(
            "Registered field %s.%s (db=%s, primary=%s)",
            target.__qualname__,
            descriptor.class_property_name,
            descriptor.db_property_name,
            descriptor.is_primary,
        )

    def define_model(self, target: type, collection: str) -> None:
        """Bind ``target`` to ``collection`` and mark it as a model."""

        with self._lock:
            self.store.set(MetaKey.COLLECTION, collection, target)
            self.store.set(MetaKey.OBJECT_KIND, ObjectKind.MODEL, target)
        logger.debug("Defined model %s -> %s", target.__qualname__, collection)

    def define_data_mapper(self, target: type) -> None:
        with self._lock:
            self.store.set(MetaKey.OBJECT_KIND, ObjectKind.DATA_MAPPER, target)
        logger.debug("Defined data mapper %s", target.__qualname__)

    # raw views

    def get_own_fields(self, target: type) -> tuple[FieldDescriptor, ...]:
        return self.store.get(MetaKey.FIELDS, target, default=())

    def get_fields(self, target: type) -> tuple[FieldDescriptor, ...]:
        """Return raw fields of ``target`` and all of its ancestors, most-derived first."""

        collected: list[FieldDescriptor] = []
        walk_hierarchy(target, lambda cls: collected.extend(self.get_own_fields(cls)))
        return tuple(collected)

    # resolved views

    def get_unpacked_own_fields(self, target: type) -> tuple[UnpackedField, ...]:
        """Return resolved fields declared directly on ``target``.

        Resolution runs once per class; the result is cached in the metadata
        store and returned as-is on later calls.
        """

        unpacked = self.store.get(MetaKey.UNPACKED_FIELDS, target)
        if unpacked is not None:
            return unpacked
        with self._lock:
            unpacked = self.store.get(MetaKey.UNPACKED_FIELDS, target)
            if unpacked is None:
                unpacked = tuple(self.unpacker(descriptor) for descriptor in self.get_own_fields(target))
                self.store.set(MetaKey.UNPACKED_FIELDS, unpacked, target)
                logger.debug("Resolved %d own fields of %s", len(unpacked), target.__qualname__)
        return unpacked

    def get_unpacked_fields(self, target: type) -> tuple[UnpackedField, ...]:
        """Return resolved fields of ``target`` including inherited ones."""

        collected: list[UnpackedField] = []
        walk_hierarchy(target, lambda cls: collected.extend(self.get_unpacked_own_fields(cls)))
        return tuple(collected)

    # accessors

    def are_fields_applied(self, target: type) -> bool:
        return self.store.get(MetaKey.FIELDS_APPLIED, target) is True

    def apply_fields(self, target: type) -> None:
        """Install document-backed accessors on ``target`` once."""

        with self._lock:
            if self.are_fields_applied(target):
                return
            installed = install_accessors(
                target,
                self.get_unpacked_fields(target),
                self.settings.document_attribute,
            )
            self.store.set(MetaKey.ACCESSORS, installed, target)
            self.store.set(MetaKey.FIELDS_APPLIED, True, target)

    def get_installed_accessors(self, target: type) -> tuple[str, ...]:
        """Return the property names ``apply_fields`` defined directly on ``target``."""

        return self.store.get(MetaKey.ACCESSORS, target, default=())

    # introspection

    def get_collection(self, target: type) -> str | None:
        return self.store.get(MetaKey.COLLECTION, target)

    def collect_model_information(self, target: type) -> ModelInformation:
        """Validate ``target`` as a model and summarize it for the store layer.

        Always re-validates; raises ``ModelNotFoundError``,
        ``EmptyFieldsListError``, ``PrimaryKeyAlreadyDefinedError`` or
        ``PrimaryKeyNotDefinedError`` on an invalid declaration.
        """

        return summarize_model(
            target,
            self.get_collection(target),
            self.get_unpacked_fields(target),
        )

    def is_model(self, target: type) -> bool:
        return self.store.get(MetaKey.OBJECT_KIND, target) == ObjectKind.MODEL

    def is_data_mapper(self, target: type) -> bool:
        return self.store.get(MetaKey.OBJECT_KIND, target) == ObjectKind.DATA_MAPPER


__all__ = ["FieldRegistry", "Unpacker"]
