"""Class-body declarations feeding the field registry."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from copy import deepcopy
from typing import Any, ClassVar, Self, TypeVar

from docmap.domain import FieldDescriptor
from docmap.exceptions import InvalidDefaultValueError
from docmap.registry import FieldRegistry, get_registry, internal_document

T = TypeVar("T", bound=type)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _declared_type(owner: type, attribute: str) -> Any:
    try:
        annotations = inspect.get_annotations(owner)
    except NameError:
        # forward reference that cannot be evaluated while the class is created
        return Any
    return annotations.get(attribute, Any)


class FieldDeclaration:
    """Marks a class attribute as a persisted document field.

    Registration happens in ``__set_name__`` while the owner class is being
    created. Until accessors are installed on an instance's class, the first
    read or write through this declaration installs them and retries.
    """

    __slots__ = (
        "attribute",
        "default_value",
        "field_type",
        "identifier",
        "name",
        "nullable",
        "owner",
        "registry",
    )

    def __init__(
        self,
        field_type: Any = None,
        *,
        nullable: bool = True,
        name: str | None = None,
        default_value: Any = MISSING,
        identifier: bool = False,
        registry: FieldRegistry | None = None,
    ) -> None:
        self.field_type = field_type
        self.nullable = nullable
        self.name = name
        self.default_value = default_value
        self.identifier = identifier
        self.registry = registry
        self.attribute: str | None = None
        self.owner: type | None = None

    def _registry(self) -> FieldRegistry:
        # an explicit registry wins over the owner class's docmap_registry
        return self.registry or getattr(self.owner, "docmap_registry", None) or get_registry()

    def build_descriptor(self, owner: type, attribute: str) -> FieldDescriptor:
        explicit_default = self.default_value is not MISSING
        descriptor = FieldDescriptor(
            class_property_name=attribute,
            db_property_name=self.name or attribute,
            field_type=self.field_type if self.field_type is not None else _declared_type(owner, attribute),
            is_nullable=self.nullable,
            default_value=self.default_value if explicit_default else None,
            is_identifier=self.identifier,
        )
        strict = self._registry().settings.strict_defaults
        if strict and explicit_default and self.default_value is None and not self.nullable:
            raise InvalidDefaultValueError(owner, descriptor)
        return descriptor

    def __set_name__(self, owner: type, attribute: str) -> None:
        self.attribute = attribute
        self.owner = owner
        self._registry().add_own_field(owner, self.build_descriptor(owner, attribute))

    def _install(self, cls: type) -> str:
        if self.attribute is None:
            msg = "field declaration is not bound to a class attribute"
            raise AttributeError(msg)
        registry = self._registry()
        if registry.are_fields_applied(cls):
            msg = f"{cls.__qualname__}.{self.attribute} has no installed accessor"
            raise AttributeError(msg)
        registry.apply_fields(cls)
        return self.attribute

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return getattr(instance, self._install(type(instance)))

    def __set__(self, instance: Any, value: Any) -> None:
        setattr(instance, self._install(type(instance)), value)

    def __repr__(self) -> str:
        return f"FieldDeclaration(attribute={self.attribute!r}, name={self.name!r}, identifier={self.identifier})"


def field(
    field_type: Any = None,
    *,
    nullable: bool = True,
    name: str | None = None,
    default_value: Any = MISSING,
    identifier: bool = False,
    registry: FieldRegistry | None = None,
) -> Any:
    """Declare a persisted field in a class body."""

    return FieldDeclaration(
        field_type,
        nullable=nullable,
        name=name,
        default_value=default_value,
        identifier=identifier,
        registry=registry,
    )


def identifier(field_type: Any = None, **options: Any) -> Any:
    """Declare the primary key field."""

    return field(field_type, identifier=True, **options)


def model(collection: str, *, registry: FieldRegistry | None = None) -> Callable[[T], T]:
    """Class decorator binding a class to a named collection."""

    if not collection:
        msg = "collection name must not be empty"
        raise ValueError(msg)

    def decorate(cls: T) -> T:
        (registry or get_registry()).define_model(cls, collection)
        return cls

    return decorate


def data_mapper(cls: T | None = None, *, registry: FieldRegistry | None = None) -> Any:
    """Class decorator registering a field-bearing class without a collection."""

    def decorate(target: T) -> T:
        (registry or get_registry()).define_data_mapper(target)
        return target

    if cls is None:
        return decorate
    return decorate(cls)


class DocumentMeta(type):
    """Keeps installed document accessors from being replaced or deleted on the class."""

    def _check_accessor(cls, name: str) -> None:
        registry = getattr(cls, "docmap_registry", None) or get_registry()
        if name in registry.get_installed_accessors(cls):
            msg = f"{cls.__qualname__}.{name} is a document field accessor and cannot be reassigned"
            raise AttributeError(msg)

    def __setattr__(cls, name: str, value: Any) -> None:
        cls._check_accessor(name)
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        cls._check_accessor(name)
        super().__delattr__(name)


class Document(metaclass=DocumentMeta):
    """Base class whose declared fields live in an internal document map."""

    docmap_registry: ClassVar[FieldRegistry | None] = None

    def __init__(self, **values: Any) -> None:
        cls = type(self)
        registry = cls._registry()
        registry.apply_fields(cls)
        setattr(self, registry.settings.document_attribute, {})
        known = {unpacked.class_property_name for unpacked in registry.get_unpacked_fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            msg = f"{cls.__qualname__} got unexpected fields: {', '.join(unknown)}"
            raise TypeError(msg)
        for attribute, value in values.items():
            setattr(self, attribute, value)

    @classmethod
    def _registry(cls) -> FieldRegistry:
        return cls.docmap_registry or get_registry()

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Self:
        """Wrap a copy of a stored document without going through ``__init__`` values."""

        instance = cls()
        internal_document(instance, cls._registry().settings.document_attribute).update(deepcopy(dict(document)))
        return instance

    def to_document(self) -> dict[str, Any]:
        """Return a copy of the internal document with absent fields defaulted."""

        registry = self._registry()
        document = deepcopy(dict(internal_document(self, registry.settings.document_attribute)))
        seen: set[str] = set()
        for unpacked in registry.get_unpacked_fields(type(self)):
            if unpacked.class_property_name in seen:
                continue
            seen.add(unpacked.class_property_name)
            document.setdefault(unpacked.db_property_name, deepcopy(unpacked.default_value))
        return document

    def __repr__(self) -> str:
        registry = self._registry()
        document = internal_document(self, registry.settings.document_attribute)
        return f"{type(self).__qualname__}({document!r})"


__all__ = [
    "MISSING",
    "Document",
    "DocumentMeta",
    "FieldDeclaration",
    "data_mapper",
    "field",
    "identifier",
    "model",
]
