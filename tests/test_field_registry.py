from __future__ import annotations

import pytest

from docmap.domain import FieldDescriptor
from docmap.exceptions import PrimaryKeyAlreadyDefinedError, PropertyAlreadyDefinedError
from docmap.registry import FieldRegistry


def _descriptor(name: str, **options: object) -> FieldDescriptor:
    return FieldDescriptor(class_property_name=name, **options)


def test_own_fields_keep_declaration_order(registry: FieldRegistry) -> None:
    class Book:
        pass

    first = _descriptor("isbn", is_identifier=True)
    second = _descriptor("title")
    third = _descriptor("pages", field_type=int)
    for descriptor in (first, second, third):
        registry.add_own_field(Book, descriptor)

    assert registry.get_own_fields(Book) == (first, second, third)


def test_duplicate_property_name_is_rejected(registry: FieldRegistry) -> None:
    class Book:
        pass

    previous = _descriptor("title")
    registry.add_own_field(Book, previous)
    duplicate = _descriptor("title", db_property_name="book_title")

    with pytest.raises(PropertyAlreadyDefinedError) as excinfo:
        registry.add_own_field(Book, duplicate)

    assert excinfo.value.model is Book
    assert excinfo.value.previous_field == previous
    assert excinfo.value.current_field == duplicate
    assert registry.get_own_fields(Book) == (previous,)


def test_second_primary_key_is_rejected(registry: FieldRegistry) -> None:
    class Book:
        pass

    isbn = _descriptor("isbn", is_identifier=True)
    registry.add_own_field(Book, isbn)
    registry.add_own_field(Book, _descriptor("title"))
    other = _descriptor("code", is_identifier=True)

    with pytest.raises(PrimaryKeyAlreadyDefinedError) as excinfo:
        registry.add_own_field(Book, other)

    assert excinfo.value.model is Book
    assert excinfo.value.previous_field == isbn
    assert excinfo.value.current_field == other
    assert len(registry.get_own_fields(Book)) == 2


def test_registration_never_touches_ancestors(registry: FieldRegistry) -> None:
    class Base:
        pass

    class Child(Base):
        pass

    registry.add_own_field(Base, _descriptor("id", is_identifier=True))
    registry.add_own_field(Child, _descriptor("name"))

    assert [f.class_property_name for f in registry.get_own_fields(Base)] == ["id"]
    assert [f.class_property_name for f in registry.get_own_fields(Child)] == ["name"]
    assert [f.class_property_name for f in registry.get_fields(Child)] == ["name", "id"]


def test_primary_check_only_covers_own_fields(registry: FieldRegistry) -> None:
    class Base:
        pass

    class Child(Base):
        pass

    registry.add_own_field(Base, _descriptor("id", is_identifier=True))
    # accepted at registration, rejected at introspection time
    registry.add_own_field(Child, _descriptor("code", is_identifier=True))

    assert len(registry.get_fields(Child)) == 2


def test_db_property_name_defaults_to_class_property_name() -> None:
    assert _descriptor("title").db_property_name == "title"
    assert _descriptor("title", db_property_name="t").db_property_name == "t"


def test_registration_after_resolution_logs_warning(
    registry: FieldRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    class Book:
        pass

    registry.add_own_field(Book, _descriptor("title"))
    registry.get_unpacked_own_fields(Book)

    with caplog.at_level("WARNING", logger="docmap.registry.fields"):
        registry.add_own_field(Book, _descriptor("pages"))

    assert "after its fields were resolved" in caplog.text
    assert [f.class_property_name for f in registry.get_unpacked_own_fields(Book)] == ["title"]


def test_object_kind_predicates(registry: FieldRegistry) -> None:
    class Book:
        pass

    class Address:
        pass

    class Plain:
        pass

    registry.define_model(Book, "books")
    registry.define_data_mapper(Address)

    assert registry.is_model(Book)
    assert not registry.is_data_mapper(Book)
    assert registry.is_data_mapper(Address)
    assert not registry.is_model(Address)
    assert not registry.is_model(Plain)
    assert not registry.is_data_mapper(Plain)
    assert registry.get_collection(Book) == "books"
    assert registry.get_collection(Address) is None
