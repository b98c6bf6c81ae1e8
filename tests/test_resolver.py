from __future__ import annotations

from docmap.domain import FieldDescriptor, UnpackedField
from docmap.registry import FieldRegistry, unpack_field


def test_unpack_field_normalizes_identifier() -> None:
    descriptor = FieldDescriptor(
        class_property_name="id",
        db_property_name="_id",
        field_type=str,
        is_nullable=False,
        default_value="x",
        is_identifier=True,
    )

    unpacked = unpack_field(descriptor)

    assert unpacked == UnpackedField(
        class_property_name="id",
        db_property_name="_id",
        field_type=str,
        is_nullable=False,
        default_value="x",
        is_primary=True,
    )


def test_unpack_field_applies_defaults() -> None:
    unpacked = unpack_field(FieldDescriptor(class_property_name="name"))

    assert unpacked.db_property_name == "name"
    assert unpacked.is_nullable is True
    assert unpacked.default_value is None
    assert unpacked.is_primary is False


def test_resolution_runs_once_per_class() -> None:
    calls: list[str] = []

    def probe(descriptor: FieldDescriptor) -> UnpackedField:
        calls.append(descriptor.class_property_name)
        return unpack_field(descriptor)

    registry = FieldRegistry(unpacker=probe)

    class Base:
        pass

    class Child(Base):
        pass

    registry.add_own_field(Base, FieldDescriptor(class_property_name="id", is_identifier=True))
    registry.add_own_field(Child, FieldDescriptor(class_property_name="name"))

    first = registry.get_unpacked_fields(Child)
    second = registry.get_unpacked_fields(Child)
    registry.get_unpacked_fields(Base)

    assert first == second
    assert registry.get_unpacked_own_fields(Child) is registry.get_unpacked_own_fields(Child)
    assert sorted(calls) == ["id", "name"]


def test_three_level_chain_orders_most_derived_first(registry: FieldRegistry) -> None:
    class A:
        pass

    class B(A):
        pass

    class C(B):
        pass

    for cls, names in ((A, ("a1", "a2")), (B, ("b1", "b2")), (C, ("c1", "c2"))):
        for name in names:
            registry.add_own_field(cls, FieldDescriptor(class_property_name=name))

    names = [unpacked.class_property_name for unpacked in registry.get_unpacked_fields(C)]
    assert names == ["c1", "c2", "b1", "b2", "a1", "a2"]


def test_class_without_fields_resolves_to_empty(registry: FieldRegistry) -> None:
    class Empty:
        pass

    assert registry.get_unpacked_own_fields(Empty) == ()
    assert registry.get_unpacked_fields(Empty) == ()
