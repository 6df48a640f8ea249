"""Tests for oedipus.catalog."""

from __future__ import annotations

import pytest

from oedipus.catalog import TypeCatalog, is_documentable
from oedipus.models import TypeDescriptor, TypeKind


def _type(full_name: str, **overrides) -> TypeDescriptor:
    namespace, _, name = full_name.rpartition(".")
    values = {"full_name": full_name, "name": name, "namespace": namespace or None}
    values.update(overrides)
    return TypeDescriptor(**values)


def test_group_keeps_only_public_non_generic_classes() -> None:
    types = [
        _type("Acme.Core.Widgets.Button"),
        _type("Acme.Core.Widgets.IWidget", kind=TypeKind.INTERFACE),
        _type("Acme.Core.Widgets.Internal", is_public=False),
        _type("Acme.Core.Widgets.Cache`1", is_generic_definition=True),
        _type("Acme.Core.Widgets.Size", kind=TypeKind.STRUCT),
    ]

    groups = TypeCatalog().group(types)

    assert len(groups) == 1
    assert groups[0].namespace == "Acme.Core.Widgets"
    assert [descriptor.name for descriptor in groups[0].types] == ["Button"]


def test_group_drops_types_without_namespace() -> None:
    types = [
        _type("Program"),
        TypeDescriptor(full_name="Helper", name="Helper", namespace=""),
        _type("Acme.Tools.Runner"),
    ]

    groups = TypeCatalog().group(types)

    assert [group.namespace for group in groups] == ["Acme.Tools"]
    assert all(descriptor.namespace for group in groups for descriptor in group.types)


def test_group_omits_namespaces_without_documentable_members() -> None:
    types = [
        _type("Acme.Contracts.IService", kind=TypeKind.INTERFACE),
        _type("Acme.Contracts.Options", is_public=False),
        _type("Acme.Services.Service"),
    ]

    groups = TypeCatalog().group(types)

    assert [group.namespace for group in groups] == ["Acme.Services"]


def test_group_returns_empty_list_for_no_documentable_types() -> None:
    types = [_type("Acme.IThing", kind=TypeKind.INTERFACE), _type("Loose")]

    assert TypeCatalog().group(types) == []


def test_group_is_deterministic_and_restartable() -> None:
    types = [_type("B.Two"), _type("A.One"), _type("B.Three")]
    catalog = TypeCatalog()

    first = catalog.group(types)
    second = catalog.group(iter(types))

    assert first == second
    assert [group.namespace for group in first] == ["B", "A"]
    assert [descriptor.name for descriptor in first[0].types] == ["Two", "Three"]


def test_group_rejects_none() -> None:
    with pytest.raises(TypeError):
        TypeCatalog().group(None)  # type: ignore[arg-type]


def test_is_documentable_flags() -> None:
    assert is_documentable(_type("A.B"))
    assert not is_documentable(_type("A.B", kind=TypeKind.ENUM))
    assert not is_documentable(_type("A.B", kind=TypeKind.DELEGATE))
