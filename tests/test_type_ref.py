"""Tests for decoding and rendering type references."""

from __future__ import annotations

import pytest

from introspect_sdl.errors import SchemaDecodeError, TypeRefDecodeError
from introspect_sdl.type_ref import ListType, NamedType, NonNullType, decode_type_ref
from tests.conftest import list_of, named, non_null


def test_named_type_renders_its_name() -> None:
    ref = decode_type_ref(named("Int"))

    assert ref == NamedType(name="Int")
    assert str(ref) == "Int"


def test_wrappers_are_applied_outside_in() -> None:
    ref = decode_type_ref(non_null(list_of(non_null(named("String")))))

    assert ref == NonNullType(of_type=ListType(of_type=NonNullType(of_type=NamedType(name="String"))))
    assert str(ref) == "[String!]!"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (list_of(named("ID")), "[ID]"),
        (non_null(named("ID")), "ID!"),
        (list_of(list_of(non_null(named("Float")))), "[[Float!]]"),
        (non_null(list_of(named("User", "OBJECT"))), "[User]!"),
    ],
)
def test_rendering_matches_sdl_syntax(raw: dict, expected: str) -> None:
    assert str(decode_type_ref(raw)) == expected


def test_named_returns_innermost_name() -> None:
    ref = decode_type_ref(non_null(list_of(named("Post", "OBJECT"))))

    assert ref.named == "Post"


def test_missing_of_type_key_is_a_named_type() -> None:
    assert decode_type_ref({"kind": "ENUM", "name": "Role"}) == NamedType(name="Role")


def test_named_type_without_name_is_rejected() -> None:
    with pytest.raises(TypeRefDecodeError, match="has no name"):
        decode_type_ref({"kind": "SCALAR", "name": None, "ofType": None})


@pytest.mark.parametrize("kind", ["NON_NULL", "LIST"])
def test_wrapper_without_of_type_is_rejected(kind: str) -> None:
    with pytest.raises(TypeRefDecodeError, match="without ofType"):
        decode_type_ref({"kind": kind, "name": None, "ofType": None})


def test_other_kind_with_of_type_is_rejected() -> None:
    with pytest.raises(TypeRefDecodeError, match="cannot wrap ofType"):
        decode_type_ref({"kind": "OBJECT", "name": "User", "ofType": named("ID")})


def test_error_deep_in_chain_propagates() -> None:
    with pytest.raises(TypeRefDecodeError):
        decode_type_ref(non_null(list_of({"kind": "SCALAR", "ofType": None})))


def test_non_mapping_is_rejected() -> None:
    with pytest.raises(TypeRefDecodeError, match="must be an object"):
        decode_type_ref(["String"])


def test_decode_error_is_a_schema_decode_error() -> None:
    assert issubclass(TypeRefDecodeError, SchemaDecodeError)
    assert issubclass(TypeRefDecodeError, ValueError)
