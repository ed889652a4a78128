"""Shared builders and fixtures for introspection payloads."""

from __future__ import annotations

from typing import Any

import pytest


def named(name: str, kind: str = "SCALAR") -> dict[str, Any]:
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "LIST", "name": None, "ofType": of_type}


def input_value(
    name: str,
    type_ref: dict[str, Any],
    description: str | None = None,
    default_value: str | None = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "type": type_ref,
        "defaultValue": default_value,
    }


def field(
    name: str,
    type_ref: dict[str, Any],
    description: str | None = None,
    args: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "args": args or [],
        "type": type_ref,
        "isDeprecated": False,
        "deprecationReason": None,
    }


def make_type(kind: str, name: str, description: str | None = None, **members: Any) -> dict[str, Any]:
    """Build a ``__schema.types`` entry; keyword members use the introspection key names."""
    entry: dict[str, Any] = {
        "kind": kind,
        "name": name,
        "description": description,
        "fields": None,
        "inputFields": None,
        "interfaces": None,
        "enumValues": None,
        "possibleTypes": None,
    }
    entry.update(members)
    return entry


def make_response(
    types: list[dict[str, Any]] | None = None,
    directives: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "data": {
            "__schema": {
                "queryType": {"name": "Query"},
                "mutationType": None,
                "subscriptionType": None,
                "types": types or [],
                "directives": directives or [],
            },
        },
    }


@pytest.fixture
def sample_response() -> dict[str, Any]:
    return make_response(
        directives=[
            {
                "name": "include",
                "description": "Directs the executor to include this field or fragment only when the `if` argument is true.",
                "locations": ["FIELD", "FRAGMENT_SPREAD", "INLINE_FRAGMENT"],
                "args": [
                    input_value("if", non_null(named("Boolean")), description="Included when true."),
                ],
            },
        ],
        types=[
            make_type(
                "OBJECT",
                "Query",
                fields=[
                    field(
                        "user",
                        named("User", "OBJECT"),
                        args=[input_value("id", non_null(named("ID")))],
                    ),
                    field(
                        "search",
                        non_null(list_of(non_null(named("SearchResult", "UNION")))),
                        args=[
                            input_value("term", non_null(named("String"))),
                            input_value("first", named("Int"), default_value="10"),
                        ],
                    ),
                ],
                interfaces=[],
            ),
            make_type(
                "INTERFACE",
                "Node",
                fields=[field("id", non_null(named("ID")), description="Globally unique ID")],
                possibleTypes=[named("User", "OBJECT")],
            ),
            make_type(
                "OBJECT",
                "User",
                "A registered user",
                fields=[
                    field("id", non_null(named("ID"))),
                    field("role", named("Role", "ENUM")),
                ],
                interfaces=[named("Node", "INTERFACE")],
            ),
            make_type(
                "OBJECT",
                "Post",
                fields=[field("title", named("String"))],
                interfaces=[],
            ),
            make_type(
                "UNION",
                "SearchResult",
                possibleTypes=[named("User", "OBJECT"), named("Post", "OBJECT")],
            ),
            make_type(
                "ENUM",
                "Role",
                enumValues=[
                    {"name": "ADMIN", "description": "Full access", "isDeprecated": False, "deprecationReason": None},
                    {"name": "MEMBER", "description": None, "isDeprecated": False, "deprecationReason": None},
                ],
            ),
            make_type(
                "INPUT_OBJECT",
                "UserFilter",
                "Filters users",
                inputFields=[
                    input_value("role", named("Role", "ENUM"), description="Only this role"),
                    input_value("limit", named("Int"), default_value="20"),
                ],
            ),
            make_type("SCALAR", "DateTime", "RFC3339"),
        ],
    )
