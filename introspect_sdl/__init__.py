"""Convert a GraphQL introspection result into SDL."""

from introspect_sdl.errors import (
    GraphQLResponseError,
    IntrospectionError,
    PayloadDecodeError,
    SchemaDecodeError,
    SdlSyntaxError,
    TypeRefDecodeError,
    UnsupportedKindError,
)
from introspect_sdl.printer import SchemaPrinter, print_schema, validate_sdl
from introspect_sdl.schema import SchemaDoc, load_introspection
from introspect_sdl.type_ref import (
    ListType,
    NamedType,
    NonNullType,
    TypeKind,
    TypeRef,
    decode_type_ref,
)

__all__ = [
    "GraphQLResponseError",
    "IntrospectionError",
    "ListType",
    "NamedType",
    "NonNullType",
    "PayloadDecodeError",
    "SchemaDecodeError",
    "SchemaDoc",
    "SchemaPrinter",
    "SdlSyntaxError",
    "TypeKind",
    "TypeRef",
    "TypeRefDecodeError",
    "UnsupportedKindError",
    "decode_type_ref",
    "load_introspection",
    "print_schema",
    "validate_sdl",
]
