"""Exceptions raised while decoding an introspection result or rendering SDL."""


class IntrospectionError(Exception):
    """Base class for every error raised by introspect_sdl."""


class SchemaDecodeError(IntrospectionError, ValueError):
    """The introspection payload cannot be decoded into a schema document."""


class TypeRefDecodeError(SchemaDecodeError):
    """A ``{kind, name, ofType}`` chain is malformed."""


class PayloadDecodeError(SchemaDecodeError):
    """The raw ``enumValues`` or ``possibleTypes`` of a type cannot be decoded."""

    def __init__(self, type_name: str, payload_name: str, reason: str) -> None:
        self.type_name = type_name
        self.payload_name = payload_name
        super().__init__(f"Cannot decode {payload_name} of {type_name}: {reason}")


class UnsupportedKindError(IntrospectionError):
    """A type definition has a kind that cannot be printed as SDL."""

    def __init__(self, kind: str, type_name: str | None = None) -> None:
        self.kind = kind
        self.type_name = type_name
        super().__init__(f"Unsupported type kind {kind!r} for type {type_name!r}")


class GraphQLResponseError(IntrospectionError):
    """The server answered the introspection query with a non-empty ``errors`` list."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__("; ".join(messages))


class SdlSyntaxError(IntrospectionError):
    """The rendered SDL does not parse."""
