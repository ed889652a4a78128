"""Decode introspection type references into a canonical, printable form."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from introspect_sdl.errors import TypeRefDecodeError


class TypeKind(str, Enum):
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"


class NamedType(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    @property
    def named(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class ListType(BaseModel):
    model_config = ConfigDict(frozen=True)

    of_type: "TypeRef"

    @property
    def named(self) -> str:
        return self.of_type.named

    def __str__(self) -> str:
        return f"[{self.of_type}]"


class NonNullType(BaseModel):
    model_config = ConfigDict(frozen=True)

    of_type: "TypeRef"

    @property
    def named(self) -> str:
        return self.of_type.named

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeRef = Union[NamedType, ListType, NonNullType]

ListType.model_rebuild()
NonNullType.model_rebuild()


def decode_type_ref(raw: Any) -> TypeRef:
    """Convert an introspection ``{kind, name, ofType}`` record into a TypeRef.

    The record is unwound outside-in: every ``NON_NULL`` or ``LIST`` level wraps
    the reference decoded from its ``ofType``, and the chain ends at the first
    record without ``ofType``, which must carry a name.

    Args:
        raw: The decoded JSON object describing the type reference

    Returns:
        The canonical type reference

    Raises:
        TypeRefDecodeError: If the chain is malformed

    """
    if not isinstance(raw, Mapping):
        msg = f"Type reference must be an object, got {type(raw).__name__}"
        raise TypeRefDecodeError(msg)

    kind = raw.get("kind")
    of_type = raw.get("ofType")

    if of_type is None:
        if kind in (TypeKind.NON_NULL, TypeKind.LIST):
            msg = f"{kind} type reference without ofType"
            raise TypeRefDecodeError(msg)
        name = raw.get("name")
        if not name:
            msg = f"Named type reference of kind {kind!r} has no name"
            raise TypeRefDecodeError(msg)
        return NamedType(name=name)

    if kind == TypeKind.NON_NULL:
        return NonNullType(of_type=decode_type_ref(of_type))
    if kind == TypeKind.LIST:
        return ListType(of_type=decode_type_ref(of_type))

    msg = f"Type reference of kind {kind!r} cannot wrap ofType"
    raise TypeRefDecodeError(msg)
