"""Pydantic models for the ``__schema`` part of an introspection result."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from introspect_sdl.errors import (
    GraphQLResponseError,
    PayloadDecodeError,
    SchemaDecodeError,
    TypeRefDecodeError,
)
from introspect_sdl.type_ref import ListType, NamedType, NonNullType, TypeRef, decode_type_ref

LOGGER = logging.getLogger(__name__)


def _empty_if_null(value: Any) -> Any:
    return [] if value is None else value


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class _TypedModel(_IntrospectionModel):
    type_ref: TypeRef = Field(..., alias="type")

    @field_validator("type_ref", mode="before")
    @classmethod
    def decode_type(cls, value: Any) -> TypeRef:
        if isinstance(value, (NamedType, ListType, NonNullType)):
            return value
        return decode_type_ref(value)


class NamedRef(_IntrospectionModel):
    """Reference to a type by name only (interfaces, root operation types)."""

    name: str


class ArgDef(_TypedModel):
    """An argument or input field (``__InputValue``)."""

    name: str
    description: str | None = None
    default_value: str | None = Field(None, alias="defaultValue")


class FieldDef(_TypedModel):
    name: str
    description: str | None = None
    args: list[ArgDef] = Field(default_factory=list)

    @field_validator("args", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _empty_if_null(value)


class EnumValueDef(_IntrospectionModel):
    name: str
    description: str | None = None


class DirectiveDef(_IntrospectionModel):
    name: str
    description: str | None = None
    locations: list[str] = Field(default_factory=list)
    args: list[ArgDef] = Field(default_factory=list)

    @field_validator("locations", "args", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _empty_if_null(value)


_ENUM_VALUES = TypeAdapter(list[EnumValueDef])


class TypeDef(_IntrospectionModel):
    """A single entry of ``__schema.types``.

    ``kind`` is kept as the raw string sent by the server so that kinds this
    package cannot print still decode; the printer rejects them. ``enumValues``
    and ``possibleTypes`` are kept as received and only decoded on demand,
    for the kinds that use them.
    """

    kind: str
    name: str
    description: str | None = None
    fields: list[FieldDef] = Field(default_factory=list)
    input_fields: list[ArgDef] = Field(default_factory=list, alias="inputFields")
    interfaces: list[NamedRef] = Field(default_factory=list)
    enum_values: Any = Field(None, alias="enumValues")
    possible_types: Any = Field(None, alias="possibleTypes")

    @field_validator("fields", "input_fields", "interfaces", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _empty_if_null(value)

    def decode_enum_values(self) -> list[EnumValueDef]:
        """Decode the raw ``enumValues`` document of an ENUM type.

        Raises:
            PayloadDecodeError: If the document is not a list of enum values

        """
        raw = self._raw_document("enumValues", self.enum_values)
        try:
            return _ENUM_VALUES.validate_python(raw)
        except ValidationError as exc:
            raise PayloadDecodeError(self.name, "enumValues", str(exc)) from exc

    def decode_possible_types(self) -> list[TypeRef]:
        """Decode the raw ``possibleTypes`` document of a UNION type.

        Raises:
            PayloadDecodeError: If the document is not a list of type references

        """
        raw = self._raw_document("possibleTypes", self.possible_types)
        if not isinstance(raw, list):
            raise PayloadDecodeError(self.name, "possibleTypes", "expected a list")
        try:
            return [decode_type_ref(item) for item in raw]
        except TypeRefDecodeError as exc:
            raise PayloadDecodeError(self.name, "possibleTypes", str(exc)) from exc

    def _raw_document(self, payload_name: str, raw: Any) -> Any:
        # Some callers hand over the member still serialized as JSON text
        if isinstance(raw, (str, bytes)):
            try:
                return json.loads(raw)
            except json.JSONDecodeError as exc:
                raise PayloadDecodeError(self.name, payload_name, str(exc)) from exc
        return raw


class SchemaDoc(_IntrospectionModel):
    """The decoded ``__schema`` object: directives and type definitions, in server order."""

    query_type: NamedRef | None = Field(None, alias="queryType")
    mutation_type: NamedRef | None = Field(None, alias="mutationType")
    subscription_type: NamedRef | None = Field(None, alias="subscriptionType")
    types: list[TypeDef] = Field(default_factory=list)
    directives: list[DirectiveDef] = Field(default_factory=list)

    @field_validator("types", "directives", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return _empty_if_null(value)

    @classmethod
    def from_introspection(cls, payload: Any) -> "SchemaDoc":
        """Build a schema document from an introspection response.

        Accepts the full response (``{"data": {"__schema": ...}, "errors": ...}``)
        or the bare ``{"__schema": ...}`` object.

        Args:
            payload: The decoded JSON response

        Returns:
            The schema document

        Raises:
            GraphQLResponseError: If the response carries errors
            SchemaDecodeError: If the payload does not describe a schema

        """
        if not isinstance(payload, Mapping):
            msg = f"Introspection result must be an object, got {type(payload).__name__}"
            raise SchemaDecodeError(msg)

        errors = payload.get("errors")
        if errors:
            raise GraphQLResponseError([error_message(error) for error in errors])

        data = payload["data"] if "data" in payload else payload
        if not isinstance(data, Mapping) or data.get("__schema") is None:
            msg = "Invalid introspection result. Expected either '__schema' or 'data.__schema'."
            raise SchemaDecodeError(msg)

        try:
            schema = cls.model_validate(data["__schema"])
        except ValidationError as exc:
            raise _decode_error(exc) from exc

        LOGGER.debug(
            "Decoded schema with %d types and %d directives",
            len(schema.types),
            len(schema.directives),
        )
        return schema


def load_introspection(schema_path: str | Path) -> SchemaDoc:
    """Load an introspection result saved as a JSON file."""
    # utf-8-sig also accepts files written with a BOM
    with open(schema_path, encoding="utf-8-sig") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as exc:
            msg = f"{schema_path} is not valid JSON: {exc}"
            raise SchemaDecodeError(msg) from exc

    return SchemaDoc.from_introspection(payload)


def error_message(error: Any) -> str:
    if isinstance(error, Mapping):
        return str(error.get("message", "Unknown error"))
    return str(error)


def _decode_error(exc: ValidationError) -> SchemaDecodeError:
    # Surface a type reference failure as itself rather than a generic validation error
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, TypeRefDecodeError):
            return cause
    return SchemaDecodeError(f"Invalid introspection schema: {exc}")
