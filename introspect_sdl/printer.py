"""Render a decoded introspection schema as GraphQL SDL."""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from graphql import GraphQLSyntaxError, parse
from graphql.language.block_string import print_block_string

from introspect_sdl.errors import SdlSyntaxError, UnsupportedKindError
from introspect_sdl.schema import ArgDef, DirectiveDef, FieldDef, SchemaDoc, TypeDef
from introspect_sdl.type_ref import TypeKind

LOGGER = logging.getLogger(__name__)


class _TabbedWriter:
    """Line buffer that prefixes every non-empty line with one tab per indent level."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.indent_level = 0

    def line(self, text: str = "") -> None:
        if text:
            self._parts.append("\t" * self.indent_level + text)
        self._parts.append("\n")

    @contextmanager
    def indented(self) -> Iterator[None]:
        self.indent_level += 1
        try:
            yield
        finally:
            self.indent_level -= 1

    def getvalue(self) -> str:
        return "".join(self._parts)


def _input_value(arg: ArgDef) -> str:
    text = f"{arg.name}: {arg.type_ref}"
    if arg.default_value is not None:
        text += f" = {arg.default_value}"
    return text


class SchemaPrinter:
    """Print directives and type definitions of a schema, in the order received.

    Args:
        skip_introspection_types: Leave out types whose name starts with ``__``
        input_field_descriptions: Print each input field's own description
            instead of repeating the input type's description above every field

    """

    def __init__(
        self,
        skip_introspection_types: bool = False,
        input_field_descriptions: bool = False,
    ) -> None:
        self.skip_introspection_types = skip_introspection_types
        self.input_field_descriptions = input_field_descriptions

    def print_schema(self, schema: SchemaDoc) -> str:
        """Render the whole schema.

        Args:
            schema: The decoded introspection schema

        Returns:
            The SDL text

        Raises:
            UnsupportedKindError: If a type has a kind that has no SDL form
            PayloadDecodeError: If the enum values or possible types of a type are malformed

        """
        types = schema.types
        if self.skip_introspection_types:
            types = [typ for typ in types if not typ.name.startswith("__")]

        LOGGER.debug("Printing %d directives and %d types", len(schema.directives), len(types))

        out = _TabbedWriter()
        for directive in schema.directives:
            self._print_directive(out, directive)
            out.line()
        out.line()
        for typ in types:
            self._print_type(out, typ)
            out.line()

        return out.getvalue()

    def _print_description(self, out: _TabbedWriter, description: str | None) -> None:
        if description:
            for line in print_block_string(description).split("\n"):
                out.line(line)

    def _print_input_values(self, out: _TabbedWriter, args: Sequence[ArgDef]) -> None:
        for arg in args:
            self._print_description(out, arg.description)
            out.line(_input_value(arg))

    def _print_directive(self, out: _TabbedWriter, directive: DirectiveDef) -> None:
        self._print_description(out, directive.description)
        locations = " | ".join(directive.locations)
        if not directive.args:
            out.line(f"directive @{directive.name} on {locations}")
            return

        out.line(f"directive @{directive.name}(")
        with out.indented():
            self._print_input_values(out, directive.args)
        out.line(f") on {locations}")

    def _print_field(self, out: _TabbedWriter, field: FieldDef) -> None:
        self._print_description(out, field.description)
        if not field.args:
            out.line(f"{field.name}: {field.type_ref}")
        elif any(arg.description for arg in field.args):
            out.line(f"{field.name}(")
            with out.indented():
                self._print_input_values(out, field.args)
            out.line(f"): {field.type_ref}")
        else:
            args = ", ".join(_input_value(arg) for arg in field.args)
            out.line(f"{field.name}({args}): {field.type_ref}")

    def _print_fields(self, out: _TabbedWriter, fields: Sequence[FieldDef]) -> None:
        with out.indented():
            for field in fields:
                self._print_field(out, field)
        out.line("}")

    def _print_input_fields(self, out: _TabbedWriter, typ: TypeDef) -> None:
        with out.indented():
            for field in typ.input_fields:
                if self.input_field_descriptions:
                    self._print_description(out, field.description)
                else:
                    self._print_description(out, typ.description)
                out.line(_input_value(field))
        out.line("}")

    def _print_type(self, out: _TabbedWriter, typ: TypeDef) -> None:
        self._print_description(out, typ.description)

        match typ.kind:
            case TypeKind.SCALAR:
                out.line(f"scalar {typ.name}")

            case TypeKind.OBJECT:
                if typ.interfaces:
                    interfaces = " & ".join(interface.name for interface in typ.interfaces)
                    out.line(f"type {typ.name} implements {interfaces} {{")
                else:
                    out.line(f"type {typ.name} {{")
                self._print_fields(out, typ.fields)

            case TypeKind.INTERFACE:
                out.line(f"interface {typ.name} {{")
                self._print_fields(out, typ.fields)

            case TypeKind.INPUT_OBJECT:
                out.line(f"input {typ.name} {{")
                self._print_input_fields(out, typ)

            case TypeKind.UNION:
                members = " | ".join(str(member) for member in typ.decode_possible_types())
                out.line(f"union {typ.name} ={members}")

            case TypeKind.ENUM:
                values = typ.decode_enum_values()
                out.line(f"enum {typ.name} {{")
                with out.indented():
                    for value in values:
                        self._print_description(out, value.description)
                        out.line(value.name)
                out.line("}")

            case _:
                LOGGER.error("Cannot print type %s of unsupported kind %s", typ.name, typ.kind)
                raise UnsupportedKindError(typ.kind, typ.name)


def print_schema(
    schema: SchemaDoc,
    skip_introspection_types: bool = False,
    input_field_descriptions: bool = False,
) -> str:
    """Render ``schema`` as SDL with a fresh printer."""
    printer = SchemaPrinter(
        skip_introspection_types=skip_introspection_types,
        input_field_descriptions=input_field_descriptions,
    )
    return printer.print_schema(schema)


def validate_sdl(sdl: str) -> None:
    """Check that ``sdl`` parses as a GraphQL document.

    Raises:
        SdlSyntaxError: If graphql-core reports a syntax error

    """
    try:
        parse(sdl, no_location=True)
    except GraphQLSyntaxError as exc:
        raise SdlSyntaxError(str(exc)) from exc
