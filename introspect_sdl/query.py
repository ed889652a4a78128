"""The introspection query sent to the server."""

from graphql import get_introspection_query

DEFAULT_MAX_DEPTH = 7
MAX_DEPTH = 9

_TYPE_REF_FRAGMENT = "fragment TypeRef on __Type"


def _type_ref_selection(depth: int, indent: str) -> list[str]:
    lines = [f"{indent}kind", f"{indent}name"]
    if depth > 0:
        lines.append(f"{indent}ofType {{")
        lines.extend(_type_ref_selection(depth - 1, indent + "  "))
        lines.append(f"{indent}}}")
    return lines


def build_introspection_query(max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Build the introspection query.

    The query is graphql-core's standard one, with its TypeRef fragment replaced
    by one that follows ``ofType`` ``max_depth`` levels deep (clamped to 1-9).
    """
    depth = min(max(max_depth, 1), MAX_DEPTH)
    operations, _, _ = get_introspection_query(descriptions=True).partition(_TYPE_REF_FRAGMENT)
    selection = "\n".join(_type_ref_selection(depth, "  "))
    return f"{operations.rstrip()}\n\n{_TYPE_REF_FRAGMENT} {{\n{selection}\n}}\n"
