"""Fetch an introspection result from a GraphQL endpoint."""

import asyncio
import logging
from typing import Any

import httpx

from introspect_sdl.errors import GraphQLResponseError, SchemaDecodeError
from introspect_sdl.query import DEFAULT_MAX_DEPTH, build_introspection_query
from introspect_sdl.schema import SchemaDoc, error_message

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0


async def execute_introspection(
    endpoint_url: str,
    *,
    authorization: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_depth: int = DEFAULT_MAX_DEPTH,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """Send the introspection query and return the decoded response.

    Args:
        endpoint_url: URL of the GraphQL endpoint
        authorization: Value of the Authorization header, sent as is
        timeout: Timeout in seconds
        max_depth: Nesting depth of the TypeRef fragment
        transport: Optional httpx transport, used instead of the network

    Returns:
        The JSON response, guaranteed to carry no GraphQL errors

    Raises:
        httpx.HTTPError: If the request fails or the server answers with an error status
        SchemaDecodeError: If the body is not a JSON object
        GraphQLResponseError: If the response contains GraphQL errors

    """
    headers = {"Content-Type": "application/json"}
    if authorization:
        headers["Authorization"] = authorization

    payload = {
        "query": build_introspection_query(max_depth),
        "variables": {},
        "operationName": "IntrospectionQuery",
    }

    LOGGER.info("Requesting introspection from %s", endpoint_url)

    async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
        response = await client.post(endpoint_url, json=payload, headers=headers)
        response.raise_for_status()

        try:
            result = response.json()
        except ValueError as exc:
            msg = f"Introspection response from {endpoint_url} is not JSON: {exc}"
            raise SchemaDecodeError(msg) from exc

    if not isinstance(result, dict):
        msg = f"Introspection response must be an object, got {type(result).__name__}"
        raise SchemaDecodeError(msg)

    if result.get("errors"):
        messages = [error_message(error) for error in result["errors"]]
        LOGGER.error("GraphQL errors: %s", "; ".join(messages))
        raise GraphQLResponseError(messages)

    return result


def fetch_schema(
    endpoint_url: str,
    authorization: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_depth: int = DEFAULT_MAX_DEPTH,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SchemaDoc:
    """Fetch and decode the schema of a GraphQL endpoint.

    This is a synchronous wrapper around :func:`execute_introspection`.
    """
    result = asyncio.run(
        execute_introspection(
            endpoint_url,
            authorization=authorization,
            timeout=timeout,
            max_depth=max_depth,
            transport=transport,
        ),
    )
    return SchemaDoc.from_introspection(result)
