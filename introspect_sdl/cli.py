"""Print the schema of a GraphQL endpoint (or of a saved introspection result) as SDL."""

import argparse
import logging
import sys
from logging import DEBUG, INFO, basicConfig

import httpx
from pydantic import ValidationError

from introspect_sdl.client import DEFAULT_TIMEOUT, fetch_schema
from introspect_sdl.config import AUTHORIZATION_ENV, ENDPOINT_ENV, Settings
from introspect_sdl.errors import IntrospectionError
from introspect_sdl.printer import SchemaPrinter, validate_sdl
from introspect_sdl.query import DEFAULT_MAX_DEPTH
from introspect_sdl.schema import SchemaDoc, load_introspection

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="introspect-sdl",
        description="Print a GraphQL schema as SDL using introspection",
    )

    parser.add_argument(
        "-e",
        "--endpoint",
        help=f"GraphQL API endpoint URL (default: ${ENDPOINT_ENV})",
    )

    parser.add_argument(
        "-a",
        "--authorization",
        help=f"Authorization header value, sent as is (default: ${AUTHORIZATION_ENV})",
    )

    parser.add_argument(
        "-i",
        "--input",
        dest="input_path",
        help="Read a saved introspection JSON file instead of querying an endpoint",
    )

    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        help="Write the SDL to this file instead of stdout",
    )

    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )

    parser.add_argument(
        "-d",
        "--depth",
        dest="max_depth",
        type=int,
        help=f"Maximum type nesting depth (default: {DEFAULT_MAX_DEPTH}, range: 1-9)",
    )

    parser.add_argument(
        "--validate",
        dest="validate_output",
        action="store_true",
        help="Check that the generated SDL parses before writing it",
    )

    parser.add_argument(
        "--skip-introspection-types",
        action="store_true",
        help="Leave out the __Schema, __Type, ... introspection types",
    )

    parser.add_argument(
        "--input-field-descriptions",
        action="store_true",
        help="Print each input field's own description instead of the input type's",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def load_schema(settings: Settings) -> SchemaDoc:
    if settings.input_path is not None:
        LOGGER.info("Reading introspection result from %s", settings.input_path)
        return load_introspection(settings.input_path)

    return fetch_schema(
        settings.endpoint,
        authorization=settings.authorization,
        timeout=settings.timeout,
        max_depth=settings.max_depth,
    )


def run(settings: Settings) -> str:
    """Load the schema described by ``settings`` and return it as SDL."""
    schema = load_schema(settings)
    printer = SchemaPrinter(
        skip_introspection_types=settings.skip_introspection_types,
        input_field_descriptions=settings.input_field_descriptions,
    )
    sdl = printer.print_schema(schema)
    if settings.validate_output:
        validate_sdl(sdl)
    return sdl


def main(argv: list[str] | None = None) -> int:
    """Run the tool and return the process exit code."""
    args = parse_args(argv)

    basicConfig(
        level=DEBUG if args.verbose else INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = Settings.from_env(**vars(args))
    except ValidationError as e:
        LOGGER.error("Invalid configuration: %s", e)
        return 1

    try:
        sdl = run(settings)
        if settings.output_path is not None:
            with open(settings.output_path, "w", encoding="utf-8") as f:
                f.write(sdl)
            LOGGER.info("Schema written to %s", settings.output_path)
        else:
            sys.stdout.write(sdl)
    except (IntrospectionError, httpx.HTTPError, httpx.InvalidURL, OSError) as e:
        LOGGER.error("Failed to print schema: %s", e)
        LOGGER.debug("Failure details", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
