"""Runtime settings for the command line tool."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from introspect_sdl.client import DEFAULT_TIMEOUT
from introspect_sdl.query import DEFAULT_MAX_DEPTH

ENDPOINT_ENV = "SERVER_ENDPOINT"
AUTHORIZATION_ENV = "AUTHORIZATION_HEADER"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoint: str | None = None
    authorization: str | None = None
    input_path: Path | None = None
    output_path: Path | None = None
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, le=9)
    validate_output: bool = False
    skip_introspection_types: bool = False
    input_field_descriptions: bool = False
    verbose: bool = False

    @model_validator(mode="after")
    def check_source(self) -> "Settings":
        if self.input_path is None and not (self.endpoint and self.endpoint.strip()):
            msg = f"{ENDPOINT_ENV} (or --endpoint) must be provided when no input file is given"
            raise ValueError(msg)
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> "Settings":
        """Build settings from environment variables, letting non-None overrides win."""
        if environ is None:
            environ = os.environ

        values: dict[str, Any] = {
            "endpoint": environ.get(ENDPOINT_ENV) or None,
            "authorization": environ.get(AUTHORIZATION_ENV) or None,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
