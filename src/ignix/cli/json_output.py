"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from ignix.cli.output import machine_output


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error: str


class AddResponse(BaseModel):
    """Result document of ``ignix add --json``."""

    model_config = ConfigDict(strict=True)

    success: bool = True
    requested: list[str]
    installed: list[str]
    dependencies: list[str]
    skipped: list[str]


class ListResponse(BaseModel):
    """Result document of ``ignix list --json``.

    Exactly one of the collections is set, matching the namespace listed.
    """

    model_config = ConfigDict(strict=True)

    success: bool = True
    components: list[str] | None = None
    templates: list[str] | None = None
    themes: list[str] | None = None


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode='json') before
    passing to this function.
    """
    machine_output(json.dumps(data, indent=2))


def emit_json_error(error: str, exit_code: int = 1) -> None:
    """Output error as JSON and exit.

    Raises:
        SystemExit: Always raises to terminate with specified exit code
    """
    emit_json(ErrorResponse(error=error).model_dump(mode="json"))
    raise SystemExit(exit_code)
