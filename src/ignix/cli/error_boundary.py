"""Error boundary handling for CLI commands.

This module provides a decorator that catches exceptions at CLI entry points
and renders them as a clean message (human mode) or as the single JSON error
document (``--json`` mode), then exits with status 1.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ignix.cli.json_output import emit_json_error
from ignix.cli.output import user_output
from ignix.core.errors import IgnixError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])

# Failures with a message fit for users; anything else is a bug and keeps its traceback.
WELL_KNOWN_ERRORS: tuple[type[Exception], ...] = (IgnixError, ValueError, OSError)


def _debug_enabled() -> bool:
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is None:
        return False
    return bool(getattr(click_ctx.obj, "debug", False))


def command_error_boundary(func: T) -> T:
    """Decorator that turns execution errors into exit status 1.

    Inspects the ``json_mode`` keyword argument of the wrapped command:

    - JSON mode: any exception becomes ``{"success": false, "error": ...}``
      on stdout. No traceback, no other output.
    - Human mode: well-known errors (IgnixError, ValueError, OSError) print a
      red ``Error: <message>`` on stderr. Other exceptions bubble up with a
      full stack trace, as do all exceptions when ``--debug`` is set.

    SystemExit and click's own exceptions pass through unchanged.

    Example:
        @click.command()
        @click.option("--json", "json_mode", is_flag=True)
        @click.pass_obj
        @command_error_boundary
        def my_command(ctx: IgnixContext, json_mode: bool) -> None:
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (SystemExit, click.ClickException, click.Abort):
            raise
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            if kwargs.get("json_mode", False):
                emit_json_error(str(e) or type(e).__name__)
            if _debug_enabled() or not isinstance(e, WELL_KNOWN_ERRORS):
                raise
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
