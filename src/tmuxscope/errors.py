"""Error taxonomy and shared error responses for tmuxscope.

Engine errors carry a ``kind`` so operation outcomes can report what failed.
Multiplexer errors live in ``tmuxscope.tmux.exceptions``; the errors here
cover caller input, the filesystem and configuration.

Commands render hard failures through the response helpers, one per display
type.

PUBLIC API:
  - TmuxScopeError: Base exception for all tmuxscope errors
  - ValidationError: Caller input rejected before any side effect
  - FilesystemError: Session directory missing or could not be created
  - ConfigError: Configuration file unreadable or invalid
  - markdown_error_response: Create error response for markdown display
  - table_error_response: Create error response for table display
  - string_error_response: Create error response for string display
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class TmuxScopeError(Exception):
    """Base exception for all tmuxscope errors."""

    kind: str = "error"


class ValidationError(TmuxScopeError):
    """Raised when a requested name sanitizes to nothing."""

    kind = "validation"


class FilesystemError(TmuxScopeError):
    """Raised when a project directory cannot be created."""

    kind = "filesystem"


class ConfigError(TmuxScopeError):
    """Raised when the configuration file cannot be read or parsed."""

    kind = "config"


def _describe(error: Exception | str) -> tuple[str, str]:
    """Split an error into (kind, message); plain strings are generic errors."""
    if isinstance(error, Exception):
        return getattr(error, "kind", "error"), str(error)
    return "error", error


def markdown_error_response(error: Exception | str) -> dict[str, Any]:
    """Render a failure as a single markdown line, kind in the frontmatter."""
    kind, message = _describe(error)
    return {"elements": [{"type": "text", "content": f"Error: {message}"}], "frontmatter": {"status": "error", "kind": kind}}


def table_error_response(error: Exception | str) -> list[dict[str, Any]]:
    """Log a failure and show an empty table."""
    kind, message = _describe(error)
    logger.warning(f"Listing failed ({kind}): {message}")
    return []


def string_error_response(error: Exception | str) -> str:
    return f"Error: {_describe(error)[1]}"
