"""tmuxscope ReplKit2 application.

Main application entry point providing dual REPL/MCP functionality for
browsing, creating and removing tmux sessions. All logic lives in the
session manager held by the application state.
"""

from dataclasses import dataclass, field

from replkit2 import App

from .config import load_config, merge_options
from .manager import SessionManager


def _manager_from_config_file() -> SessionManager:
    return SessionManager(merge_options(load_config()))


@dataclass
class TmuxScopeState:
    """Application state for tmuxscope.

    Attributes:
        manager: Session manager built from tmuxscope.toml at startup.
    """

    manager: SessionManager = field(default_factory=_manager_from_config_file)


# Must be created before command imports for decorator registration
app = App(
    "tmuxscope",
    TmuxScopeState,
    uri_scheme="tmuxscope",
    fastmcp={
        "description": "Browse, create and switch tmux sessions",
        "tags": {"terminal", "tmux", "sessions"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import sessions  # noqa: E402, F401
from .commands import projects  # noqa: E402, F401
from .commands import create  # noqa: E402, F401
