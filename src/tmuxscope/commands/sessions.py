"""Session commands - list, switch to and kill tmux sessions."""

from typing import Any, Optional

from ..app import app
from ..errors import markdown_error_response, string_error_response, table_error_response
from ..tmux import ExecutionError
from ._helpers import matches_filter, outcome_response


@app.command(
    display="table",
    headers=["#", "Session", "Windows", "Attached"],
    fastmcp={"type": "tool", "description": "List tmux sessions"},
)
def ls(state, filter: Optional[str] = None) -> list[dict]:
    """List all tmux sessions."""
    try:
        sessions = state.manager.list_sessions()
    except ExecutionError as e:
        return table_error_response(e)

    return [
        {
            "#": session.display_index,
            "Session": session.name,
            "Windows": session.window_count,
            "Attached": "Yes" if session.attached else "No",
        }
        for session in sessions
        if matches_filter(filter, session.label)
    ]


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Switch to a tmux session"},
)
def switch(state, session: str) -> dict[str, Any]:
    """Switch to a session, or show how to attach when outside tmux."""
    try:
        return outcome_response(state.manager.activate(session))
    except ExecutionError as e:
        return markdown_error_response(e)


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Kill a tmux session"},
)
def kill(state, session: str) -> str:
    """Kill a tmux session."""
    try:
        outcome = state.manager.remove(session)
    except ExecutionError as e:
        return string_error_response(e)

    return outcome.message if outcome.success else string_error_response(outcome.message)
