"""Create commands - start sessions in existing or new project directories."""

from typing import Any, Optional

from ..app import app
from ..errors import markdown_error_response
from ..tmux import ExecutionError
from ..types import CandidateDirectory
from ._helpers import outcome_response


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Create or reuse a tmux session for a directory"},
)
def new(state, path: str, attach: bool = True) -> dict[str, Any]:
    """Start a session named after the directory, reusing an existing one."""
    candidate = CandidateDirectory.from_path(path)
    try:
        return outcome_response(state.manager.create_from_candidate(candidate, attach=attach))
    except ExecutionError as e:
        return markdown_error_response(e)


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Create a project directory and a tmux session in it"},
)
def mkproject(state, name: str, base: Optional[str] = None, attach: bool = True) -> dict[str, Any]:
    """Create a directory under a base directory and start a session there.

    Without base, the first existing search path is used.
    """
    if base is None:
        bases = state.manager.list_base_directories()
        if not bases:
            paths = ", ".join(state.manager.config.search_paths)
            return markdown_error_response(f"No valid base directories found in configured search paths: {paths}")
        base = str(bases[0])

    try:
        return outcome_response(state.manager.create_in_new_directory(base, name, attach=attach))
    except ExecutionError as e:
        return markdown_error_response(e)
