"""Directory commands - browse candidate directories and search roots."""

from typing import Any, Optional

from ..app import app
from ._helpers import matches_filter


@app.command(
    display="table",
    headers=["Name", "Path", "Root"],
    fastmcp={"type": "tool", "description": "List directories that can start a new session"},
)
def projects(state, filter: Optional[str] = None) -> list[dict]:
    """List project directories under the configured search paths."""
    return [
        {"Name": candidate.basename, "Path": str(candidate.path), "Root": str(candidate.source_root)}
        for candidate in state.manager.list_creation_candidates()
        if matches_filter(filter, candidate.label, candidate.path)
    ]


@app.command(
    display="table",
    headers=["Base", "Path"],
    fastmcp={"type": "tool", "description": "List base directories for new projects"},
)
def bases(state) -> list[dict]:
    """List existing search roots usable as parents for new projects."""
    return [{"Base": path.name, "Path": str(path)} for path in state.manager.list_base_directories()]


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Show the active tmuxscope configuration"},
)
def config(state) -> dict[str, Any]:
    """Show the active configuration."""
    current = state.manager.config
    return {
        "elements": [
            {"type": "heading", "content": "Configuration", "level": 2},
            {"type": "list", "items": [f"`{path}`" for path in current.search_paths], "ordered": True},
        ],
        "frontmatter": {
            "multiplexer_command": current.multiplexer_command,
            "max_scan_depth": current.max_scan_depth,
            "exclude_patterns": ", ".join(current.exclude_patterns) or "-",
        },
    }
