"""Shared helper functions for commands.

PUBLIC API:
  - outcome_response: Render an operation outcome for markdown display
  - matches_filter: Case-insensitive substring filter for table rows
"""

from typing import Any

from replkit2.textkit.icons import ICONS

from ..types import OperationOutcome

__all__ = ["outcome_response", "matches_filter"]


def outcome_response(outcome: OperationOutcome) -> dict[str, Any]:
    """Render an operation outcome.

    Args:
        outcome: Result from a session manager call

    Returns:
        Markdown display dict; the attach command is shown as a code block
        when the caller has to attach by hand
    """
    icon = ICONS["success"] if outcome.success else ICONS["error"]
    elements: list[dict[str, Any]] = [{"type": "text", "content": f"{icon} {outcome.message}"}]

    if outcome.requires_manual_attach and outcome.suggested_command:
        elements.append({"type": "code_block", "content": outcome.suggested_command, "language": "bash"})

    frontmatter: dict[str, Any] = {"status": "success" if outcome.success else "error"}
    if outcome.session:
        frontmatter["session"] = outcome.session.name
    if outcome.kind:
        frontmatter["kind"] = outcome.kind

    return {"elements": elements, "frontmatter": frontmatter}


def matches_filter(filter: str | None, *fields: Any) -> bool:
    if not filter:
        return True
    searchable = " ".join(str(f) for f in fields).lower()
    return filter.lower() in searchable
