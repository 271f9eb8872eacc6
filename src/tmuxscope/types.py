"""Type definitions for tmuxscope.

Sessions are snapshots of tmux state, candidates are snapshots of the
filesystem. Neither is cached: every query rebuilds them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional


type SessionName = str  # e.g., "backend" - tmux forbids ":" and "."

# Failure kinds reported in operation outcomes
type FailureKind = Literal["create_failed", "delete_failed", "switch_failed", "validation", "filesystem"]

# Delimiter for list-sessions format output, never valid inside a session name
FIELD_SEPARATOR = ":"
SESSION_FORMAT = FIELD_SEPARATOR.join(["#{session_name}", "#{session_windows}", "#{session_attached}"])


@dataclass(frozen=True)
class Session:
    """A live tmux session.

    Attributes:
        name: Session name.
        window_count: Number of windows in the session.
        attached: Whether at least one client is attached.
        display_index: 1-based position in the listing it came from, 0 if not listed.
    """

    name: SessionName
    window_count: int
    attached: bool
    display_index: int = 0

    @classmethod
    def from_format_line(cls, line: str, display_index: int = 0) -> Optional["Session"]:
        """Parse a ``name:windows:attached`` line.

        Returns:
            Session, or None if the line does not have exactly three valid fields.
        """
        parts = line.strip().split(FIELD_SEPARATOR)
        if len(parts) != 3:
            return None

        name, windows, attached = parts
        if not name:
            return None

        try:
            window_count = int(windows)
            clients = int(attached)
        except ValueError:
            return None

        if window_count < 1 or clients < 0:
            return None

        return cls(name=name, window_count=window_count, attached=clients > 0, display_index=display_index)

    @property
    def label(self) -> str:
        """Get display format for listings."""
        suffix = " [attached]" if self.attached else ""
        return f"{self.display_index}. {self.name} ({self.window_count} windows){suffix}"


@dataclass(frozen=True)
class CandidateDirectory:
    """A directory that can seed a new session."""

    path: Path
    basename: str
    source_root: Path

    @classmethod
    def from_path(cls, path: str | Path, source_root: str | Path | None = None) -> "CandidateDirectory":
        """Build a candidate from any path, expanding ``~`` and making it absolute."""
        absolute = Path(path).expanduser().absolute()
        root = Path(source_root).expanduser().absolute() if source_root else absolute.parent
        return cls(path=absolute, basename=absolute.name, source_root=root)

    @property
    def label(self) -> str:
        """Get display format: basename followed by its parent directory."""
        return f"{self.basename} ({self.path.parent})"


@dataclass
class OperationOutcome:
    """Result of a create, switch or delete call.

    Expected failures are reported here instead of raised. ``detail`` holds
    the multiplexer's stderr text when there is any.
    """

    success: bool
    message: str
    session: Optional[Session] = None
    created: bool = False
    kind: Optional[FailureKind] = None
    detail: str = ""
    requires_manual_attach: bool = False
    suggested_command: Optional[str] = None
    error: Optional[Exception] = None

    @classmethod
    def failed(cls, error: Exception, session: Optional[Session] = None) -> "OperationOutcome":
        """Build a failure outcome from one of the tmuxscope errors."""
        return cls(
            success=False,
            message=str(error),
            session=session,
            kind=getattr(error, "kind", None),
            detail=getattr(error, "stderr", ""),
            error=error,
        )
