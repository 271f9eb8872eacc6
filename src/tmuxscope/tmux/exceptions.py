"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - ExecutionError: Multiplexer binary could not be launched
  - OperationError: Multiplexer ran but rejected a session operation
"""

from typing import Literal

from ..errors import TmuxScopeError

type OperationKind = Literal["create_failed", "delete_failed", "switch_failed"]


class TmuxError(TmuxScopeError):
    """Base exception for all tmux operations."""

    pass


class ExecutionError(TmuxError):
    """Raised when the multiplexer command cannot be started at all."""

    kind = "execution"

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Cannot run '{command}': {reason}")


class OperationError(TmuxError):
    """Raised when tmux exits non-zero for a session operation.

    Attributes:
        kind: Which operation failed.
        session: Session name the operation targeted.
        stderr: Diagnostic text from tmux, verbatim.
    """

    def __init__(self, kind: OperationKind, session: str, message: str, stderr: str = ""):
        self.kind = kind
        self.session = session
        self.stderr = stderr.strip()
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)
