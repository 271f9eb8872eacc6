"""Pure tmux operations - process execution, session state and naming.

PUBLIC API:
  - run_command: Run a command from an argument vector
  - is_inside_tmux: Check for the TMUX environment marker
  - SessionRepository: List, create, switch and kill sessions
  - sanitize_directory_name: Reduce free text to a safe directory name
  - session_name_for: Derive a session name from a directory name
  - TmuxError: Base exception for tmux operations
  - ExecutionError: Multiplexer binary could not be launched
  - OperationError: Multiplexer rejected a session operation
"""

from .core import run_command, is_inside_tmux

from .session import SessionRepository

from .names import sanitize_directory_name, session_name_for

from .exceptions import TmuxError, ExecutionError, OperationError

__all__ = [
    "run_command",
    "is_inside_tmux",
    "SessionRepository",
    "sanitize_directory_name",
    "session_name_for",
    "TmuxError",
    "ExecutionError",
    "OperationError",
]
