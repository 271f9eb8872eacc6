"""tmux session browser and launcher.

Lists, switches to, creates and deletes tmux sessions, and discovers project
directories under configured search roots to start new sessions in. The
engine is front-end agnostic; a ReplKit2 app exposes it as REPL and MCP
commands.

PUBLIC API:
  - SessionManager: Query/command facade for sessions and directories
  - ScopeConfig: Manager settings
  - Session: Live tmux session snapshot
  - CandidateDirectory: Directory that can seed a new session
  - OperationOutcome: Result of create, switch and delete calls
"""

from .config import ScopeConfig
from .manager import SessionManager
from .types import CandidateDirectory, OperationOutcome, Session

__version__ = "0.1.0"
__all__ = ["SessionManager", "ScopeConfig", "Session", "CandidateDirectory", "OperationOutcome"]
