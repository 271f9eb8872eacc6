"""Session management for tmux.

PUBLIC API:
  - SessionRepository: List, create, switch and kill tmux sessions
"""

import logging
import shlex
from typing import List, Optional

from ..types import SESSION_FORMAT, OperationOutcome, Session
from .core import Runner, is_inside_tmux, run_command
from .exceptions import OperationError

logger = logging.getLogger(__name__)


def _exact(name: str) -> str:
    """Build an exact-match session target so 'web' never resolves to 'webapp'."""
    return f"={name}"


class SessionRepository:
    """Reads and mutates tmux sessions through one multiplexer command.

    Args:
        command: Multiplexer executable name or path.
        runner: Process executor, ``run_command`` unless replaced in tests.
    """

    def __init__(self, command: str = "tmux", runner: Runner = run_command):
        self.command = command
        self._runner = runner

    def _run(self, args: List[str]) -> tuple[int, str, str]:
        return self._runner(self.command, args)

    def list_sessions(self) -> List[Session]:
        """Get all tmux sessions in server order.

        Returns:
            List of Session objects, empty when no server or no sessions exist.

        Raises:
            ExecutionError: If the multiplexer cannot be launched.
        """
        code, out, err = self._run(["list-sessions", "-F", SESSION_FORMAT])

        if code != 0:
            # "no server running" and friends are the normal empty state
            logger.debug(f"list-sessions exited {code}: {err.strip()}")
            return []

        sessions = []
        for line in out.splitlines():
            if not line.strip():
                continue
            session = Session.from_format_line(line, display_index=len(sessions) + 1)
            if session is None:
                logger.debug(f"Skipping malformed session line: {line!r}")
                continue
            sessions.append(session)

        return sessions

    def get_session(self, name: str) -> Optional[Session]:
        """Get a live session by exact name."""
        for session in self.list_sessions():
            if session.name == name:
                return session
        return None

    def create(self, name: str, path: str) -> Session:
        """Create a new detached session rooted at path.

        Args:
            name: Session name.
            path: Starting directory for the session.

        Returns:
            The live session, or one built from the inputs if tmux does not list it yet.

        Raises:
            OperationError: If tmux rejects the session (name collision, bad path).
        """
        code, _, err = self._run(["new-session", "-d", "-s", name, "-c", str(path)])
        if code != 0:
            raise OperationError("create_failed", name, f"Failed to create session '{name}'", err)

        logger.info(f"Created session {name} in {path}")
        return self.get_session(name) or Session(name=name, window_count=1, attached=False)

    def delete(self, name: str) -> OperationOutcome:
        """Kill a tmux session.

        Raises:
            OperationError: If the session is gone or tmux fails.
        """
        code, _, err = self._run(["kill-session", "-t", _exact(name)])
        if code != 0:
            raise OperationError("delete_failed", name, f"Failed to delete session '{name}'", err)

        logger.info(f"Killed session {name}")
        return OperationOutcome(success=True, message=f"Deleted session '{name}'")

    def attach_command(self, name: str) -> str:
        """Build the shell command a user runs to attach from outside tmux."""
        return shlex.join([self.command, "attach-session", "-t", _exact(name)])

    def switch(self, name: str) -> OperationOutcome:
        """Move the current client to a session.

        Inside tmux the client is switched directly. Outside tmux this process
        cannot attach a terminal, so the outcome carries the attach command.

        Raises:
            OperationError: If tmux refuses to switch.
        """
        if not is_inside_tmux():
            command = self.attach_command(name)
            return OperationOutcome(
                success=True,
                message=f"Session '{name}' is ready. To attach, run: {command}",
                requires_manual_attach=True,
                suggested_command=command,
            )

        code, _, err = self._run(["switch-client", "-t", _exact(name)])
        if code != 0:
            raise OperationError("switch_failed", name, f"Failed to switch to session '{name}'", err)

        logger.info(f"Switched to session {name}")
        return OperationOutcome(success=True, message=f"Switched to session '{name}'")
