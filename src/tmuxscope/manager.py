"""Session manager - the query/command surface every front end drives.

Composes the session repository and the directory scanner behind one
configuration. Expected failures (missing session, name collision, bad
directory name, mkdir failure) come back as OperationOutcome values; only
environment failures such as a missing tmux binary are raised.

PUBLIC API:
  - SessionManager: Facade over sessions and candidate directories
"""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .config import ScopeConfig, merge_options
from .errors import FilesystemError, ValidationError
from .scan import resolve_roots, scan
from .tmux import OperationError, SessionRepository, run_command, sanitize_directory_name, session_name_for
from .tmux.core import Runner
from .types import CandidateDirectory, OperationOutcome, Session

logger = logging.getLogger(__name__)


class SessionManager:
    """Single entry point for listing, creating, switching and removing sessions.

    Args:
        config: Initial settings, defaults if None.
        runner: Process executor handed to the repository.
    """

    def __init__(self, config: Optional[ScopeConfig] = None, runner: Runner = run_command):
        self._runner = runner
        self._config = config or ScopeConfig()
        self._repository = SessionRepository(self._config.multiplexer_command, runner)

    @property
    def config(self) -> ScopeConfig:
        return self._config

    @property
    def repository(self) -> SessionRepository:
        return self._repository

    def configure(self, options: Mapping[str, Any] | ScopeConfig | None = None) -> ScopeConfig:
        """Replace the configuration with defaults overridden by options.

        Fields not given in options go back to their defaults. Nothing is
        validated: bad search paths are skipped at scan time and a bad
        multiplexer command fails on first use.
        """
        self._config = merge_options(options)
        self._repository = SessionRepository(self._config.multiplexer_command, self._runner)
        logger.debug(f"Configured {self._config}")
        return self._config

    def list_sessions(self) -> List[Session]:
        return self._repository.list_sessions()

    def list_creation_candidates(self) -> List[CandidateDirectory]:
        config = self._config
        return scan(config.search_paths, config.max_scan_depth, config.exclude_patterns)

    def list_base_directories(self) -> List[Path]:
        """Existing search roots, offered as parents for new project directories."""
        return resolve_roots(self._config.search_paths)

    def activate(self, session_name: str) -> OperationOutcome:
        try:
            return self._repository.switch(session_name)
        except OperationError as e:
            return OperationOutcome.failed(e)

    def remove(self, session_name: str) -> OperationOutcome:
        try:
            return self._repository.delete(session_name)
        except OperationError as e:
            return OperationOutcome.failed(e)

    def create_from_candidate(self, candidate: CandidateDirectory, attach: bool = False) -> OperationOutcome:
        """Create a session for a directory, or activate it if it already exists.

        Args:
            candidate: Directory to root the session in.
            attach: Activate the session after creating it.

        Returns:
            Outcome with the resulting session. ``created`` is False when an
            existing session of the same name was activated instead.
        """
        name = session_name_for(candidate.basename)

        existing = self._repository.get_session(name)
        if existing is not None:
            logger.info(f"Session {name} already exists, activating it")
            outcome = self.activate(name)
            outcome.session = existing
            if outcome.success:
                outcome.message = f"Session '{name}' already exists. {outcome.message}"
            return outcome

        # tmux silently falls back to $HOME for a missing -c directory
        if not candidate.path.is_dir():
            return OperationOutcome.failed(FilesystemError(f"Not a directory: {candidate.path}"))

        try:
            session = self._repository.create(name, str(candidate.path))
        except OperationError as e:
            return OperationOutcome.failed(e)

        outcome = OperationOutcome(
            success=True,
            message=f"Created session '{name}' in {candidate.path}",
            session=session,
            created=True,
        )
        if attach:
            activation = self.activate(name)
            outcome.message = f"{outcome.message}. {activation.message}"
            outcome.requires_manual_attach = activation.requires_manual_attach
            outcome.suggested_command = activation.suggested_command
            if not activation.success:
                # The session exists; only the switch failed
                outcome.kind = activation.kind
                outcome.detail = activation.detail
                outcome.error = activation.error
        return outcome

    def create_in_new_directory(
        self, base_path: str | Path, requested_name: str, attach: bool = False
    ) -> OperationOutcome:
        """Create <base_path>/<sanitized name> and a session rooted there.

        Falls back to create_from_candidate when the directory already exists.
        """
        name = sanitize_directory_name(requested_name)
        if not name:
            return OperationOutcome.failed(ValidationError(f"Invalid directory name: {requested_name!r}"))

        base = Path(base_path).expanduser().absolute()
        target = base / name
        candidate = CandidateDirectory(path=target, basename=name, source_root=base)

        if target.is_dir():
            logger.info(f"Directory already exists: {target}")
            return self.create_from_candidate(candidate, attach=attach)

        try:
            target.mkdir(parents=True)
        except OSError as e:
            return OperationOutcome.failed(FilesystemError(f"Failed to create directory {target}: {e}"))

        logger.info(f"Created directory {target}")
        return self.create_from_candidate(candidate, attach=attach)
