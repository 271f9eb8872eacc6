"""Core process execution - the only place tmuxscope spawns processes.

PUBLIC API:
  - run_command: Execute a command from an argument vector
  - is_inside_tmux: Check whether this process runs inside a tmux client
"""

import logging
import os
import subprocess
from typing import Callable, List, Tuple

from .exceptions import ExecutionError

logger = logging.getLogger(__name__)

type Runner = Callable[[str, List[str]], Tuple[int, str, str]]


def run_command(command: str, args: List[str]) -> Tuple[int, str, str]:
    """Run command with discrete arguments, return (returncode, stdout, stderr).

    Arguments are never passed through a shell, so session and directory
    names containing spaces or metacharacters reach the command unchanged.

    Raises:
        ExecutionError: If the command cannot be launched.
    """
    cmd = [command] + list(args)
    logger.debug(f"Running {cmd}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ExecutionError(command, e.strerror or str(e)) from e
    return result.returncode, result.stdout, result.stderr


def is_inside_tmux() -> bool:
    """Check if this process runs inside a tmux client.

    Read from the environment on every call.
    """
    return bool(os.environ.get("TMUX"))
