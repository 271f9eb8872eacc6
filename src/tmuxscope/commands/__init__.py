"""tmuxscope commands."""

from .sessions import ls, switch, kill
from .projects import projects, bases, config
from .create import new, mkproject

__all__ = ["ls", "switch", "kill", "projects", "bases", "config", "new", "mkproject"]
