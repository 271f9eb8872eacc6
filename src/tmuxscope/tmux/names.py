"""Name utilities for directories and sessions.

PUBLIC API:
  - sanitize_directory_name: Reduce free text to a safe directory name
  - session_name_for: Derive a tmux session name from a directory name
"""

import re

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_HYPHEN_RUNS = re.compile(r"-+")

# tmux rewrites these in session names, so derive the name tmux would store
_SESSION_FORBIDDEN = str.maketrans({".": "_", ":": "_"})


def sanitize_directory_name(name: str) -> str:
    """Replace unsafe characters with hyphens, collapse and trim them.

    Args:
        name: Free text from the user, e.g. "My Project!!".

    Returns:
        Sanitized name, e.g. "My-Project". May be empty.
    """
    hyphenated = _UNSAFE_CHARS.sub("-", name)
    return _HYPHEN_RUNS.sub("-", hyphenated).strip("-")


def session_name_for(basename: str) -> str:
    """Derive the session name used for a directory basename."""
    return basename.translate(_SESSION_FORBIDDEN)
