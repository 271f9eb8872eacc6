"""Directory discovery under configured search roots.

PUBLIC API:
  - resolve_roots: Expand search paths to existing, unique directories
  - scan: Find candidate project directories under search roots
"""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .types import CandidateDirectory

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."
DEFAULT_MAX_DEPTH = 2


def _expand(pattern: str) -> Path | None:
    """Expand ~ and resolve to an absolute directory, None if that fails."""
    try:
        path = Path(pattern).expanduser().resolve()
    except (OSError, RuntimeError) as e:
        logger.warning(f"Cannot resolve search path {pattern}: {e}")
        return None

    if not path.is_dir():
        logger.warning(f"Skipping search path {pattern}: not a directory")
        return None
    return path


def resolve_roots(roots: Iterable[str]) -> List[Path]:
    """Expand search paths, dropping missing and duplicate ones.

    Args:
        roots: Path patterns in priority order, may start with "~".

    Returns:
        Absolute existing directories, first occurrence kept.
    """
    resolved: List[Path] = []
    for pattern in roots:
        path = _expand(pattern)
        if path is not None and path not in resolved:
            resolved.append(path)
    return resolved


def _is_excluded(name: str, exclude_patterns: Sequence[str]) -> bool:
    if name.startswith(HIDDEN_PREFIX):
        return True
    return any(fnmatch.fnmatch(name, pattern) for pattern in exclude_patterns)


def _safe_subdirs(path: Path) -> List[os.DirEntry]:
    """List subdirectories sorted by name, empty if the directory is unreadable."""
    try:
        with os.scandir(path) as entries:
            return sorted(
                (entry for entry in entries if entry.is_dir(follow_symlinks=False)),
                key=lambda entry: entry.name,
            )
    except OSError as e:
        # Permission denied or removed mid-scan
        logger.warning(f"Skipping unreadable directory {path}: {e}")
        return []


def _walk(directory: Path, depth: int, max_depth: int, exclude_patterns: Sequence[str]) -> Iterator[Path]:
    """Yield subdirectories depth-first in pre-order, directory itself excluded."""
    if depth >= max_depth:
        return

    for entry in _safe_subdirs(directory):
        if _is_excluded(entry.name, exclude_patterns):
            continue
        child = Path(entry.path)
        yield child
        yield from _walk(child, depth + 1, max_depth, exclude_patterns)


def scan(
    roots: Iterable[str],
    max_depth: int = DEFAULT_MAX_DEPTH,
    exclude_patterns: Sequence[str] = (),
) -> List[CandidateDirectory]:
    """Find candidate directories under every search root.

    Args:
        roots: Search path patterns in priority order.
        max_depth: Deepest level returned, the root being level 0.
        exclude_patterns: Extra fnmatch patterns for names to skip; hidden
            names are always skipped. Excluded directories are not descended.

    Returns:
        Candidates grouped by root in discovery order, each path once.
    """
    seen: set[Path] = set()
    candidates: List[CandidateDirectory] = []

    for root in resolve_roots(roots):
        found = 0
        for path in _walk(root, 0, max_depth, exclude_patterns):
            if path in seen:
                continue
            seen.add(path)
            candidates.append(CandidateDirectory(path=path, basename=path.name, source_root=root))
            found += 1
        logger.debug(f"Found {found} directories under {root}")

    return candidates
