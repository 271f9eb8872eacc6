"""Configuration management for tmuxscope.

Handles defaults, option merging and settings from tmuxscope.toml.
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional
import tomllib

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tmuxscope.toml"

DEFAULT_SEARCH_PATHS = ["~/projects", "~/work", "~/dev", "~/.config", "~/Documents"]


@dataclass(frozen=True)
class ScopeConfig:
    """Settings for one session manager.

    Attributes:
        search_paths: Roots scanned for project directories, in priority order.
        max_scan_depth: Deepest directory level offered, the root being level 0.
        multiplexer_command: Executable used for every tmux call.
        exclude_patterns: fnmatch patterns for directory names to skip.
    """

    search_paths: list[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_PATHS))
    max_scan_depth: int = 2
    multiplexer_command: str = "tmux"
    exclude_patterns: list[str] = field(default_factory=list)


def _user_config_file() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "tmuxscope" / CONFIG_FILENAME


def find_config_file() -> Optional[Path]:
    """Find tmuxscope.toml in current or parent directories, then the user config dir."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    user_file = _user_config_file()
    if user_file.exists():
        return user_file

    return None


def load_config(path: Optional[Path] = None) -> dict:
    """Load raw settings from a TOML file.

    Settings may sit at the top level or in a [default] table.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    if path is None:
        path = find_config_file()

    if path is None or not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    default = data.get("default")
    return dict(default) if isinstance(default, dict) else data


def _check_option(key: str, value: Any) -> Any:
    """Return value in the field's type, or raise ConfigError."""
    if key in ("search_paths", "exclude_patterns"):
        # a lone string would otherwise be split into characters
        if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"{key} must be a list of strings, got {value!r}")
        return list(value)
    if key == "max_scan_depth":
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"max_scan_depth must be a non-negative integer, got {value!r}")
        return value
    if key == "multiplexer_command":
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"multiplexer_command must be a non-empty string, got {value!r}")
        return value
    return value


def merge_options(options: Mapping[str, Any] | ScopeConfig | None, base: Optional[ScopeConfig] = None) -> ScopeConfig:
    """Override base settings field by field.

    Args:
        options: Caller settings; missing fields keep the base value.
        base: Settings to start from, defaults if None.

    Returns:
        New ScopeConfig.

    Raises:
        ConfigError: If a known option has the wrong type.
    """
    base = base or ScopeConfig()
    if options is None:
        return base
    if isinstance(options, ScopeConfig):
        return options

    known = {f.name for f in fields(ScopeConfig)}
    overrides = {}
    for key, value in options.items():
        if key not in known:
            logger.warning(f"Ignoring unknown option: {key}")
            continue
        overrides[key] = _check_option(key, value)

    return replace(base, **overrides)
