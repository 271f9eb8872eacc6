"""Command line entry point for tmuxscope.

`tmuxscope` starts the REPL; `tmuxscope --mcp` serves the same commands
over MCP. A broken tmuxscope.toml stops startup with exit status 2.
"""

import sys
import logging

from .config import load_config, merge_options
from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT = 2


def check_config() -> bool:
    """Load and validate tmuxscope.toml, logging the reason on failure."""
    try:
        merge_options(load_config())
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the REPL, or the MCP server when --mcp is given."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    argv = sys.argv[1:] if argv is None else argv

    if not check_config():
        return CONFIG_ERROR_EXIT

    # the app builds its state from the config file on import
    from .app import app

    if "--mcp" in argv:
        app.mcp.run()
    else:
        app.run(title="tmuxscope - tmux Session Browser")
    return 0


if __name__ == "__main__":
    sys.exit(main())
