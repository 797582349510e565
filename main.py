import curses
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import pandas as pd

from app_state import AppState
from column_config import load_column_widths
from config_paths import ensure_config_dirs, load_config
from log_setup import setup_logging
from orchestrator import Orchestrator

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

USAGE = "csvgrid - terminal CSV editor\n\nUsage:\n  csvgrid <file.csv>\n  csvgrid -v\n  csvgrid -h\n"


def load_state(path: str) -> AppState:
    """Load the CSV and its sidecar width config; raises on any CSV failure."""
    state = AppState.open(path)
    state.col_widths = load_column_widths(path)
    return state


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    path = args[0]

    try:
        ensure_config_dirs()
        setup_logging()
    except OSError as e:
        print(f"Logging disabled: {e}", file=sys.stderr)

    try:
        state = load_state(path)
    except (OSError, ValueError, pd.errors.ParserError) as e:
        logger.error("Load of %s failed: %s", path, e)
        print(f"Load failed: {e}", file=sys.stderr)
        sys.exit(1)

    if state.grid.is_empty():
        print(f"Load failed: {path} has no rows", file=sys.stderr)
        sys.exit(1)

    config = load_config()
    logger.info("Opened %s (%d rows x %d cols)", path, state.grid.num_rows, state.grid.num_cols)

    def curses_main(stdscr):
        Orchestrator(stdscr, state, config).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    main()
