import logging
import os
from typing import Dict, Optional

from file_access import read_lines, remove_file, write_lines

logger = logging.getLogger(__name__)

DEFAULT_COL_WIDTH = 10
DEFAULT_CONFIG_COLUMNS = 11  # columns 0..10


def config_path_for(csv_path: str) -> str:
    """Sidecar path: the csv path with its extension replaced by `.config`."""
    directory, name = os.path.split(csv_path)
    base, _ = os.path.splitext(name)
    return os.path.join(directory, base + ".config")


class ColumnWidths:
    """Sparse column -> display width map with a default for absent columns."""

    def __init__(self, widths: Optional[Dict[int, int]] = None, default: int = DEFAULT_COL_WIDTH):
        self.widths: Dict[int, int] = dict(widths or {})
        self.default = default

    def get(self, col: int) -> int:
        return self.widths.get(col, self.default)

    def shift_for_insert(self, col: int):
        # the new column lands at col + 1 and takes the default width
        self.widths = {
            (c + 1 if c > col else c): w for c, w in self.widths.items()
        }

    def shift_for_delete(self, col: int):
        shifted = {}
        for c, w in self.widths.items():
            if c == col:
                continue
            shifted[c - 1 if c > col else c] = w
        self.widths = shifted


def default_config_lines():
    return [f"{col}:{DEFAULT_COL_WIDTH}" for col in range(DEFAULT_CONFIG_COLUMNS)]


def create_config(path: str) -> ColumnWidths:
    write_lines(path, default_config_lines())
    logger.info("Created column config %s", path)
    return ColumnWidths()


def parse_config_lines(lines) -> Dict[int, int]:
    widths: Dict[int, int] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(":")
        if len(parts) != 2:
            continue
        try:
            col = int(parts[0])
            width = int(parts[1])
        except ValueError:
            continue
        if col < 0 or width <= 0:
            continue
        widths[col] = width
    return widths


def load_column_widths(csv_path: str) -> ColumnWidths:
    path = config_path_for(csv_path)
    try:
        lines = read_lines(path)
    except FileNotFoundError:
        logger.info("No column config at %s, using default widths", path)
        try:
            return create_config(path)
        except OSError as e:
            logger.warning("Could not create column config %s: %s", path, e)
            return ColumnWidths()
    except UnicodeDecodeError:
        logger.warning("Column config %s corrupted, regenerating defaults", path)
        try:
            remove_file(path)
            return create_config(path)
        except OSError as e:
            logger.warning("Could not regenerate column config %s: %s", path, e)
            return ColumnWidths()
    except OSError as e:
        logger.warning("Could not read column config %s: %s", path, e)
        return ColumnWidths()

    widths = parse_config_lines(lines)
    logger.info("Loaded column config %s (%d entries)", path, len(widths))
    return ColumnWidths(widths)
