import logging

from column_config import ColumnWidths
from csv_handler import CsvHandler
from grid_model import GridModel

logger = logging.getLogger(__name__)


class ReloadError(RuntimeError):
    """The save reached disk but reading it back failed."""


class AppState:
    def __init__(self, grid: GridModel, file_path: str, file_handler: CsvHandler, col_widths=None):
        self.grid = grid
        self.file_path = file_path
        self.file_handler = file_handler
        self.col_widths = col_widths if col_widths is not None else ColumnWidths()

    @classmethod
    def open(cls, file_path: str, col_widths=None) -> "AppState":
        handler = CsvHandler(file_path)
        return cls(handler.load_grid(), file_path, handler, col_widths)

    def save(self):
        """Persist the grid, then reload it so memory matches what is on disk."""
        self.file_handler.save(self.grid)
        try:
            rows = self.file_handler.load()
        except (OSError, ValueError) as e:
            logger.exception("Reload of %s after save failed", self.file_path)
            raise ReloadError(str(e)) from e
        self.grid.replace_rows(rows)

    def archive_row(self, row: int):
        self.file_handler.archive_row(self.grid.header(), self.grid.row_values(row))
