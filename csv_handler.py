import logging
import os
from typing import List

import pandas as pd

from grid_model import GridModel, GridShapeError

logger = logging.getLogger(__name__)


class CsvHandler:
    TMP_SUFFIX = ".tmp"
    ARCHIVE_SUFFIX = ".completed.csv"

    def __init__(self, path: str):
        self.path = path

    @property
    def tmp_path(self) -> str:
        return self.path + self.TMP_SUFFIX

    @property
    def archive_path(self) -> str:
        return self.path + self.ARCHIVE_SUFFIX

    # ---------- read ----------
    def load(self) -> List[List[str]]:
        df = pd.read_csv(
            self.path,
            header=None,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8",
        )
        # short rows come back padded with NaN
        missing = df.isna()
        if missing.to_numpy().any():
            line = int(missing.any(axis=1).to_numpy().argmax())
            raise GridShapeError(
                f"Row {line} has fewer than {df.shape[1]} fields"
            )
        return [list(row) for row in df.itertuples(index=False, name=None)]

    def load_grid(self) -> GridModel:
        return GridModel.from_rows(self.load())

    # ---------- write ----------
    @staticmethod
    def _write_frame(df: pd.DataFrame, fh):
        df.to_csv(fh, header=False, index=False, lineterminator="\n")

    def save(self, grid: GridModel) -> None:
        """Write to a sibling temp file, then atomically rename over the target."""
        tmp = self.tmp_path
        try:
            with open(tmp, "w", encoding="utf-8", newline="") as fh:
                self._write_frame(grid.df, fh)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self.path)
        except Exception:
            try:
                os.remove(tmp)
            except OSError:
                pass
            logger.exception("Save of %s failed", self.path)
            raise
        logger.info("Saved %s (%d rows)", self.path, grid.num_rows)

    def archive_row(self, header: List[str], row: List[str]) -> None:
        """Append a row to the completed-file, writing the header on first use."""
        path = self.archive_path
        lines = [] if os.path.exists(path) else [header]
        lines.append(row)
        try:
            with open(path, "a", encoding="utf-8", newline="") as fh:
                self._write_frame(pd.DataFrame(lines, dtype=object), fh)
        except Exception:
            logger.exception("Archive to %s failed", path)
            raise
        logger.info("Archived row to %s", path)
