from typing import List, Tuple

import pandas as pd


class GridShapeError(ValueError):
    """Raised when rows do not all have the header's width."""


class GridModel:
    """
    Owns the cell matrix and the selection cursor.
    Row 0 is the header row. No rendering or input logic.
    """

    def __init__(self, df: pd.DataFrame):
        self.df = df
        self.curr_row = 0
        self.curr_col = 0

    @classmethod
    def from_rows(cls, rows: List[List[str]]) -> "GridModel":
        return cls(cls._frame_from_rows(rows))

    @staticmethod
    def _frame_from_rows(rows: List[List[str]]) -> pd.DataFrame:
        if not rows:
            return pd.DataFrame(dtype=object)
        width = len(rows[0])
        for idx, row in enumerate(rows):
            if len(row) != width:
                raise GridShapeError(
                    f"Row {idx} has {len(row)} fields, expected {width}"
                )
        df = pd.DataFrame([[str(v) for v in row] for row in rows], dtype=object)
        df.columns = pd.RangeIndex(width)
        return df

    # ---------- shape ----------
    @property
    def num_rows(self) -> int:
        return len(self.df)

    @property
    def num_cols(self) -> int:
        return len(self.df.columns)

    @property
    def selection(self) -> Tuple[int, int]:
        return self.curr_row, self.curr_col

    def is_empty(self) -> bool:
        return self.num_rows == 0 or self.num_cols == 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def _relabel_columns(self):
        self.df.columns = pd.RangeIndex(len(self.df.columns))

    def _clamp_selection(self):
        self.curr_row = min(max(0, self.curr_row), max(0, self.num_rows - 1))
        self.curr_col = min(max(0, self.curr_col), max(0, self.num_cols - 1))

    # ---------- cells ----------
    def get_cell(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            return ""
        return str(self.df.iat[row, col])

    def set_cell(self, row: int, col: int, value: str):
        if not self.in_bounds(row, col):
            return
        self.df.iat[row, col] = str(value)

    def current_value(self) -> str:
        return self.get_cell(self.curr_row, self.curr_col)

    def header(self) -> List[str]:
        return self.row_values(0)

    def row_values(self, row: int) -> List[str]:
        if not 0 <= row < self.num_rows:
            return []
        return [str(v) for v in self.df.iloc[row].tolist()]

    def rows(self) -> List[List[str]]:
        return [
            [str(v) for v in row]
            for row in self.df.itertuples(index=False, name=None)
        ]

    def replace_rows(self, rows: List[List[str]]):
        self.df = self._frame_from_rows(rows)
        self._clamp_selection()

    # ---------- navigation ----------
    def select_cell(self, row: int, col: int) -> Tuple[int, int]:
        if self.in_bounds(row, col):
            self.curr_row = row
            self.curr_col = col
        return self.selection

    def move_left(self):
        return self.select_cell(self.curr_row, self.curr_col - 1)

    def move_right(self):
        return self.select_cell(self.curr_row, self.curr_col + 1)

    def move_up(self):
        return self.select_cell(self.curr_row - 1, self.curr_col)

    def move_down(self):
        return self.select_cell(self.curr_row + 1, self.curr_col)

    # ---------- structure ----------
    def insert_column_after(self, col: int) -> bool:
        if self.is_empty() or not 0 <= col < self.num_cols:
            return False
        insert_at = col + 1
        self.df.insert(insert_at, "__new__", "")
        self._relabel_columns()
        self.curr_col = insert_at
        return True

    def insert_row_after(self, row: int) -> bool:
        if not 0 <= row < self.num_rows:
            return False
        insert_at = row + 1
        new_row = pd.DataFrame(
            [[""] * self.num_cols], columns=self.df.columns, dtype=object
        )
        self.df = pd.concat(
            [self.df.iloc[:insert_at], new_row, self.df.iloc[insert_at:]],
            ignore_index=True,
        )
        self.curr_row = insert_at
        self.curr_col = 0
        return True

    def delete_row(self, row: int) -> bool:
        # header row is protected
        if row == 0 or self.num_rows <= 1 or not 0 <= row < self.num_rows:
            return False
        self.df = self.df.drop(index=self.df.index[row]).reset_index(drop=True)
        self.curr_row = min(row, self.num_rows - 1)
        self.curr_col = 0
        return True

    def delete_column(self, col: int) -> bool:
        if self.num_cols <= 1 or not 0 <= col < self.num_cols:
            return False
        self.df = self.df.drop(columns=self.df.columns[col])
        self._relabel_columns()
        if self.curr_col >= self.num_cols:
            self.curr_col = self.num_cols - 1
        return True
