import unittest

from column_config import ColumnWidths
from grid_model import GridModel
from grid_pane import GridPane, fit_text


class DummyWin:
    def __init__(self, h=24, w=120):
        self._h = h
        self._w = w
        self.calls = []

    def getmaxyx(self):
        return self._h, self._w

    def erase(self):
        self.calls = []

    def refresh(self):
        pass

    def addnstr(self, y, x, text, n, attr=0):
        self.calls.append((y, x, text[:n], attr))


def _wide_grid(cols=50, rows=3):
    data = [[f"c{c}" for c in range(cols)]]
    for r in range(1, rows):
        data.append([f"{r}-{c}" for c in range(cols)])
    return GridModel.from_rows(data)


class FitTextTests(unittest.TestCase):
    def test_pads_short_text(self):
        self.assertEqual(fit_text("ab", 5), "ab   ")

    def test_truncates_with_ellipsis(self):
        self.assertEqual(fit_text("abcdefghij", 6), "abc...")

    def test_truncates_without_ellipsis_when_too_narrow(self):
        self.assertEqual(fit_text("abcdef", 3), "abc")

    def test_flattens_newlines(self):
        self.assertEqual(fit_text("a\nb", 3), "a b")

    def test_zero_width(self):
        self.assertEqual(fit_text("abc", 0), "")


class GridPaneAdjustViewportTests(unittest.TestCase):
    def test_col_offset_follows_selection_right(self):
        grid = _wide_grid()
        pane = GridPane(grid, ColumnWidths())
        grid.select_cell(1, 49)

        pane.adjust_viewport(24, 80)

        self.assertGreater(pane.col_offset, 0)
        self.assertLessEqual(pane.col_offset, 49)
        avail_w = 80 - (pane.gutter_width() + 1)
        self.assertIn(49, pane._visible_cols(avail_w))

    def test_col_offset_follows_selection_back_left(self):
        grid = _wide_grid()
        pane = GridPane(grid, ColumnWidths())
        pane.col_offset = 30
        grid.select_cell(1, 2)

        pane.adjust_viewport(24, 80)

        self.assertEqual(pane.col_offset, 2)

    def test_selecting_frozen_column_keeps_scroll_position(self):
        grid = _wide_grid()
        pane = GridPane(grid, ColumnWidths())
        pane.col_offset = 30
        grid.select_cell(1, 1)

        pane.adjust_viewport(24, 80)

        self.assertEqual(pane.col_offset, 30)
        avail_w = 80 - (pane.gutter_width() + 1)
        self.assertEqual(pane._visible_cols(avail_w)[:3], [0, 1, 30])

    def test_col_offset_never_enters_frozen_columns(self):
        grid = _wide_grid()
        pane = GridPane(grid, ColumnWidths())
        grid.select_cell(1, 0)

        pane.adjust_viewport(24, 80)

        self.assertEqual(pane.col_offset, GridPane.FROZEN_COLS)

    def test_row_offset_keeps_header_pinned(self):
        grid = _wide_grid(cols=2, rows=100)
        pane = GridPane(grid, ColumnWidths())
        grid.select_cell(99, 0)

        pane.adjust_viewport(10, 80)

        # nine body rows below the header
        self.assertEqual(pane.row_offset, 91)

        grid.select_cell(0, 0)
        pane.adjust_viewport(10, 80)
        self.assertEqual(pane.row_offset, 91)

        grid.select_cell(5, 0)
        pane.adjust_viewport(10, 80)
        self.assertEqual(pane.row_offset, 5)

    def test_configured_widths_are_used(self):
        pane = GridPane(_wide_grid(cols=3), ColumnWidths({1: 25}))
        self.assertEqual(pane.get_col_width(0), 10)
        self.assertEqual(pane.get_col_width(1), 25)


class GridPaneDrawTests(unittest.TestCase):
    def test_header_row_drawn_first(self):
        grid = GridModel.from_rows([["id", "name"], ["1", "alice"]])
        pane = GridPane(grid, ColumnWidths())
        win = DummyWin(5, 40)

        pane.draw(win)

        texts_on_row0 = [text.strip() for y, _, text, _ in win.calls if y == 0]
        self.assertIn("id", texts_on_row0)
        self.assertIn("name", texts_on_row0)
        texts_on_row1 = [text.strip() for y, _, text, _ in win.calls if y == 1]
        self.assertIn("alice", texts_on_row1)

    def test_leading_columns_stay_drawn_when_scrolled_right(self):
        grid = _wide_grid()
        pane = GridPane(grid, ColumnWidths())
        win = DummyWin(24, 80)
        grid.select_cell(1, 40)

        pane.draw(win)

        header = [text.strip() for y, _, text, _ in win.calls if y == 0]
        body = [text.strip() for y, _, text, _ in win.calls if y == 1]
        self.assertIn("c0", header)
        self.assertIn("c1", header)
        self.assertIn("c40", header)
        self.assertNotIn("c2", header)
        self.assertIn("1-0", body)
        self.assertIn("1-1", body)
        self.assertIn("1-40", body)

    def test_narrow_grid_draws_every_column(self):
        grid = GridModel.from_rows([["id"], ["7"]])
        pane = GridPane(grid, ColumnWidths())
        win = DummyWin(5, 40)

        pane.draw(win)

        self.assertIn("id", [text.strip() for y, _, text, _ in win.calls if y == 0])


if __name__ == "__main__":
    unittest.main()
