import curses

ELLIPSIS = "..."


def fit_text(text, width: int) -> str:
    """Truncate (with an ellipsis when there is room) or pad text to width."""
    if width <= 0:
        return ""
    text = "" if text is None else str(text).replace("\n", " ")
    if len(text) > width:
        if width > len(ELLIPSIS):
            return text[: width - len(ELLIPSIS)] + ELLIPSIS
        return text[:width]
    return text.ljust(width)


class GridPane:
    PAIR_HEADER = 1
    PAIR_CELL_TEXT = 2
    FROZEN_COLS = 2

    def __init__(self, grid, col_widths):
        self.grid = grid
        self.col_widths = col_widths
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_YELLOW, -1)
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
        except curses.error:
            pass

        # viewport; selection itself lives on the grid model.
        # col_offset is the first scrolling column after the frozen ones
        self.row_offset = 1
        self.col_offset = 0

    def get_col_width(self, col_idx: int) -> int:
        return max(1, self.col_widths.get(col_idx))

    def gutter_width(self) -> int:
        return max(3, len(str(max(self.grid.num_rows - 1, 0))) + 1)

    def frozen_cols(self) -> int:
        return min(self.FROZEN_COLS, self.grid.num_cols)

    def _visible_cols(self, avail_w: int):
        """Frozen columns first, then scrolling columns from col_offset."""
        frozen = self.frozen_cols()
        start = max(self.col_offset, frozen)
        cols = []
        used = 0
        for c in list(range(frozen)) + list(range(start, self.grid.num_cols)):
            cw = self.get_col_width(c)
            # the first scrolling column is always shown, clipped if needed
            if cols and c != start and used + cw + 1 > avail_w:
                if c < frozen:
                    continue
                break
            cols.append(c)
            used += cw + 1
        return cols

    def adjust_viewport(self, h: int, w: int):
        """Scroll so the selected cell is visible; row 0 and the frozen columns stay pinned."""
        num_rows = self.grid.num_rows
        num_cols = self.grid.num_cols
        body_h = max(1, h - 1)

        frozen = self.frozen_cols()
        if num_cols <= frozen:
            self.col_offset = frozen
        else:
            curr_col = self.grid.curr_col
            self.col_offset = max(self.col_offset, frozen)
            if frozen <= curr_col < self.col_offset:
                self.col_offset = curr_col
            avail_w = max(1, w - (self.gutter_width() + 1))
            while self.col_offset < curr_col and curr_col not in self._visible_cols(avail_w):
                self.col_offset += 1
            self.col_offset = min(self.col_offset, num_cols - 1)

        curr_row = self.grid.curr_row
        if curr_row >= 1:
            if curr_row < self.row_offset:
                self.row_offset = curr_row
            elif curr_row >= self.row_offset + body_h:
                self.row_offset = curr_row - body_h + 1
        self.row_offset = max(1, min(self.row_offset, max(1, num_rows - 1)))

    # ---------- rendering ----------
    def _draw_row(self, win, y, r, cols, gutter_w, w, base_attr):
        try:
            win.addnstr(y, 0, str(r).rjust(gutter_w), gutter_w)
        except curses.error:
            pass
        x = gutter_w + 1
        last = cols[-1] if cols else None
        for c in cols:
            if x >= w - 1:
                break
            cw = self.get_col_width(c)
            if c == last:
                # last visible column takes the remaining width
                cw = max(cw, w - x - 1)
            cw = min(cw, max(1, w - x - 1))
            attr = base_attr
            if r == self.grid.curr_row and c == self.grid.curr_col:
                attr = base_attr | curses.A_REVERSE
            try:
                win.addnstr(y, x, fit_text(self.grid.get_cell(r, c), cw), cw, attr)
            except curses.error:
                pass
            x += cw + 1

    def draw(self, win, active=True):
        win.erase()
        h, w = win.getmaxyx()
        self.adjust_viewport(h, w)

        if self.grid.is_empty():
            win.refresh()
            return

        gutter_w = self.gutter_width()
        cols = self._visible_cols(max(1, w - (gutter_w + 1)))

        header_attr = curses.A_BOLD
        try:
            header_attr |= curses.color_pair(self.PAIR_HEADER)
        except curses.error:
            pass
        self._draw_row(win, 0, 0, cols, gutter_w, w, header_attr)

        body_attr = curses.A_NORMAL if active else curses.A_DIM
        y = 1
        for r in range(self.row_offset, self.grid.num_rows):
            if y >= h:
                break
            self._draw_row(win, y, r, cols, gutter_w, w, body_attr)
            y += 1

        win.refresh()
