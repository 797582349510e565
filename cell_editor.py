import codecs
import curses


class CellEditor:
    """Single-line cell editing: start, text entry, commit and cancel."""

    LABEL = ":"

    def __init__(self, ctx):
        self.ctx = ctx
        # getch() delivers multi-byte UTF-8 input one byte at a time
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    # ---------- transitions ----------
    def start_edit(self) -> bool:
        grid = self.ctx.grid
        if self.ctx.mode != "normal" or grid.is_empty():
            return False
        self.ctx.edit_row = grid.curr_row
        self.ctx.edit_col = grid.curr_col
        self.ctx.cell_buffer = grid.get_cell(grid.curr_row, grid.curr_col)
        self.ctx.cell_cursor = len(self.ctx.cell_buffer)
        self.ctx.cell_hscroll = 0
        self.ctx.mode = "edit"
        return True

    def commit(self):
        if self.ctx.mode != "edit":
            return
        r, c = self.ctx.edit_row, self.ctx.edit_col
        if r is not None and c is not None:
            self.ctx.grid.set_cell(r, c, self.ctx.cell_buffer)
        self._reset()

    def cancel(self):
        if self.ctx.mode != "edit":
            return
        self._reset()

    def _reset(self):
        self.ctx.mode = "normal"
        self.ctx.cell_buffer = ""
        self.ctx.cell_cursor = 0
        self.ctx.cell_hscroll = 0
        self.ctx.edit_row = None
        self.ctx.edit_col = None
        self._decoder.reset()

    # ---------- keys ----------
    def handle_key(self, ch) -> bool:
        """Accepts curses key codes, raw UTF-8 bytes, or decoded str keys."""
        if self.ctx.mode != "edit":
            return False

        if isinstance(ch, str):
            if ch.isprintable():
                self._insert(ch)
            return True

        if 0x80 <= ch <= 0xFF:
            text = self._decoder.decode(bytes([ch]))
            if text.isprintable():
                self._insert(text)
            return True

        if ch in (10, 13, curses.KEY_ENTER):
            self.commit()
            return True

        if ch == 27:  # Esc
            self.cancel()
            return True

        buf = self.ctx.cell_buffer
        idx = self.ctx.cell_cursor

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if idx > 0:
                self.ctx.cell_buffer = buf[: idx - 1] + buf[idx:]
                self.ctx.cell_cursor -= 1
            return True

        if ch == curses.KEY_DC:
            if idx < len(buf):
                self.ctx.cell_buffer = buf[:idx] + buf[idx + 1 :]
            return True

        if ch == curses.KEY_LEFT:
            self.ctx.cell_cursor = max(0, idx - 1)
            return True

        if ch == curses.KEY_RIGHT:
            self.ctx.cell_cursor = min(len(buf), idx + 1)
            return True

        if ch == curses.KEY_HOME:
            self.ctx.cell_cursor = 0
            return True

        if ch == curses.KEY_END:
            self.ctx.cell_cursor = len(buf)
            return True

        if 32 <= ch <= 126:
            self._insert(chr(ch))
            return True

        # swallow everything else: no navigation while editing
        return True

    def _insert(self, text: str):
        buf = self.ctx.cell_buffer
        idx = self.ctx.cell_cursor
        self.ctx.cell_buffer = buf[:idx] + text + buf[idx:]
        self.ctx.cell_cursor += len(text)

    # ---------- rendering ----------
    def _autoscroll(self, text_w: int):
        if self.ctx.cell_cursor < self.ctx.cell_hscroll:
            self.ctx.cell_hscroll = self.ctx.cell_cursor
        elif self.ctx.cell_cursor > self.ctx.cell_hscroll + text_w:
            self.ctx.cell_hscroll = self.ctx.cell_cursor - text_w

    def draw(self, win):
        _, w = win.getmaxyx()
        text_w = max(1, w - len(self.LABEL) - 1)
        self._autoscroll(text_w)

        start = self.ctx.cell_hscroll
        visible = self.ctx.cell_buffer[start : start + text_w]

        try:
            win.addnstr(0, 0, self.LABEL, len(self.LABEL))
            win.addnstr(0, len(self.LABEL), visible, text_w)
            win.move(0, len(self.LABEL) + (self.ctx.cell_cursor - start))
        except curses.error:
            pass
        win.refresh()
