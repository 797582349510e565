import curses
import textwrap
from typing import List


class OverlayView:
    def __init__(self, layout):
        self.layout = layout
        self.visible = False
        self.lines: List[str] = []
        self.title = ""
        self.scroll = 0
        self.win = None
        self.mode: str | None = None

    def open_help(self, lines: List[str]):
        self._open(list(lines), mode="help", title="Keys (Esc to close)")

    def open_cell(self, text: str, title: str = "Cell Content (Esc to close)"):
        width = max(10, self.layout.W - 4)
        lines: List[str] = []
        for part in (text or "").split("\n"):
            lines.extend(textwrap.wrap(part, width) or [""])
        self._open(lines, mode="cell", title=title)

    def _open(self, lines: List[str], *, mode: str, title: str):
        self.mode = mode
        self.lines = lines
        self.title = title
        self.scroll = 0
        # full screen with one row of padding
        overlay_h = max(3, self.layout.H - 2)
        self.win = curses.newwin(overlay_h, self.layout.W, 1, 0)
        self.win.leaveok(True)
        self.visible = True

    def close(self):
        self.visible = False
        self.lines = []
        self.title = ""
        self.scroll = 0
        self.win = None
        self.mode = None

    def _content_rows(self) -> int:
        if self.win is None:
            return 0
        h, _ = self.win.getmaxyx()
        return max(0, h - 2)

    def handle_key(self, ch):
        if not self.visible:
            return
        if ch == -1:
            return

        content_rows = self._content_rows()
        max_scroll = max(0, len(self.lines) - content_rows)
        half_page = max(1, content_rows // 2)

        if ch in (27, ord("q"), 10, 13, curses.KEY_ENTER, ord("?"), ord("m")):
            self.close()
            return

        if ch == curses.KEY_NPAGE:
            self.scroll = min(max_scroll, self.scroll + half_page)
        elif ch == curses.KEY_PPAGE:
            self.scroll = max(0, self.scroll - half_page)
        elif ch == curses.KEY_HOME:
            self.scroll = 0
        elif ch == curses.KEY_END:
            self.scroll = max_scroll
        elif ch in (ord("j"), curses.KEY_DOWN):
            self.scroll = min(max_scroll, self.scroll + 1)
        elif ch in (ord("k"), curses.KEY_UP):
            self.scroll = max(0, self.scroll - 1)

    def draw(self):
        if not self.visible or not self.win:
            return

        win = self.win
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
            win.addnstr(0, 2, f" {self.title} ", max(0, w - 4))
        except curses.error:
            pass

        max_visible = max(0, h - 2)
        start = self.scroll
        for i, line in enumerate(self.lines[start : start + max_visible]):
            try:
                win.addnstr(1 + i, 2, line, max(0, w - 4))
            except curses.error:
                pass

        win.refresh()
