import curses
import logging
import time

from cell_editor import CellEditor
from clipboard import Clipboard
from command_dispatcher import CommandDispatcher
from config_paths import STATUS_SECONDS_DEFAULT
from confirm_prompt import ConfirmPrompt
from editor_context import EditorContext
from grid_pane import GridPane
from overlay import OverlayView
from screen_layout import ScreenLayout
from shortcut_help_handler import ShortcutHelpHandler
from status_bar import render_status

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state, config=None):
        self.stdscr = stdscr
        curses.curs_set(0)
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.config = config or {}
        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.grid_pane = GridPane(app_state.grid, app_state.col_widths)
        self.overlay = OverlayView(self.layout)

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0
        self.status_seconds = self.config.get("STATUS_SECONDS", STATUS_SECONDS_DEFAULT)

        # ---- editing state machine ----
        self.ctx = EditorContext(app_state, self._set_status)
        self.cell_editor = CellEditor(self.ctx)
        self.confirm = ConfirmPrompt()
        self.dispatcher = CommandDispatcher(
            self.ctx, self.cell_editor, self.confirm, Clipboard.from_config(self.config)
        )

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=None):
        self.status_msg = msg
        self.status_msg_until = time.time() + (
            self.status_seconds if seconds is None else seconds
        )

    def _mode(self):
        if self.confirm.active:
            return "confirm"
        return self.ctx.mode

    # ---------------- UI ----------------

    def redraw(self):
        try:
            curses.curs_set(1 if self.ctx.editing and not self.overlay.visible else 0)
        except curses.error:
            pass

        if self.overlay.visible:
            self.overlay.draw()
            return

        # the grid may have been replaced by a reload after save
        self.grid_pane.grid = self.state.grid
        self.grid_pane.draw(self.layout.table_win, active=not self.confirm.active)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        if self.confirm.active:
            self.confirm.draw(sw)
        else:
            grid = self.state.grid
            context = {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "mode": self._mode(),
                "file_path": self.state.file_path,
                "shape": (grid.num_rows, grid.num_cols),
                "row": grid.curr_row,
                "col": grid.curr_col,
                "col_width": self.grid_pane.get_col_width(grid.curr_col),
            }
            try:
                sw.addnstr(0, 0, render_status(context, w), max(0, w - 1), curses.A_REVERSE)
            except curses.error:
                pass
            sw.refresh()

        ew = self.layout.edit_win
        ew.erase()
        if self.ctx.editing:
            self.cell_editor.draw(ew)
        else:
            ew.refresh()

    def _resize(self):
        self.layout = ScreenLayout(self.stdscr)
        self.overlay.layout = self.layout
        self.stdscr.clear()
        self.stdscr.refresh()

    # ---------------- key routing ----------------

    def handle_key(self, ch):
        if ch == curses.KEY_RESIZE:
            self._resize()
            return

        if self.overlay.visible:
            self.overlay.handle_key(ch)
            return

        if self.confirm.active:
            action = self.confirm.handle_key(ch)
            if action is not None:
                logger.info("Confirmed %s", action)
                self.dispatcher.perform(action)
            return

        if self.ctx.editing:
            self.cell_editor.handle_key(ch)
            return

        if ch == ord("?"):
            self.overlay.open_help(ShortcutHelpHandler.get_lines())
            return

        if ch == ord("m"):
            grid = self.state.grid
            if not grid.is_empty():
                self.overlay.open_cell(grid.current_value())
            return

        # unhandled keys fall through untouched
        self.dispatcher.handle_key(ch)

    # ---------------- main loop ----------------

    def _read_key(self):
        """ASCII comes back as an int code like getch(); other text stays str."""
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            # timeout with no input
            return -1
        if isinstance(key, str) and len(key) == 1 and ord(key) < 128:
            return ord(key)
        return key

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self._read_key()

            if ch != -1:
                self.handle_key(ch)

            if self.ctx.quit_requested:
                break

            self.redraw()
