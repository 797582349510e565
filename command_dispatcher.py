import curses

from app_state import ReloadError
from clipboard import ClipboardError
from confirm_prompt import DeleteColumn, DeleteRow, QuitAndSave


KEY_TAB = 9
KEY_ESC = 27
KEY_CTRL_S = 19
ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)


class CommandDispatcher:
    """Maps navigation-mode keys to grid, edit-mode and persistence actions."""

    def __init__(self, ctx, cell_editor, confirm, clipboard):
        self.ctx = ctx
        self.cell_editor = cell_editor
        self.confirm = confirm
        self.clipboard = clipboard

    @property
    def grid(self):
        return self.ctx.grid

    @property
    def state(self):
        return self.ctx.state

    # ---------- public entrypoint ----------
    def handle_key(self, ch: int) -> bool:
        """Returns False for keys this table does not recognize."""
        if self.ctx.mode != "normal" or self.confirm.active:
            return False

        if ch == curses.KEY_RIGHT:
            self.grid.move_right()
            return True
        if ch == curses.KEY_LEFT:
            self.grid.move_left()
            return True
        if ch == curses.KEY_DOWN:
            self.grid.move_down()
            return True
        if ch == curses.KEY_UP:
            self.grid.move_up()
            return True

        if ch == KEY_TAB:
            self.insert_column()
            return True
        if ch in ENTER_KEYS:
            self.insert_row()
            return True
        if ch in BACKSPACE_KEYS:
            self.request_delete_column()
            return True
        if ch in (KEY_ESC, ord("q")):
            self.request_quit()
            return True
        if ch == KEY_CTRL_S:
            self.save()
            return True

        if ch == ord("d"):
            self.request_delete_row()
            return True
        if ch in (ord("e"), ord("i")):
            self.cell_editor.start_edit()
            return True
        if ch == ord("n"):
            self.clear_cell()
            return True
        if ch == ord("c"):
            self.copy_cell()
            return True
        if ch == ord("x"):
            self.cut_cell()
            return True
        if ch == ord("v"):
            self.paste_cell()
            return True

        return False

    # ---------- structure ----------
    def insert_column(self):
        col = self.grid.curr_col
        if self.grid.insert_column_after(col):
            self.state.col_widths.shift_for_insert(col)

    def insert_row(self):
        self.grid.insert_row_after(self.grid.curr_row)

    def clear_cell(self):
        self.grid.set_cell(self.grid.curr_row, self.grid.curr_col, "")

    # ---------- confirmation-gated ----------
    def request_delete_row(self):
        row = self.grid.curr_row
        if row == 0:
            self.ctx._set_status("Header row cannot be deleted", 3)
            return
        if self.grid.num_rows <= 1:
            self.ctx._set_status("Nothing to delete", 3)
            return
        self.confirm.request(DeleteRow(row))

    def request_delete_column(self):
        if self.grid.num_cols <= 1:
            self.ctx._set_status("Cannot delete the last column", 3)
            return
        self.confirm.request(DeleteColumn(self.grid.curr_col))

    def request_quit(self):
        self.confirm.request(QuitAndSave())

    def perform(self, action):
        if isinstance(action, DeleteRow):
            self.archive_and_delete_row(action.index)
        elif isinstance(action, DeleteColumn):
            self.delete_column(action.index)
        elif isinstance(action, QuitAndSave):
            if self.save():
                self.ctx.quit_requested = True

    def archive_and_delete_row(self, row: int) -> bool:
        if row == 0 or not 0 <= row < self.grid.num_rows or self.grid.num_rows <= 1:
            return False
        try:
            self.state.archive_row(row)
        except Exception as e:
            self.ctx._set_status(f"Archive failed: {e}", 4)
            return False
        if not self.grid.delete_row(row):
            return False
        self.ctx._set_status(f"Row {row} moved to {self.state.file_handler.archive_path}", 3)
        return True

    def delete_column(self, col: int) -> bool:
        if not self.grid.delete_column(col):
            return False
        self.state.col_widths.shift_for_delete(col)
        self.ctx._set_status(f"Deleted column {col}", 3)
        return True

    # ---------- persistence ----------
    def save(self) -> bool:
        """True once the file is on disk, even if reading it back failed."""
        try:
            self.state.save()
        except ReloadError as e:
            self.ctx._set_status(f"Saved, reload failed: {e}", 4)
            return True
        except Exception as e:
            self.ctx._set_status(f"Save failed: {e}", 4)
            return False
        self.ctx._set_status(f"Saved {self.state.file_path}", 3)
        return True

    # ---------- clipboard ----------
    def copy_cell(self) -> bool:
        try:
            self.clipboard.copy(self.grid.current_value())
        except ClipboardError as e:
            self.ctx._set_status(str(e), 3)
            return False
        self.ctx._set_status("Cell copied", 2)
        return True

    def cut_cell(self):
        if self.copy_cell():
            self.clear_cell()
            self.ctx._set_status("Cell cut", 2)

    def paste_cell(self):
        try:
            text = self.clipboard.paste()
        except ClipboardError as e:
            self.ctx._set_status(str(e), 3)
            return
        self.grid.set_cell(self.grid.curr_row, self.grid.curr_col, text)
        self.ctx._set_status("Pasted", 2)
