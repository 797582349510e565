import curses
from types import SimpleNamespace

from cell_editor import CellEditor
from editor_context import EditorContext
from grid_model import GridModel


def _editor(rows=None):
    grid = GridModel.from_rows(rows or [["id", "name"], ["1", "A"]])
    state = SimpleNamespace(grid=grid)
    ctx = EditorContext(state, lambda *args, **kwargs: None)
    return CellEditor(ctx), ctx, grid


def _type(editor, text):
    for ch in text:
        editor.handle_key(ord(ch))


def test_commit_writes_buffer_to_cell():
    editor, ctx, grid = _editor()
    grid.select_cell(1, 1)

    assert editor.start_edit()
    assert ctx.mode == "edit"
    assert ctx.cell_buffer == "A"
    assert ctx.cell_cursor == 1

    editor.handle_key(curses.KEY_BACKSPACE)
    _type(editor, "B")
    editor.handle_key(10)

    assert grid.get_cell(1, 1) == "B"
    assert ctx.mode == "normal"
    assert ctx.cell_buffer == ""


def test_cancel_leaves_cell_unchanged():
    editor, ctx, grid = _editor()
    grid.select_cell(1, 1)

    editor.start_edit()
    _type(editor, "zzz")
    editor.handle_key(27)

    assert grid.get_cell(1, 1) == "A"
    assert ctx.mode == "normal"


def test_cursor_movement_and_insert():
    editor, ctx, grid = _editor([["abc"]])

    editor.start_edit()
    editor.handle_key(curses.KEY_HOME)
    _type(editor, "X")
    editor.handle_key(curses.KEY_END)
    _type(editor, "Y")
    editor.handle_key(curses.KEY_LEFT)
    editor.handle_key(curses.KEY_LEFT)
    editor.handle_key(curses.KEY_DC)
    editor.handle_key(13)

    assert grid.get_cell(0, 0) == "XabY"


def test_navigation_keys_do_not_move_selection_while_editing():
    editor, ctx, grid = _editor()
    grid.select_cell(1, 0)

    editor.start_edit()
    assert editor.handle_key(curses.KEY_UP) is True
    assert editor.handle_key(curses.KEY_DOWN) is True
    assert editor.handle_key(9) is True

    assert grid.selection == (1, 0)
    assert ctx.cell_buffer == "1"


def test_commit_targets_cell_captured_at_start():
    editor, ctx, grid = _editor()
    grid.select_cell(1, 0)

    editor.start_edit()
    grid.select_cell(0, 1)
    _type(editor, "0")
    editor.handle_key(curses.KEY_ENTER)

    assert grid.get_cell(1, 0) == "10"
    assert grid.get_cell(0, 1) == "name"


def test_start_edit_requires_normal_mode():
    editor, ctx, grid = _editor()
    assert editor.start_edit()
    assert not editor.start_edit()


def test_handle_key_ignored_outside_edit_mode():
    editor, ctx, grid = _editor()
    assert editor.handle_key(ord("a")) is False
    assert grid.rows() == [["id", "name"], ["1", "A"]]


class DummyWin:
    def __init__(self, w=20):
        self._w = w
        self.text = ""
        self.cursor = None

    def getmaxyx(self):
        return 1, self._w

    def addnstr(self, y, x, text, n, attr=0):
        self.text = self.text[:x] + text[:n]

    def move(self, y, x):
        self.cursor = x

    def refresh(self):
        pass


def test_draw_scrolls_long_buffers():
    editor, ctx, grid = _editor([["x" * 40 + "END"]])
    win = DummyWin(w=20)

    editor.start_edit()
    editor.draw(win)

    assert win.text.endswith("END")
    assert win.cursor <= 19


def test_utf8_bytes_are_decoded_into_one_character():
    editor, ctx, grid = _editor([["id"], ["x"]])
    grid.select_cell(1, 0)

    editor.start_edit()
    editor.handle_key(curses.KEY_BACKSPACE)
    for byte in "é".encode("utf-8"):
        editor.handle_key(byte)
    editor.handle_key(10)

    assert grid.get_cell(1, 0) == "é"


def test_multibyte_sequences_mix_with_ascii():
    editor, ctx, grid = _editor([["id"], [""]])
    grid.select_cell(1, 0)

    editor.start_edit()
    for byte in "naïve 日本".encode("utf-8"):
        editor.handle_key(byte)
    editor.handle_key(10)

    assert grid.get_cell(1, 0) == "naïve 日本"


def test_str_keys_insert_text():
    editor, ctx, grid = _editor([["id"], ["a"]])
    grid.select_cell(1, 0)

    editor.start_edit()
    editor.handle_key("ő")
    editor.handle_key("\x00")
    editor.handle_key(curses.KEY_HOME)
    editor.handle_key("ß")
    editor.handle_key(10)

    assert grid.get_cell(1, 0) == "ßaő"


def test_cancel_discards_partial_utf8_sequence():
    editor, ctx, grid = _editor([["id"], ["a"]])
    grid.select_cell(1, 0)

    editor.start_edit()
    editor.handle_key(0xC3)
    editor.handle_key(27)
    editor.start_edit()
    editor.handle_key(ord("b"))
    editor.handle_key(10)

    assert grid.get_cell(1, 0) == "ab"
