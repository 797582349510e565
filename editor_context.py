from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class EditorContext:
    state: Any
    _set_status: Callable[[str, float], None]

    # normal | edit
    mode: str = "normal"

    # Cell editing state
    cell_buffer: str = ""
    cell_cursor: int = 0
    cell_hscroll: int = 0
    edit_row: Optional[int] = None
    edit_col: Optional[int] = None

    quit_requested: bool = False

    @property
    def grid(self):
        return self.state.grid

    @property
    def editing(self) -> bool:
        return self.mode == "edit"
