import curses
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class DeleteRow:
    index: int


@dataclass(frozen=True)
class DeleteColumn:
    index: int


@dataclass(frozen=True)
class QuitAndSave:
    pass


PendingAction = Union[DeleteRow, DeleteColumn, QuitAndSave]

PROMPTS = {
    DeleteRow: "Do you want to delete selected row?",
    DeleteColumn: "Do you want to delete selected col?",
    QuitAndSave: "Do you want to close the application?",
}


class ConfirmPrompt:
    """Yes/No gate holding at most one pending destructive action."""

    YES = 0
    NO = 1
    BUTTONS = ("Yes", "No")

    def __init__(self):
        self.action: Optional[PendingAction] = None
        self.text = ""
        self.choice = self.NO

    @property
    def active(self) -> bool:
        return self.action is not None

    def request(self, action: PendingAction) -> bool:
        if self.active:
            return False
        self.action = action
        self.text = PROMPTS[type(action)]
        self.choice = self.NO
        return True

    def _resolve(self, accepted: bool) -> Optional[PendingAction]:
        action = self.action
        self.action = None
        self.text = ""
        self.choice = self.NO
        return action if accepted else None

    def handle_key(self, ch) -> Optional[PendingAction]:
        """Returns the pending action once when accepted, otherwise None."""
        if not self.active:
            return None

        if ch in (10, 13, curses.KEY_ENTER):
            return self._resolve(self.choice == self.YES)

        if ch == 27:  # Esc
            return self._resolve(False)

        if ch in (ord("y"), ord("Y")):
            return self._resolve(True)

        if ch in (ord("n"), ord("N")):
            return self._resolve(False)

        if ch in (curses.KEY_LEFT, ord("h")):
            self.choice = self.YES
            return None

        if ch in (curses.KEY_RIGHT, ord("l")):
            self.choice = self.NO
            return None

        if ch in (9, curses.KEY_BTAB):
            self.choice = self.NO if self.choice == self.YES else self.YES
            return None

        return None

    def draw(self, win):
        _, w = win.getmaxyx()
        try:
            win.addnstr(0, 0, f" {self.text} ", w)
            x = min(w - 1, len(self.text) + 3)
            for idx, label in enumerate(self.BUTTONS):
                if x >= w - 1:
                    break
                attr = curses.A_REVERSE if idx == self.choice else curses.A_NORMAL
                button = f"[ {label} ]"
                win.addnstr(0, x, button, max(0, w - x - 1), attr)
                x += len(button) + 1
        except curses.error:
            pass
        win.refresh()
