class ShortcutHelpHandler:
    LINES = [
        "Navigation",
        "  Arrow keys   move selection (no wrap at edges)",
        "",
        "Editing",
        "  e / i        edit cell (Enter commits, Esc cancels)",
        "  n            clear cell",
        "  c / x / v    copy / cut / paste cell",
        "  m            show full cell content",
        "",
        "Structure",
        "  Tab          insert column after selection",
        "  Enter        insert row below selection",
        "  d            delete row (archived to <file>.completed.csv)",
        "  Backspace    delete column",
        "",
        "File",
        "  Ctrl+S       save",
        "  q / Esc      save and quit",
        "",
        "Confirmations default to No: y / n, arrows + Enter, Esc dismisses",
    ]

    @classmethod
    def get_lines(cls):
        return list(cls.LINES)
