import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, file_path, shape,
                  row, col, col_width
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = context.get("mode", "normal")
        if mode == "edit":
            label = "EDIT"
        elif mode == "confirm":
            label = "CONFIRM"
        else:
            label = "NAV"
        fname = context.get("file_path") or ""
        if fname:
            fname = os.path.basename(fname)
        rows, cols = context.get("shape", (0, 0))
        row = context.get("row", 0)
        col = context.get("col", 0)
        cell_info = f"R{row} C{col}"
        if context.get("col_width") is not None:
            cell_info += f" w{context['col_width']}"
        text = f" {label} | {fname} | {rows}x{cols} | {cell_info} | ? help"

    return text.ljust(width)[:width]
