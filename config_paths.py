import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvgrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "csvgrid.log")

# default settings
CLIPBOARD_COPY_COMMAND_DEFAULT = ["wl-copy"]
CLIPBOARD_PASTE_COMMAND_DEFAULT = ["wl-paste", "--no-newline"]
STATUS_SECONDS_DEFAULT = 3


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _is_argv(value) -> bool:
    return (
        isinstance(value, list)
        and bool(value)
        and all(isinstance(item, str) for item in value)
    )


def load_config():
    cfg = {
        "CLIPBOARD_COPY_COMMAND": list(CLIPBOARD_COPY_COMMAND_DEFAULT),
        "CLIPBOARD_PASTE_COMMAND": list(CLIPBOARD_PASTE_COMMAND_DEFAULT),
        "STATUS_SECONDS": STATUS_SECONDS_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    copy_cmd = data.get("clipboard_interface_command")
    if _is_argv(copy_cmd):
        cfg["CLIPBOARD_COPY_COMMAND"] = copy_cmd

    paste_cmd = data.get("clipboard_paste_command")
    if _is_argv(paste_cmd):
        cfg["CLIPBOARD_PASTE_COMMAND"] = paste_cmd

    seconds = data.get("status_seconds")
    if isinstance(seconds, (int, float)) and not isinstance(seconds, bool) and seconds > 0:
        cfg["STATUS_SECONDS"] = seconds

    return cfg
