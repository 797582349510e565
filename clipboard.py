import logging
import subprocess
from typing import List, Optional

from config_paths import CLIPBOARD_COPY_COMMAND_DEFAULT, CLIPBOARD_PASTE_COMMAND_DEFAULT

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    pass


class Clipboard:
    """Bridges to the system clipboard through external copy/paste commands."""

    def __init__(self, copy_command: Optional[List[str]] = None, paste_command: Optional[List[str]] = None, timeout: float = 5.0):
        self.copy_command = list(copy_command or CLIPBOARD_COPY_COMMAND_DEFAULT)
        self.paste_command = list(paste_command or CLIPBOARD_PASTE_COMMAND_DEFAULT)
        self.timeout = timeout

    @classmethod
    def from_config(cls, cfg) -> "Clipboard":
        return cls(
            cfg.get("CLIPBOARD_COPY_COMMAND"),
            cfg.get("CLIPBOARD_PASTE_COMMAND"),
        )

    def copy(self, text: str) -> None:
        try:
            subprocess.run(
                self.copy_command,
                input=text,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Clipboard write via %s failed: %s", self.copy_command, e)
            raise ClipboardError(f"Copy failed: {e}") from e

    def paste(self) -> str:
        try:
            result = subprocess.run(
                self.paste_command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Clipboard read via %s failed: %s", self.paste_command, e)
            raise ClipboardError(f"Paste failed: {e}") from e
        return result.stdout
