import logging
import logging.handlers
import os

from config_paths import LOG_PATH


def setup_logging(log_path: str = LOG_PATH) -> logging.Logger:
    """Route all logging to a rotating file.

    curses owns the terminal, so nothing may be written to stdout/stderr
    while the editor is running.
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(module)s:%(lineno)d] %(message)s"
        )
    )
    root_logger.addHandler(handler)
    return root_logger
