"""Log file lifecycle: truncate on start, optional stderr echo, drop if empty."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

# Parent of every module logger in the package
_ROOT_LOGGER = "cleanpg"

_handlers: list[logging.Handler] = []
_log_path: Optional[Path] = None


def setup_logging(log_file: str = "log.txt", verbose: bool = False, level: str = "INFO") -> Path:
    """Attach a file handler (and a stderr handler when verbose).

    The log file is truncated so each run starts with an empty log.
    """
    global _log_path

    shutdown_logging()

    path = Path(log_file)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    _handlers.append(file_handler)

    if verbose:
        stderr_handler = RichHandler(console=Console(stderr=True), show_path=False)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        _handlers.append(stderr_handler)

    for handler in _handlers:
        logger.addHandler(handler)

    _log_path = path
    return path


def shutdown_logging() -> None:
    """Detach our handlers and remove the log file if nothing was written."""
    global _log_path

    logger = logging.getLogger(_ROOT_LOGGER)
    while _handlers:
        handler = _handlers.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True

    if _log_path is not None and _log_path.exists() and _log_path.stat().st_size == 0:
        _log_path.unlink()
    _log_path = None
