from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = "/var/log/dojo-installer.log"
FALLBACK_LOG_NAME = "dojo-installer.log"
TRACE_LOGGER_NAME = "dojo_installer.trace"


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
    verbose: bool = False,
) -> str:
    """Configure logging.

    Everything (including trace detail) goes to the log file; the console
    only gets INFO and above.

    Notes:
    - Writing to /var/log needs root. If the file can't be opened there we
      fall back to a file in the current working directory.

    Returns the actual file path being used.
    """

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_dojo_configured", False):
        return getattr(logger, "_dojo_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError:
        chosen_path = str(Path.cwd() / FALLBACK_LOG_NAME)
        file_handler = logging.FileHandler(chosen_path)
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(message)s"))
        console.setLevel(logging.DEBUG if verbose else level)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_dojo_configured", True)
    setattr(logger, "_dojo_log_path", chosen_path)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path


def trace_logger() -> logging.Logger:
    """Logger for the detailed per-operation trace; DEBUG level only."""

    return logging.getLogger(TRACE_LOGGER_NAME)
