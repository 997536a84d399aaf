# src/task_manager/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep container logs readable:
    - allow all task_manager logs
    - werkzeug access log only at WARNING+ (unless the app runs in debug)
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - any other third-party logger only WARNING+
    """

    def __init__(self, *, access_log: bool = False) -> None:
        super().__init__()
        self._access_log = access_log

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "task_manager" or name.startswith("task_manager."):
            return True

        if name == "werkzeug":
            return self._access_log or record.levelno >= logging.WARNING

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    console_level: int = logging.INFO,
    log_dir: str | Path | None = None,
    file_level: int = logging.DEBUG,
    access_log: bool = False,
) -> None:
    """
    Configure logging with:
    - Console handler (stderr): filtered, this is what `kubectl logs` shows
    - File handler (optional): full logs for local debugging

    Call this ONCE, very early (before first logger.info).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter(access_log=access_log))
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "task_manager.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
