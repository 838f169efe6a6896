"""Application logging: a coloured console stream plus ``<data dir>/logs/trekrank.log``."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from trekrank.core.config import data_dir
from trekrank.core.exceptions import ConfigError

_LOGGER_NAME = "trekrank"
LOG_FILENAME = "trekrank.log"

_LINE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s – %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def log_dir() -> Path:
    """Directory of the rotating log file (follows ``TREKRANK_DATA_DIR``)."""
    return data_dir() / "logs"


def setup_logging(
    *,
    level: str = "INFO",
    directory: Optional[Path] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    to_file: bool = True,
) -> logging.Logger:
    """Attach handlers to the ``trekrank`` logger once per process.

    Parameters
    ----------
    level:
        Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    directory:
        Where ``trekrank.log`` is written; :func:`log_dir` when omitted.
    max_bytes, backup_count:
        Rotation limits of the log file.
    to_file:
        When false only the console handler is installed.

    Raises
    ------
    ConfigError
        If the log directory cannot be created or opened.
    """
    global _configured
    logger = logging.getLogger(_LOGGER_NAME)
    if _configured:
        return logger

    plain = logging.Formatter(fmt=_LINE_FORMAT, datefmt=_DATE_FORMAT)
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_LevelColourFormatter(fmt=_LINE_FORMAT, datefmt=_DATE_FORMAT))
    handlers.append(console)

    if to_file:
        target = directory if directory is not None else log_dir()
        try:
            target.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                target / LOG_FILENAME,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigError(f"Cannot open log file in {target}: {exc}") from exc
        file_handler.setFormatter(plain)
        handlers.append(file_handler)

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in handlers:
        logger.addHandler(handler)

    _configured = True
    return logger


def setup_logging_from_config(cfg: Dict[str, Any]) -> logging.Logger:
    """Apply the ``logging`` section of a loaded config."""
    log_cfg = cfg.get("logging", {})
    return setup_logging(
        level=log_cfg.get("level", "INFO"),
        max_bytes=log_cfg.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=log_cfg.get("backup_count", 5),
        to_file=log_cfg.get("to_file", True),
    )


def reset_logging() -> None:
    """Close and detach the handlers installed by :func:`setup_logging`."""
    global _configured
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _configured = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``trekrank`` or one of its children, e.g. ``trekrank.api.app``."""
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


# ── Console colours ───────────────────────────────────────────────────

_LEVEL_COLOURS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
_RESET = "\033[0m"


class _LevelColourFormatter(logging.Formatter):
    """Colours the whole console line by record level."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        colour = _LEVEL_COLOURS.get(record.levelno)
        return f"{colour}{line}{_RESET}" if colour else line
