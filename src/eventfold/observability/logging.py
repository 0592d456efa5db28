"""structlog setup for Eventfold.

Every entry is rendered once and written to stderr: as aligned key=value text
in dev mode, or as one JSON object per line in prod mode. When file logging
is enabled the same rendered line is also appended to ``eventfold.log``,
which rotates at UTC midnight and keeps ``max_log_days`` old files.

Entries are named in dot notation after the component and what happened,
for example ``event_store.event.written`` or ``seed.admin.skipped``. Store
entries carry ``aggregate_type`` and ``aggregate_id``.

Usage:
    from eventfold.config import LoggingConfig
    from eventfold.observability import configure_logging, get_logger

    configure_logging(LoggingConfig(level="debug", mode="prod"))
    log = get_logger(__name__)
    log.info("event_store.event.written", aggregate_type="page", version=2)
"""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
import os
from pathlib import Path
import sys
from typing import Any, Literal

import structlog

from eventfold.config.models import LoggingConfig

LOG_MODE_ENV = "EVENTFOLD_LOG_MODE"
LOG_FILENAME = "eventfold.log"
DEFAULT_LOG_DIR = Path.home() / ".eventfold" / "logs"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_configured = False
_log_file: TimedRotatingFileHandler | None = None


def _config_from_env() -> LoggingConfig:
    """Defaults, with prod mode only when EVENTFOLD_LOG_MODE says so."""
    mode: Literal["dev", "prod"] = "dev"
    if os.environ.get(LOG_MODE_ENV, "").lower() == "prod":
        mode = "prod"
    return LoggingConfig(mode=mode)


def log_dir_for(config: LoggingConfig) -> Path:
    """Directory the rotating log file lives in."""
    if config.log_dir:
        return Path(config.log_dir).expanduser()
    return DEFAULT_LOG_DIR


def _open_log_file(config: LoggingConfig, level: int) -> TimedRotatingFileHandler:
    directory = log_dir_for(config)
    directory.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        filename=str(directory / LOG_FILENAME),
        when="midnight",
        backupCount=config.max_log_days,
        encoding="utf-8",
        utc=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    return handler


def _close_log_file() -> None:
    global _log_file
    if _log_file is not None:
        logging.getLogger().removeHandler(_log_file)
        _log_file.close()
        _log_file = None


def _processors(mode: str) -> list[Any]:
    renderer: Any
    if mode == "prod":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


class _TeeLogger:
    """Final logger: print the rendered line, then copy it to the open log file.

    The file is looked up on every write so cached loggers follow a later
    configure_logging call.
    """

    def _write(self, levelno: int, message: str) -> None:
        print(message, file=sys.stderr)
        if _log_file is None:
            return
        record = logging.makeLogRecord(
            {
                "name": "eventfold",
                "levelno": levelno,
                "levelname": logging.getLevelName(levelno),
                "msg": message,
            }
        )
        _log_file.handle(record)

    def debug(self, message: str) -> None:
        self._write(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._write(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._write(logging.WARNING, message)

    def error(self, message: str) -> None:
        self._write(logging.ERROR, message)

    def critical(self, message: str) -> None:
        self._write(logging.CRITICAL, message)

    msg = info
    warn = warning
    exception = error
    fatal = critical


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog from the ``logging`` section of the config file.

    Calling it again replaces the previous setup, closing any log file the
    earlier call opened.

    Args:
        config: Logging settings. If None, defaults are used and the mode
            comes from the EVENTFOLD_LOG_MODE environment variable.
    """
    global _configured, _log_file

    if config is None:
        config = _config_from_env()
    level = _LEVELS[config.level]

    _close_log_file()
    root = logging.getLogger()
    root.setLevel(level)
    log_file = _open_log_file(config, level) if config.enable_file_logging else None
    if log_file is not None:
        root.addHandler(log_file)
    _log_file = log_file

    structlog.configure(
        processors=_processors(config.mode),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=lambda *_args: _TeeLogger(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, configuring defaults on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)


def reset_logging() -> None:
    """Forget the current setup so the next get_logger reconfigures.

    Used by tests to isolate logging state.
    """
    global _configured
    _configured = False
    _close_log_file()
    structlog.reset_defaults()
