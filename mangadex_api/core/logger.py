import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from .config import Config
from .exceptions import LoggerError

LOGGER_NAME = "mangadex_api"

CONTEXT_DEFAULTS = {
    'method': '-',
    'path': '-'
}

class _ContextFilter(logging.Filter):
    """Fill in request context for records emitted without it"""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in CONTEXT_DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True

class Logger:
    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, config: Config):
        """Initialize the package logger with configuration"""
        self.config = config

        if LOGGER_NAME in self._loggers:
            self.logger = self._loggers[LOGGER_NAME]
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
                handler.close()
        else:
            self.logger = logging.getLogger(LOGGER_NAME)
            self._loggers[LOGGER_NAME] = self.logger

        self.logger.setLevel(self._get_log_level())

        base_format = self.config.get(
            "logging.format",
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        self.formatter = logging.Formatter(
            base_format + ' - method:%(method)s - path:%(path)s'
        )

        log_file = self.config.get("logging.file")
        if log_file:
            path = Path(log_file)
            if not path.parent.exists() and str(path.parent) != ".":
                try:
                    path.parent.mkdir(parents=True, exist_ok=True)
                except OSError:
                    raise LoggerError(f"Cannot create log directory: {path.parent}")

            max_size = self.config.get("logging.max_size", 1024 * 1024)
            backup_count = self.config.get("logging.backup_count", 3)

            try:
                handler = RotatingFileHandler(
                    str(path),
                    maxBytes=max_size,
                    backupCount=backup_count
                )
            except OSError as e:
                raise LoggerError(f"Failed to setup log file: {str(e)}")
            self._add_handler(handler)

        if self.config.get("logging.console_output", False):
            self._add_handler(logging.StreamHandler())

    def _add_handler(self, handler: logging.Handler) -> None:
        handler.setFormatter(self.formatter)
        handler.addFilter(_ContextFilter())
        self.logger.addHandler(handler)

    def _get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        level_name = str(self.config.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise LoggerError(f"Invalid log level: {level_name}")
        return level

