"""
Logging configuration for the pattern showcase.

Console output is for humans; the optional rotating file handlers keep a
debug-level trail of every demonstration run.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional
import traceback


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'thread': record.threadName,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        # Fields attached by handle sites, e.g. PatternShowcaseError.to_dict()
        if hasattr(record, 'error_details'):
            log_data['error_details'] = record.error_details

        return json.dumps(log_data)


class LoggerFactory:
    """Factory for creating configured loggers."""

    _loggers: Dict[str, logging.Logger] = {}
    _configured = False

    @classmethod
    def configure(
        cls,
        log_level: str = "WARNING",
        log_dir: Optional[str] = None,
        enable_console: bool = True,
        enable_structured: bool = False,
        max_bytes: int = 1024 * 1024,
        backup_count: int = 3
    ):
        """
        Configure global logging settings.

        Args:
            log_level: Level for the package loggers and the console handler
            log_dir: Directory for rotating log files; no files when None
            enable_console: Attach a stderr handler
            enable_structured: Emit JSON lines instead of plain text
            max_bytes: Rotation threshold per log file
            backup_count: Number of rotated files to keep
        """
        if cls._configured:
            return

        level = getattr(logging, log_level.upper())
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if log_dir else level)

        # stdout belongs to the demonstration output
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            if enable_structured:
                console_handler.setFormatter(StructuredFormatter())
            else:
                console_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s'
                    )
                )
            root_logger.addHandler(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_path / "pattern_showcase.log",
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            if enable_structured:
                file_handler.setFormatter(StructuredFormatter())
            else:
                file_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
                    )
                )
            root_logger.addHandler(file_handler)

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the given name."""
        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]


def get_logger(name: str) -> logging.Logger:
    """Get a named logger; handlers are attached by LoggerFactory.configure."""
    return LoggerFactory.get_logger(name)
