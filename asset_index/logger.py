"""Logging setup and error types for asset-index.

Log records go to stderr. ``ContextLogger`` attaches per-run fields (scan root,
output path, triggering event) that ``JSONFormatter`` flattens into each line
when ``ASSET_INDEX_LOG_JSON`` is set.
"""
import logging
import json
import os
import sys
import traceback
from typing import Any, Dict, Optional
from datetime import datetime, timezone

# Configure root logger with LOG_LEVEL from environment
_log_level_str = os.environ.get("LOG_LEVEL", "INFO").upper()
_log_level = getattr(logging, _log_level_str, logging.INFO)
logging.basicConfig(
    level=_log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stderr)]
)

_logger_cache: Dict[str, logging.Logger] = {}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including any context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }
        extra = getattr(record, 'extra_fields', None)
        if extra:
            log_data.update(extra)
        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Named logger at the process-wide level; ``set_level`` updates it later."""
    if name in _logger_cache:
        return _logger_cache[name]
    logger = logging.getLogger(name)
    logger.setLevel(_log_level)
    _logger_cache[name] = logger
    return logger


def set_level(level: int) -> None:
    """Change the level of the root logger and every logger handed out so far."""
    global _log_level
    _log_level = level
    logging.getLogger().setLevel(level)
    for logger in _logger_cache.values():
        logger.setLevel(level)


class ContextLogger:
    """Logger wrapper that stamps fixed run context on every record.

    Per-call keyword arguments are merged over the fixed context and stored
    as ``record.extra_fields``.
    """

    __slots__ = ('logger', 'context')

    def __init__(self, logger: logging.Logger, **context):
        self.logger = logger
        self.context = context

    def _log(self, level: int, msg: str, exc_info: Any = None, **extra):
        if not self.logger.isEnabledFor(level):
            return
        record = self.logger.makeRecord(
            self.logger.name, level, "(unknown file)", 0, msg, (), exc_info,
        )
        record.extra_fields = {**self.context, **extra}
        self.logger.handle(record)

    def debug(self, msg: str, **extra):
        self._log(logging.DEBUG, msg, **extra)

    def info(self, msg: str, **extra):
        self._log(logging.INFO, msg, **extra)

    def error(self, msg: str, exc_info: Any = None, **extra):
        self._log(logging.ERROR, msg, exc_info=exc_info, **extra)


class AssetIndexError(Exception):
    """Base class for errors that abort a generation pass."""


class FilesystemError(AssetIndexError):
    """Scan root, subdirectory or output file could not be read or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DuplicateExportError(AssetIndexError):
    """Two assets normalize to the same export name."""

    def __init__(self, name: str, path: str):
        super().__init__(f"Duplicate export name detected: {name} for image {path}")
        self.name = name
        self.path = path


class ConfigurationError(AssetIndexError):
    """Options that cannot describe a run, such as an empty extension list."""


def safe_bool(value: Any, default: bool, logger: Optional[logging.Logger] = None, context: str = "") -> bool:
    """Parse an env-style boolean; unknown spellings fall back to ``default``."""
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return default
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    if logger:
        logger.warning(f"Ignoring unrecognized boolean for {context}: {value!r}")
    return default
