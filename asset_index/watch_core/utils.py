"""Misc utilities shared across watch_core modules."""

from __future__ import annotations

import os
from typing import Any, Type

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from asset_index.config import HIDDEN_MARKER, GeneratorConfig
from asset_index.logger import get_logger

LOGGER = get_logger("asset_index.watch")


def safe_print(*args: Any, **kwargs: Any) -> None:
    """Best-effort print that swallows IO errors."""
    try:
        print(*args, **kwargs)
    except OSError:
        pass


def create_observer(
    use_polling: bool,
    observer_cls: Type[BaseObserver] = Observer,
    **kwargs: Any,
) -> BaseObserver:
    """Create a watchdog observer based on configuration."""
    if use_polling:
        from watchdog.observers.polling import PollingObserver

        LOGGER.info("Using polling observer for filesystem events")
        return PollingObserver(**kwargs)
    return observer_cls(**kwargs)


def relative_parts(config: GeneratorConfig, path: str) -> tuple[str, ...] | None:
    """Path components below the scan root, or None when outside it."""
    try:
        rel = os.path.relpath(path, os.fspath(config.root))
    except ValueError:
        # different drive on Windows
        return None
    if rel == os.curdir or rel == os.pardir or rel.startswith(os.pardir + os.sep):
        return None
    return tuple(p for p in rel.split(os.sep) if p)


def _is_visible(config: GeneratorConfig, parts: tuple[str, ...]) -> bool:
    return config.include_hidden or not any(p.startswith(HIDDEN_MARKER) for p in parts)


def is_qualifying_path(config: GeneratorConfig, path: str) -> bool:
    """An eligible, non-hidden asset path under the scan root.

    Only the path is inspected, so deleted files still qualify.
    """
    parts = relative_parts(config, path)
    if not parts or not _is_visible(config, parts):
        return False
    return config.matches_extension(path)


def is_qualifying_dir(config: GeneratorConfig, path: str) -> bool:
    """A non-hidden directory path strictly below the scan root."""
    parts = relative_parts(config, path)
    return bool(parts) and _is_visible(config, parts)


__all__ = [
    "LOGGER",
    "create_observer",
    "is_qualifying_dir",
    "is_qualifying_path",
    "relative_parts",
    "safe_print",
]
