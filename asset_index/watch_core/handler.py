"""Watchdog event handler that turns asset changes into callbacks."""

from __future__ import annotations

import os
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from asset_index.config import GeneratorConfig

from .utils import LOGGER, is_qualifying_dir, is_qualifying_path

EVENT_ADD = "add"
EVENT_CHANGE = "change"
EVENT_UNLINK = "unlink"

EventCallback = Callable[[str, str], object]


def _event_path(raw) -> str:
    return os.fsdecode(raw)


class AssetEventHandler(FileSystemEventHandler):
    """Forwards add/change/unlink of qualifying files to ``callback(kind, path)``.

    A directory leaving the tree (deleted, or moved elsewhere) is reported
    once as an unlink of the directory itself, since the native observers do
    not emit per-file events for its contents. Other directory events are
    ignored.
    """

    def __init__(self, config: GeneratorConfig, callback: EventCallback):
        super().__init__()
        self.config = config
        self.callback = callback

    def _dispatch(self, kind: str, path: str) -> None:
        LOGGER.debug("%s %s", kind, path)
        self.callback(kind, path)

    def _maybe_dispatch(self, kind: str, raw_path) -> bool:
        path = _event_path(raw_path)
        if not is_qualifying_path(self.config, path):
            return False
        self._dispatch(kind, path)
        return True

    def _maybe_dispatch_dir(self, kind: str, raw_path) -> bool:
        path = _event_path(raw_path)
        if not is_qualifying_dir(self.config, path):
            return False
        self._dispatch(kind, path)
        return True

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._maybe_dispatch(EVENT_ADD, event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._maybe_dispatch(EVENT_CHANGE, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            self._maybe_dispatch_dir(EVENT_UNLINK, event.src_path)
        else:
            self._maybe_dispatch(EVENT_UNLINK, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        # A rename is an unlink of the old name followed by an add of the new one
        dest = getattr(event, "dest_path", None)
        if event.is_directory:
            self._maybe_dispatch_dir(EVENT_UNLINK, event.src_path)
            if dest:
                self._maybe_dispatch_dir(EVENT_ADD, dest)
            return
        self._maybe_dispatch(EVENT_UNLINK, event.src_path)
        if dest:
            self._maybe_dispatch(EVENT_ADD, dest)


__all__ = ["AssetEventHandler", "EVENT_ADD", "EVENT_CHANGE", "EVENT_UNLINK"]
