"""Watch mode: regenerate the export module on every qualifying change."""

from __future__ import annotations

import os
import time
from typing import Optional

from watchdog.observers.api import BaseObserver

from asset_index.config import GeneratorConfig
from asset_index.watch_core.handler import AssetEventHandler, EventCallback
from asset_index.watch_core.regenerator import Regenerator
from asset_index.watch_core.utils import LOGGER, create_observer


def subscribe(
    config: GeneratorConfig,
    callback: EventCallback,
    observer: Optional[BaseObserver] = None,
) -> BaseObserver:
    """Start observing ``config.root`` and return the running observer.

    ``callback(kind, path)`` is invoked once per qualifying event, on the
    observer's dispatch thread.
    """
    obs = observer if observer is not None else create_observer(config.use_polling)
    handler = AssetEventHandler(config, callback)
    obs.schedule(handler, os.fspath(config.root), recursive=True)
    obs.start()
    return obs


def run_watch(
    config: GeneratorConfig,
    regenerator: Optional[Regenerator] = None,
    observer: Optional[BaseObserver] = None,
) -> Regenerator:
    """Block until interrupted, regenerating after each qualifying event.

    Call after the initial pass has succeeded.
    """
    regen = regenerator if regenerator is not None else Regenerator(config)
    obs = subscribe(config, regen, observer=observer)
    LOGGER.info(f"Monitoring changes in directory: {config.root}")

    try:
        while True:
            time.sleep(1.0)
    except KeyboardInterrupt:
        LOGGER.info("Stopping watcher...")
    finally:
        obs.stop()
        obs.join()
    return regen


__all__ = ["run_watch", "subscribe"]
