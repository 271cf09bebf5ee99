"""Serialized regeneration passes triggered by the watcher."""

from __future__ import annotations

import sys
import threading
from typing import Callable, Optional

from asset_index.config import GeneratorConfig
from asset_index.generator import GenerationResult, generate_exports
from asset_index.logger import AssetIndexError, ContextLogger

from .utils import LOGGER, safe_print


class Regenerator:
    """Runs one full generation pass per trigger, never two at once.

    Failures are reported and remembered, never raised: the watcher goes back
    to waiting for the next event.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        generate: Callable[[GeneratorConfig], GenerationResult] = generate_exports,
    ):
        self.config = config
        self._generate = generate
        self._log = ContextLogger(LOGGER, root=str(config.root), output=str(config.output))
        # Held for the whole pass so the output file has a single writer
        self._lock = threading.Lock()
        self.passes = 0
        self.failures = 0
        self.last_error: Optional[AssetIndexError] = None
        self.last_result: Optional[GenerationResult] = None

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def run(self, kind: str = "change", path: Optional[str] = None) -> Optional[GenerationResult]:
        with self._lock:
            self.passes += 1
            self._log.debug(f"Regenerating after {kind} event", event=kind, path=path)
            try:
                result = self._generate(self.config)
            except AssetIndexError as exc:
                self.failures += 1
                self.last_error = exc
                self._log.error("Regeneration failed", error=str(exc), event=kind, path=path)
                safe_print(str(exc), file=sys.stderr)
                return None
            self.last_error = None
            self.last_result = result
            return result

    def __call__(self, kind: str, path: str) -> Optional[GenerationResult]:
        return self.run(kind, path)


__all__ = ["Regenerator"]
