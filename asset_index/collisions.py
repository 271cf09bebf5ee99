"""Duplicate export-name detection for a single generation pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from asset_index.logger import DuplicateExportError
from asset_index.naming import IdentifierPair
from asset_index.scanner import AssetFile

ExportEntry = Tuple[AssetFile, IdentifierPair]


@dataclass(frozen=True)
class CollisionCheck:
    """Outcome of a collision scan: either the entries or the first duplicate."""

    entries: Tuple[ExportEntry, ...] = ()
    duplicate: Optional[DuplicateExportError] = None

    @property
    def ok(self) -> bool:
        return self.duplicate is None

    def unwrap(self) -> Tuple[ExportEntry, ...]:
        if self.duplicate is not None:
            raise self.duplicate
        return self.entries


def detect_collisions(entries: Iterable[ExportEntry]) -> CollisionCheck:
    """Walk entries in discovery order and stop at the first repeated export name."""
    seen: set[str] = set()
    accepted: list[ExportEntry] = []
    for asset, pair in entries:
        if pair.export_name in seen:
            return CollisionCheck(
                duplicate=DuplicateExportError(pair.export_name, str(asset.path))
            )
        seen.add(pair.export_name)
        accepted.append((asset, pair))
    return CollisionCheck(entries=tuple(accepted))


__all__ = ["CollisionCheck", "ExportEntry", "detect_collisions"]
