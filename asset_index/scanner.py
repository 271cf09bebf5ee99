"""Directory walk that finds eligible asset files under a scan root."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from asset_index.config import HIDDEN_MARKER, GeneratorConfig
from asset_index.logger import FilesystemError, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssetFile:
    path: Path
    extension: str


ENTRY_DIR = "dir"
ENTRY_ASSET = "asset"
ENTRY_OTHER = "other"


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_MARKER)


def classify(path: str | os.PathLike, config: GeneratorConfig) -> str:
    """Sort one entry into ``ENTRY_DIR``, ``ENTRY_ASSET`` or ``ENTRY_OTHER``.

    Assets are regular files with an allowed extension. Symlinks are
    followed; a dangling link raises ``FilesystemError``.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        raise FilesystemError(f"Cannot stat {path}: {exc.strerror or exc}", os.fspath(path)) from exc
    if stat.S_ISDIR(st.st_mode):
        return ENTRY_DIR
    if stat.S_ISREG(st.st_mode) and config.matches_extension(path):
        return ENTRY_ASSET
    return ENTRY_OTHER


def _list_dir(directory: str) -> List[str]:
    try:
        names = os.listdir(directory)
    except OSError as exc:
        raise FilesystemError(
            f"Cannot read directory {directory}: {exc.strerror or exc}", directory
        ) from exc
    return sorted(names)


def iter_assets(config: GeneratorConfig) -> Iterator[AssetFile]:
    """Yield assets depth-first, entries of each directory in sorted order.

    The walk uses an explicit stack instead of recursion. A subdirectory's
    assets are yielded at the subdirectory's sorted position among its
    siblings.
    """
    root = os.fspath(config.root)
    if not os.path.isdir(root):
        raise FilesystemError(f"Scan root is not a readable directory: {root}", root)

    # Stack holds entries still to visit; reversed so pop() keeps sorted order
    stack = [os.path.join(root, name) for name in reversed(_list_dir(root))]
    while stack:
        current = stack.pop()
        if not config.include_hidden and is_hidden(os.path.basename(current)):
            continue
        kind = classify(current, config)
        if kind == ENTRY_DIR:
            stack.extend(os.path.join(current, child) for child in reversed(_list_dir(current)))
        elif kind == ENTRY_ASSET:
            yield AssetFile(Path(current), os.path.splitext(current)[1])


def find_assets(config: GeneratorConfig) -> List[AssetFile]:
    """Collect every asset; any filesystem error discards the partial listing."""
    assets = list(iter_assets(config))
    logger.debug("Found %d assets under %s", len(assets), config.root)
    return assets


__all__ = [
    "ENTRY_ASSET",
    "ENTRY_DIR",
    "ENTRY_OTHER",
    "AssetFile",
    "classify",
    "find_assets",
    "is_hidden",
    "iter_assets",
]
