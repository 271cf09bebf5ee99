"""Rendering and writing of the generated export module."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from asset_index.collisions import ExportEntry
from asset_index.logger import FilesystemError


def import_path(output: str | os.PathLike, asset: str | os.PathLike) -> str:
    """Module specifier for ``asset`` as seen from the output file's directory."""
    rel = os.path.relpath(os.fspath(asset), os.path.dirname(os.fspath(output)))
    rel = rel.replace("\\", "/")
    if rel.startswith("../"):
        return rel
    return f"./{rel}"


def render_module(entries: Iterable[ExportEntry], output: str | os.PathLike) -> str:
    """All import lines in order, then all export lines, joined by newlines."""
    imports: List[str] = []
    exports: List[str] = []
    for asset, pair in entries:
        imports.append(f'import {pair.import_alias} from "{import_path(output, asset.path)}";')
        exports.append(f"export const {pair.export_name} = {pair.import_alias};")
    return "\n".join(imports + exports)


def write_module(output: str | os.PathLike, content: str) -> Path:
    """Overwrite ``output`` with ``content``; the parent directory must exist."""
    target = Path(output)
    try:
        with open(target, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise FilesystemError(
            f"Cannot write {target}: {exc.strerror or exc}", str(target)
        ) from exc
    return target


__all__ = ["import_path", "render_module", "write_module"]
