"""One generation pass: scan, derive, check for duplicates, emit."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from asset_index.collisions import ExportEntry, detect_collisions
from asset_index.config import GeneratorConfig
from asset_index.emitter import render_module, write_module
from asset_index.logger import ContextLogger, get_logger
from asset_index.naming import derive_identifiers
from asset_index.scanner import find_assets

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    output: Path
    count: int
    content: str


def build_entries(config: GeneratorConfig) -> List[ExportEntry]:
    return [(asset, derive_identifiers(config.root, asset.path)) for asset in find_assets(config)]


def generate_exports(config: GeneratorConfig) -> GenerationResult:
    """Run a full pass and overwrite the output file.

    Raises ``FilesystemError`` or ``DuplicateExportError``; the output file is
    not opened unless every export name is unique.
    """
    entries = detect_collisions(build_entries(config)).unwrap()
    content = render_module(entries, config.output)
    write_module(config.output, content)

    log = ContextLogger(logger, root=str(config.root), output=str(config.output))
    log.info(f"Generated exports in {config.output}", count=len(entries))
    return GenerationResult(output=config.output, count=len(entries), content=content)


__all__ = ["GenerationResult", "build_entries", "generate_exports"]
