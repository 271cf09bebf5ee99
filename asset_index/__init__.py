"""Generate a module that re-exports asset files under stable identifiers."""

from asset_index.config import GeneratorConfig, parse_extensions
from asset_index.generator import GenerationResult, generate_exports
from asset_index.logger import (
    AssetIndexError,
    ConfigurationError,
    DuplicateExportError,
    FilesystemError,
)

__all__ = [
    "AssetIndexError",
    "ConfigurationError",
    "DuplicateExportError",
    "FilesystemError",
    "GenerationResult",
    "GeneratorConfig",
    "generate_exports",
    "parse_extensions",
]
