"""Configuration for a generation run.

Everything here is fixed at startup and passed explicitly to the scanner,
emitter and watcher.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple

from asset_index.logger import ConfigurationError, get_logger, safe_bool

LOGGER = get_logger("asset_index.config")

DEFAULT_EXTENSIONS = "jpg,png,svg,gif"

# Environment fallbacks for options that have no required CLI flag
ENV_USE_POLLING = "ASSET_INDEX_USE_POLLING"
ENV_INCLUDE_HIDDEN = "ASSET_INDEX_INCLUDE_HIDDEN"
ENV_LOG_JSON = "ASSET_INDEX_LOG_JSON"

EXPORT_PREFIX = "I_"
HIDDEN_MARKER = "."


def parse_extensions(value: str | Iterable[str]) -> Tuple[str, ...]:
    """Turn ``"jpg,png"`` into ``(".jpg", ".png")``.

    Blank items are dropped and repeats keep their first position. Items
    already carrying a leading dot are accepted as-is.
    """
    items = value.split(",") if isinstance(value, str) else list(value)
    out: list[str] = []
    for raw in items:
        item = str(raw).strip()
        if not item:
            continue
        ext = item if item.startswith(".") else f".{item}"
        if ext not in out:
            out.append(ext)
    return tuple(out)


def env_flag(name: str, default: bool = False) -> bool:
    return safe_bool(os.environ.get(name), default, logger=LOGGER, context=name)


@dataclass(frozen=True)
class GeneratorConfig:
    root: Path
    output: Path
    extensions: Tuple[str, ...] = field(default_factory=lambda: parse_extensions(DEFAULT_EXTENSIONS))
    include_hidden: bool = False
    use_polling: bool = False

    def __post_init__(self) -> None:
        if not self.extensions:
            raise ConfigurationError("At least one file extension is required")

    @classmethod
    def from_options(
        cls,
        directory: str | os.PathLike,
        output: str | os.PathLike,
        ext: str = DEFAULT_EXTENSIONS,
        *,
        include_hidden: Optional[bool] = None,
        use_polling: Optional[bool] = None,
    ) -> "GeneratorConfig":
        """Build a config from CLI-style options, filling gaps from the environment."""
        if include_hidden is None:
            include_hidden = env_flag(ENV_INCLUDE_HIDDEN)
        if use_polling is None:
            use_polling = env_flag(ENV_USE_POLLING)
        return cls(
            root=Path(directory).absolute(),
            output=Path(output).absolute(),
            extensions=parse_extensions(ext),
            include_hidden=bool(include_hidden),
            use_polling=bool(use_polling),
        )

    def matches_extension(self, path: str | os.PathLike) -> bool:
        return os.path.splitext(os.fspath(path))[1] in self.extensions


__all__ = [
    "DEFAULT_EXTENSIONS",
    "ENV_INCLUDE_HIDDEN",
    "ENV_LOG_JSON",
    "ENV_USE_POLLING",
    "EXPORT_PREFIX",
    "HIDDEN_MARKER",
    "GeneratorConfig",
    "env_flag",
    "parse_extensions",
]
