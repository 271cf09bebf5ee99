"""Path → identifier mapping for generated exports."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from asset_index.config import EXPORT_PREFIX

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class IdentifierPair:
    import_alias: str
    export_name: str


def import_alias(root: str | os.PathLike, path: str | os.PathLike) -> str:
    """Flatten ``path`` (relative to ``root``) into an upper-case identifier.

    ``icons/home-dark.svg`` becomes ``ICONS_HOME_DARK``. The mapping is lossy:
    case and separator differences collapse to the same alias.
    """
    rel = os.path.relpath(os.fspath(path), os.fspath(root))
    directory, base = os.path.split(rel)
    stem = os.path.splitext(base)[0]
    parts = [p for p in directory.split(os.sep) if p] if directory else []
    parts.append(stem)
    flattened = "_".join(parts)
    return _NON_ALNUM.sub("_", flattened).upper()


def export_name(alias: str) -> str:
    return f"{EXPORT_PREFIX}{alias}"


def derive_identifiers(root: str | os.PathLike, path: str | os.PathLike) -> IdentifierPair:
    alias = import_alias(root, path)
    return IdentifierPair(import_alias=alias, export_name=export_name(alias))


__all__ = ["IdentifierPair", "derive_identifiers", "export_name", "import_alias"]
