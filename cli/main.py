"""CLI entry point: argparse front end for asset export generation."""
from __future__ import annotations

import argparse
import sys
import traceback
from typing import Optional, Sequence

from asset_index.config import DEFAULT_EXTENSIONS


# ---------------------------------------------------------------------------
# Parser builder
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    from cli._version import __version__

    parser = argparse.ArgumentParser(
        prog="asset-index",
        description="Generate a module that re-exports asset files under stable names",
    )
    parser.add_argument("-d", "--dir", required=True, help="Directory to scan for images")
    parser.add_argument("-o", "--out", required=True, help="Output file")
    parser.add_argument(
        "--ext",
        default=DEFAULT_EXTENSIONS,
        help="File extensions to match, comma separated without dots",
    )
    parser.add_argument("-w", "--watch", action="store_true", help="Watch for file changes")
    parser.add_argument(
        "--include-hidden",
        action="store_true",
        help="Include dot-files and dot-directories in scans and watch events",
    )
    parser.add_argument("--polling", action="store_true", help="Use the polling filesystem observer")
    parser.add_argument("--debug", action="store_true", help="Show stack traces on error")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    from cli.core import configure_logging
    from cli.commands.generate import cmd_generate
    from asset_index.logger import AssetIndexError

    configure_logging(args.debug)
    try:
        cmd_generate(args)
    except KeyboardInterrupt:
        return 130
    except AssetIndexError as exc:
        print(str(exc), file=sys.stderr)
        if args.debug:
            traceback.print_exc(file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
