"""Generate command: write the export module, optionally keep it in sync."""
from __future__ import annotations

import argparse

from asset_index.generator import generate_exports
from asset_index.watcher import run_watch
from cli.core import config_from_args


def cmd_generate(args: argparse.Namespace) -> None:
    """Run the initial pass, then hand over to the watcher when --watch is set.

    Errors from the initial pass propagate to the dispatcher; errors from
    watch-triggered passes are reported by the watcher itself.
    """
    config = config_from_args(args)
    generate_exports(config)

    if getattr(args, "watch", False):
        run_watch(config)
