"""Shared helpers for CLI commands."""
from __future__ import annotations

import argparse
import logging

from asset_index.config import ENV_LOG_JSON, GeneratorConfig, env_flag
from asset_index.logger import JSONFormatter, set_level


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Build the run configuration from parsed CLI flags.

    Boolean flags that were not given fall back to the environment.
    """
    return GeneratorConfig.from_options(
        args.dir,
        args.out,
        args.ext,
        include_hidden=True if getattr(args, "include_hidden", False) else None,
        use_polling=True if getattr(args, "polling", False) else None,
    )


def configure_logging(debug: bool = False) -> None:
    """Apply --debug and the JSON log switch to the root logger."""
    if debug:
        set_level(logging.DEBUG)
    if env_flag(ENV_LOG_JSON):
        for handler in logging.getLogger().handlers:
            handler.setFormatter(JSONFormatter())
