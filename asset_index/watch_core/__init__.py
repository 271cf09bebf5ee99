"""Core building blocks for watch mode.

Modules:
    utils: observer factory and event path filtering
    handler: watchdog event handler logic
    regenerator: serialized regeneration passes
"""

from . import utils, handler, regenerator

__all__ = [
    "utils",
    "handler",
    "regenerator",
]
