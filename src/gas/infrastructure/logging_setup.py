"""Process-wide logging configuration for the command line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Set up the root logger once; ``verbose`` forces DEBUG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
    )
