"""
Pig & Motor Pulse - Logging Configuration

Diagnostics go to stderr so they never mix with the game's console text
or with report output.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", debug: bool = False) -> None:
    """Install a single stderr handler on the root logger."""
    if debug:
        level = "DEBUG"
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
