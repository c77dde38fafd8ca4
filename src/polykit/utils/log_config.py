"""Logging for the polykit package.

Every module logs through the ``polykit`` logger defined here. Records go to
stdout; the expansions done by the trigonometric layer and the choice of
root finder are logged at DEBUG level.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=logging.INFO, format_string=LOG_FORMAT):
    """Configures basic logging to stdout."""
    logging.basicConfig(level=level, format=format_string, stream=sys.stdout)


def set_log_level(level) -> None:
    """Change the level of the polykit logger only."""
    logger.setLevel(level)


setup_logging()

logger = logging.getLogger("polykit")
