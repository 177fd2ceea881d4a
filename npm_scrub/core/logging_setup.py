import logging
import sys

from npm_scrub.core.config.settings import settings


def configure_logging(verbose: bool = False) -> None:
    """
    Installs a single stderr handler on the root logger.
    Called by the command line entry point only.
    """
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
