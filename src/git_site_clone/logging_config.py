import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "git_site_clone"


def setup_logging(verbose: bool = False) -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.propagate = False

    # silent unless asked
    if not verbose:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
