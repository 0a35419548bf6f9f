import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("sumo")


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False
