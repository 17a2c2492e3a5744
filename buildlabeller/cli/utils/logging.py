import logging
import sys

logger = logging.getLogger("buildlabeller")

PLAIN_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool):
    """
    Configures the buildlabeller logger based on the debug flag.

    Records go to stderr so that stdout only carries labels. Debug mode also
    shows the level and the module that logged.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    formatter = logging.Formatter(DEBUG_FORMAT if debug else PLAIN_FORMAT)

    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stderr)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setFormatter(formatter)
