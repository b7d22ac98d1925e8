"""
Logging configuration for the catalog site.

One console handler on the root logger; modules log through
``logging.getLogger(__name__)``.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR')
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # create_app may run several times in one process (tests)
    for h in list(root_logger.handlers):
        if getattr(h, "_moviecatalog", False):
            root_logger.removeHandler(h)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler._moviecatalog = True
    root_logger.addHandler(console_handler)

    # Silence noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
