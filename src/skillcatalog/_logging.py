import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging() -> None:
    """Configure logging based on LOG_LEVEL environment variable.

    Diagnostics go to stderr so stdout carries only the catalog.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig leaves an already-configured root untouched.
    logging.root.setLevel(log_level)
