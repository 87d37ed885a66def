import logging
import sys

PACKAGE_LOGGER_NAME = "quadrature_engine"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    All module loggers (created with ``logging.getLogger(__name__)``)
    propagate to the package logger. Calling this more than once replaces
    the level but never stacks handlers.

    Args:
        level: Logging level name or number for the package logger.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        # The handler processes whatever the logger lets through
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(console_handler)

    return package_logger
