"""Structured logging for the localizer using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module

Example:
    from localizer.logging import get_module_logger

    logger = get_module_logger()
    logger.info("language_registered", language="fr")
"""

from localizer.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
