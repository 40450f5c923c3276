"""Structlog configuration for the localizer.

Every event carries the service name and the configured reference language,
and module loggers are bound to the package component they log for
(``i18n.registry``, ``i18n.templates`` ...). Console rendering is used outside
production and JSON in production. Output is suppressed under pytest.

Usage:
    from localizer.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("language_registered", language="fr")

Dependencies:
    - localizer.configuration.settings
"""

import inspect
import logging
import sys
from typing import Any, Dict, MutableMapping, Optional

import structlog
from structlog.stdlib import BoundLogger

from localizer.configuration import settings

SERVICE_NAME = "localizer"
PACKAGE_PREFIX = "localizer."


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def add_localizer_context(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Structlog processor stamping service-wide localization context.

    Values already bound on the event are left untouched.
    """
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("reference_language", settings.i18n.reference_language)
    return event_dict


def module_context(module_name: str) -> Dict[str, str]:
    """Context bound to a module logger.

    Example:
        >>> module_context("localizer.i18n.registry")
        {'component': 'i18n.registry', 'module_path': 'localizer.i18n.registry'}
    """
    component = module_name
    if module_name.startswith(PACKAGE_PREFIX):
        component = module_name[len(PACKAGE_PREFIX) :]
    return {"component": component, "module_path": module_name}


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                add_localizer_context,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_localizer_context,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module's component.

    Example:
        # In localizer/i18n/registry.py
        logger = get_module_logger()
        # context: {"component": "i18n.registry", "module_path": "localizer.i18n.registry"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(**module_context(module.__name__))
