"""
Logging Configuration

Site plugins live in their own packages, so their loggers sit outside the
``cleanuri`` hierarchy. ``setup_logging`` configures both, and plugin
failures that no exception handler picks up are logged to the logger of the
plugin's own module.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, List

FRAMEWORK_LOGGER = "cleanuri"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def plugin_logger_names(sites: Iterable) -> List[str]:
    """
    Top-level package names of the given site plugins, in order, without duplicates.

    Plugins shipped inside ``cleanuri`` are covered by the framework logger.
    """
    names: List[str] = []
    for site in sites:
        package = type(site).__module__.split(".")[0]
        if package != FRAMEWORK_LOGGER and package not in names:
            names.append(package)
    return names


def setup_logging(verbose: bool = False, quiet: bool = False, sites: Iterable = ()) -> None:
    """
    Send framework and plugin log output to stderr.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING
        sites: Site instances (e.g. ``SiteLoader.find_sites()``) whose packages
            get the same handler and level
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in [FRAMEWORK_LOGGER, *plugin_logger_names(sites)]:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate handlers if called multiple times
        logger.handlers.clear()
        logger.addHandler(handler)


def log_exception(logger: logging.Logger, level: int, exception: BaseException, source: str) -> None:
    """Log a non-fatal failure with its traceback at the given level."""
    logger.log(level, "%s: %s", source, exception, exc_info=exception)


def logging_exception_handler(logger_name: str) -> Callable[[int, BaseException], None]:
    """Exception handler for ``with_exception_handler`` that logs to the named logger."""
    logger = logging.getLogger(logger_name)

    def handle(level: int, exception: BaseException) -> None:
        log_exception(logger, level, exception, logger_name)

    return handle
