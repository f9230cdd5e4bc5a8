"""
Extraction Contracts

Interfaces implemented by site plugins:
    Canonizer - reduces a URI to its canonical, comparison-stable form
    Extractor - derives title, product identity and pricing from a page

Both pass non-fatal failures (e.g. one field failed to parse) to an
exception handler installed by the caller instead of aborting.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

from ..common.log_config import log_exception

if TYPE_CHECKING:
    from ..models import Pricing, ProductDescription

# handler(level, exception) - level is a logging level such as logging.WARNING
ExceptionHandler = Callable[[int, BaseException], None]


class ExceptionPassing:
    """
    Mixin for plugins that pass exceptions to a caller-supplied handler.

    Usage::

        extractor = site.new_extractor(uri).with_exception_handler(
            lambda level, exc: problems.append((level, exc))
        )
    """

    _exception_handler: Optional[ExceptionHandler] = None

    def with_exception_handler(self, exception_handler: ExceptionHandler):
        """
        Set the exception handler for this object.

        Args:
            exception_handler: Callable taking a logging level and an exception

        Returns:
            The object itself for method chaining
        """
        self._exception_handler = exception_handler
        return self

    def report_exception(self, level: int, exception: BaseException) -> None:
        """
        Pass a non-fatal failure to the handler.

        Without a handler the failure is logged to the logger of the module
        that defines the plugin class.
        """
        if self._exception_handler is not None:
            self._exception_handler(level, exception)
        else:
            source = type(self)
            log_exception(logging.getLogger(source.__module__), level, exception, source.__name__)


class Canonizer(ExceptionPassing, ABC):
    """
    Transforms the URI it was created for into a canonical form.

    Two URIs are considered equal if the string forms of their canonical
    forms are equal, so canonization must be deterministic.
    """

    @abstractmethod
    def canonize(self) -> Optional[str]:
        """
        Return the canonical form of the URI.

        Returns:
            Canonical URI, or None if canonization does not apply to its content

        Raises:
            ValueError: If the URI cannot be canonized by this canonizer
        """


class Extractor(ExceptionPassing, ABC):
    """
    Extracts product information from the page it was created for.

    Each facet is independent: a missing title does not prevent pricing
    from being extracted, and the calls may be made in any order.
    """

    @abstractmethod
    def extract_document_title(self) -> Optional[str]:
        """Return the document title, or None if it could not be extracted."""

    @abstractmethod
    def extract_product_description(self) -> Optional["ProductDescription"]:
        """Return the product description, or None if it could not be extracted."""

    @abstractmethod
    def extract_pricing(self) -> Optional["Pricing"]:
        """Return the pricing information, or None if it could not be extracted."""
