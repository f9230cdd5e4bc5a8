"""
Site base class.

A site recognizes the URIs of one web property and hands out a Canonizer
and/or Extractor scoped to a single URI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .contracts import Canonizer, Extractor
    from .descriptor import SiteDescriptor


class Site(ABC):
    """
    Base class for site plugins.

    Subclasses must implement ``can_process_uri``. They may override
    ``new_canonizer`` and ``new_extractor``; by default a site offers neither.

    Usage::

        class ExampleShop(Site):
            def __init__(self):
                super().__init__(SiteDescriptor("Example Shop", site="https://www.example.com/"))

            def can_process_uri(self, uri):
                return urlparse(uri).netloc.lower().endswith("example.com")

            def new_canonizer(self, uri):
                return ExampleShopCanonizer(uri)
    """

    def __init__(self, descriptor: SiteDescriptor):
        self._descriptor = descriptor

    @property
    def descriptor(self) -> SiteDescriptor:
        return self._descriptor

    @abstractmethod
    def can_process_uri(self, uri: str) -> bool:
        """
        Check whether this site can process the URI.

        Must return False, not raise, for URIs the site does not recognize.
        """

    def new_canonizer(self, uri: str) -> Optional[Canonizer]:
        """Create a canonizer for the URI, or None if the site has none for it."""
        return None

    def new_extractor(self, uri: str) -> Optional[Extractor]:
        """Create an extractor for the URI, or None if the site has none for it."""
        return None

    def __repr__(self):
        return f"<{type(self).__name__} {self._descriptor.label!r}>"
