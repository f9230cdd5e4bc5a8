"""
Site Loader

Finds all Site implementations registered with a ProviderRegistry and caches
them until the cache is cleared.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from .registry import SITE_CAPABILITY, ProviderRegistry, default_registry

if TYPE_CHECKING:
    from .base import Site
    from .descriptor import SiteDescriptor

logger = logging.getLogger(__name__)

SiteReporter = Callable[["SiteDescriptor"], None]


def _ignore_site(descriptor: SiteDescriptor) -> None:
    pass


def log_site_descriptor(descriptor: SiteDescriptor) -> None:
    """Site reporter that logs one line per discovered site."""
    if descriptor.description:
        logger.info("Found site: %s - %s", descriptor.label, descriptor.description)
    else:
        logger.info("Found site: %s", descriptor.label)


class SiteLoader:
    """
    Loads the Site implementations available in the process.

    Discovery runs once; later calls return the cached sites until
    ``clear_cache()`` is called. The site reporter is called with each site's
    descriptor whenever discovery runs.

    Usage::

        loader = SiteLoader(site_reporter=log_site_descriptor)
        site = loader.find_site_for_uri("https://www.example.com/item/42")
        if site is not None:
            extractor = site.new_extractor("https://www.example.com/item/42")
    """

    def __init__(
        self,
        registry: Optional[ProviderRegistry] = None,
        site_reporter: Optional[SiteReporter] = None,
    ):
        """
        Initialize the loader.

        Args:
            registry: Registry to discover sites from (defaults to the process-wide one)
            site_reporter: Called with the descriptor of each site found
        """
        self._registry = registry if registry is not None else default_registry
        self._site_reporter = site_reporter if site_reporter is not None else _ignore_site
        self._lock = threading.RLock()
        self._sites: Optional[Tuple[Site, ...]] = None

    def find_sites(self) -> Tuple[Site, ...]:
        """
        Find and instantiate all registered Site implementations.

        The result is cached, so subsequent calls return the same tuple
        without calling the reporter again.

        Raises:
            Whatever a site factory raises; the cache stays empty in that case
        """
        with self._lock:
            if self._sites is None:
                self._sites = self._discover()
            return self._sites

    def clear_cache(self) -> None:
        """Forget the cached sites; the next ``find_sites()`` discovers again."""
        with self._lock:
            self._sites = None

    def find_site_for_uri(self, uri: str) -> Optional[Site]:
        """Return the first site that can process the URI, or None."""
        for site in self.find_sites():
            if site.can_process_uri(uri):
                return site
        return None

    def _discover(self) -> Tuple[Site, ...]:
        sites = []
        for factory in self._registry.providers(SITE_CAPABILITY):
            site = factory()
            self._site_reporter(site.descriptor)
            sites.append(site)

        logger.debug("Discovered %d site(s)", len(sites))
        return tuple(sites)
