"""
Provider Registry

Maps a capability name to the factories that provide it. Site plugins are
registered under SITE_CAPABILITY, either statically at import time::

    @register_site
    class ExampleShop(Site):
        ...

or by dotted path from config/sites.yaml::

    providers:
      cleanuri.site.Site:
        - example_plugins.shop:ExampleShop
"""

from __future__ import annotations

import importlib
import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..common.config_loader import load_site_providers

logger = logging.getLogger(__name__)

SITE_CAPABILITY = "cleanuri.site.Site"

Factory = Callable[[], Any]


def resolve_path(path: str) -> Any:
    """
    Import an object by dotted path.

    Accepts ``package.module:Name`` or ``package.module.Name``.

    Raises:
        ImportError: If the module cannot be imported
        AttributeError: If the module has no such attribute
    """
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ImportError(f"Invalid provider path: {path!r}")

    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


class ProviderRegistry:
    """
    Registry of provider factories keyed by capability name.

    Factories are zero-argument callables (usually classes) and are kept in
    registration order. All methods are thread-safe.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._providers: Dict[str, List[Factory]] = {}

    @classmethod
    def from_config(cls, filename: str = "sites.yaml") -> ProviderRegistry:
        """Create a registry populated from a YAML provider config."""
        registry = cls()
        registry.register_from_config(load_site_providers(filename))
        return registry

    def register(self, capability: str, factory: Factory) -> Factory:
        """
        Register a factory for a capability.

        Registering the same factory twice is a no-op.

        Returns:
            The factory, so this can be used as a decorator body
        """
        if not callable(factory):
            raise TypeError(f"Provider for {capability!r} must be callable (got {factory!r})")

        with self._lock:
            factories = self._providers.setdefault(capability, [])
            if factory not in factories:
                factories.append(factory)
                logger.debug("Registered %s for %s", getattr(factory, "__qualname__", factory), capability)
        return factory

    def provider(self, capability: str) -> Callable[[Factory], Factory]:
        """Decorator form of ``register``."""
        def decorator(factory: Factory) -> Factory:
            return self.register(capability, factory)
        return decorator

    def register_path(self, capability: str, path: str) -> Factory:
        """Import a factory by dotted path and register it."""
        return self.register(capability, resolve_path(path))

    def register_from_config(self, config: Mapping[str, List[str]]) -> None:
        """Register every ``{capability: [paths]}`` entry of a provider config."""
        for capability, paths in config.items():
            for path in paths:
                self.register_path(capability, path)

    def unregister(self, capability: str, factory: Factory) -> bool:
        """Remove a factory. Returns False if it was not registered."""
        with self._lock:
            factories = self._providers.get(capability, [])
            if factory not in factories:
                return False
            factories.remove(factory)
            return True

    def providers(self, capability: str) -> Tuple[Factory, ...]:
        """Snapshot of the factories registered for a capability."""
        with self._lock:
            return tuple(self._providers.get(capability, ()))

    def capabilities(self) -> List[str]:
        with self._lock:
            return [name for name, factories in self._providers.items() if factories]

    def clear(self, capability: Optional[str] = None) -> None:
        """Remove all factories, or only those of one capability."""
        with self._lock:
            if capability is None:
                self._providers.clear()
            else:
                self._providers.pop(capability, None)


# Process-wide registry used by SiteLoader when none is given
default_registry = ProviderRegistry()


def register_site(factory: Factory) -> Factory:
    """Class decorator registering a Site implementation with the default registry."""
    return default_registry.register(SITE_CAPABILITY, factory)
