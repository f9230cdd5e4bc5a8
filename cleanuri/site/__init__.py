"""
Site plugin framework.

Modules:
    base       - Site base class
    contracts  - Canonizer, Extractor and ExceptionPassing interfaces
    descriptor - SiteDescriptor metadata
    registry   - ProviderRegistry for plugin registration
    loader     - SiteLoader for cached site discovery
"""

from .base import Site
from .contracts import Canonizer, ExceptionHandler, ExceptionPassing, Extractor
from .descriptor import SiteDescriptor
from .loader import SiteLoader, log_site_descriptor
from .registry import (
    SITE_CAPABILITY,
    ProviderRegistry,
    default_registry,
    register_site,
    resolve_path,
)

__all__ = [
    # Contracts
    'Site',
    'Canonizer',
    'Extractor',
    'ExceptionPassing',
    'ExceptionHandler',
    'SiteDescriptor',
    # Discovery
    'SiteLoader',
    'log_site_descriptor',
    'ProviderRegistry',
    'SITE_CAPABILITY',
    'default_registry',
    'register_site',
    'resolve_path',
]
