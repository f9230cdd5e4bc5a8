"""Site descriptor: metadata identifying a site plugin."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SiteDescriptor:
    """
    Describes a site plugin.

    Usage::

        descriptor = SiteDescriptor(
            "Example Shop",
            description="Product pages of example.com",
            site="https://www.example.com/",
            author="Jane Doe",
            license="MIT",
        )
    """
    # Shown whenever the plugin is referenced (logs, listings)
    label: str
    description: Optional[str] = None
    site: Optional[str] = None     # Homepage URI of the web property
    author: Optional[str] = None
    license: Optional[str] = None

    def __post_init__(self):
        if self.label is None:
            raise ValueError("Site label is required")

    def with_changes(self, **changes) -> "SiteDescriptor":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
