"""Shared test fixtures."""

from decimal import Decimal

import pytest

from cleanuri.models import PricingBuilder
from cleanuri.site import ProviderRegistry, SITE_CAPABILITY, SiteDescriptor
from sample_sites import ExampleShop, OtherShop


@pytest.fixture
def tiered_pricing():
    """Base price plus three discount tiers."""
    return (
        PricingBuilder()
        .set_unit_price(Decimal("10.00"))
        .add_discount(5, Decimal("9.00"))
        .add_discount(10, Decimal("8.50"))
        .add_discount(20, Decimal("7.00"))
        .build()
    )


@pytest.fixture
def full_descriptor():
    """Descriptor with every field set."""
    return SiteDescriptor(
        "Test Site",
        description="A site for tests",
        site="https://www.example.com/",
        author="Test Author",
        license="MIT",
    )


@pytest.fixture
def site_registry():
    """Registry holding the two sample sites, ExampleShop first."""
    registry = ProviderRegistry()
    registry.register(SITE_CAPABILITY, ExampleShop)
    registry.register(SITE_CAPABILITY, OtherShop)
    return registry


@pytest.fixture
def example_pages():
    """Install sample pages on ExampleShop for the duration of a test."""
    pages = {
        "https://www.example.com/item/42": {
            "title": "Widget 42 | Example Shop",
            "sku": "W-42",
            "name": "Widget 42",
            "image": "https://www.example.com/img/42.jpg",
            "prices": [(1, "10.00"), (5, "9.00"), (10, "8.50")],
        },
        "https://www.example.com/item/7": {
            "title": "Gadget 7 | Example Shop",
            "prices": [(1, "4.00"), (10, "n/a"), (-3, "1.00")],
        },
    }
    ExampleShop.pages = pages
    yield pages
    ExampleShop.pages = {}
