"""
Data models for extracted product data.

This module contains immutable value types with no site-specific logic.
"""

from .pricing import Discount, Pricing, PricingBuilder
from .product import ProductDescription, build_product_description

__all__ = [
    'Discount',
    'Pricing',
    'PricingBuilder',
    'ProductDescription',
    'build_product_description',
]
