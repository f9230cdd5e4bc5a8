"""
Product data models.

Pure data classes for representing extracted product identity.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProductDescription:
    """Product identity as found on a product page."""
    id: Optional[str] = None      # Vendor SKU / article number
    name: Optional[str] = None
    image: Optional[str] = None   # URI of the main product image


def build_product_description(
    id: Optional[str] = None,
    name: Optional[str] = None,
    image: Optional[str] = None,
) -> Optional[ProductDescription]:
    """
    Build a ProductDescription from whatever fields could be extracted.

    Returns:
        ProductDescription, or None if none of the fields is set
    """
    if id is None and name is None and image is None:
        return None
    return ProductDescription(id=id, name=name, image=image)
