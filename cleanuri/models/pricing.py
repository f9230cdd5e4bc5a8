"""
Pricing Model

Unit price and quantity-based discount tiers for an extracted product.

A price point is a (minimum quantity, unit price) pair. The base price is the
price point at quantity 1; it is kept in the tier sequence for price lookup
and sanity checking, but surfaced separately through ``Pricing.unit_price``.

Wire format (JSON)::

    {"unit_price": "10.00", "discounts": [{"quantity": 5, "unit_price": "9.00"}]}
"""

from __future__ import annotations

import json
from bisect import bisect_right
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Iterator

BASE_QUANTITY = 1


def _to_decimal(value: Any) -> Decimal:
    """Convert a price value to Decimal, going through str() to keep the written scale."""
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Unit price must be a decimal value (got {value!r})")
    else:
        try:
            price = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Unit price is not a valid decimal: {value!r}") from None

    if not price.is_finite():
        raise ValueError(f"Unit price must be finite (got {value!r})")
    return price


@dataclass(frozen=True)
class Discount:
    """A unit price that applies from a minimum quantity upwards."""
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        if self.quantity is None:
            raise TypeError("Quantity cannot be None")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise TypeError(f"Quantity must be an integer (got {self.quantity!r})")
        if self.quantity <= 0:
            raise ValueError("Quantity must be greater than zero")

        if self.unit_price is None:
            raise TypeError("Unit price cannot be None")
        price = _to_decimal(self.unit_price)
        if price < 0:
            raise ValueError("Unit price cannot be negative")
        object.__setattr__(self, "unit_price", price)

    def to_dict(self) -> dict:
        return {"quantity": self.quantity, "unit_price": str(self.unit_price)}


class Pricing:
    """
    Immutable pricing information: base unit price plus quantity discounts.

    Instances are normally obtained from ``PricingBuilder.build()`` or
    ``Pricing.from_dict()``, both of which return None when no price point
    was supplied.

    Usage::

        pricing = (
            PricingBuilder()
            .set_unit_price(Decimal("10.00"))
            .add_discount(5, Decimal("9.00"))
            .build()
        )
        pricing.find_discounted_unit_price(7)   # Decimal("9.00")
        pricing.calculate_total_price(7)        # Decimal("63.00")
    """

    __slots__ = ("_tiers", "_quantities")

    def __init__(self, discounts: Iterable[Discount]):
        by_quantity: dict[int, Discount] = {}
        for discount in discounts:
            by_quantity[discount.quantity] = discount

        if not by_quantity:
            raise ValueError("Pricing requires at least one price point")

        # Ascending by quantity, base price included
        self._tiers: tuple[Discount, ...] = tuple(
            sorted(by_quantity.values(), key=lambda d: d.quantity)
        )
        self._quantities: tuple[int, ...] = tuple(d.quantity for d in self._tiers)

    @property
    def unit_price(self) -> Decimal | None:
        """Base price at quantity 1, or None if the page did not state one."""
        if self._quantities[0] == BASE_QUANTITY:
            return self._tiers[0].unit_price
        return None

    @property
    def discounts(self) -> tuple[Discount, ...]:
        """Discount tiers in ascending quantity order, excluding the base price."""
        return tuple(self.iter_discounts())

    @property
    def min_quantity(self) -> int:
        """Smallest quantity for which a unit price is known."""
        return self._quantities[0]

    def iter_discounts(self) -> Iterator[Discount]:
        """Yield discount tiers in ascending quantity order, excluding the base price."""
        for discount in self._tiers:
            if discount.quantity > BASE_QUANTITY:
                yield discount

    def find_discounted_unit_price(self, quantity: int) -> Decimal | None:
        """
        Find the unit price that applies when buying ``quantity`` items.

        Uses the tier with the largest threshold not exceeding the quantity.

        Returns:
            Unit price, or None if the quantity is below every threshold
        """
        index = bisect_right(self._quantities, quantity)
        if index == 0:
            return None
        return self._tiers[index - 1].unit_price

    def calculate_total_price(self, quantity: int) -> Decimal | None:
        """Total cost for ``quantity`` items at the applicable unit price."""
        unit_price = self.find_discounted_unit_price(quantity)
        if unit_price is None:
            return None
        return unit_price * quantity

    def are_discounts_sane(self) -> bool:
        """Check that each tier, base price included, is cheaper than the one before it."""
        return all(
            later.unit_price < earlier.unit_price
            for earlier, later in zip(self._tiers, self._tiers[1:])
        )

    # ── Serialization ─────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to the wire format. The base price never appears in ``discounts``."""
        data: dict[str, Any] = {}
        unit_price = self.unit_price
        if unit_price is not None:
            data["unit_price"] = str(unit_price)
        data["discounts"] = [discount.to_dict() for discount in self.iter_discounts()]
        return data

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls, data: dict) -> Pricing | None:
        """
        Deserialize from the wire format.

        A quantity-1 entry in ``discounts`` is merged into the base price and
        overrides ``unit_price`` if both are given.

        Returns:
            Pricing, or None if the payload contains no price point

        Raises:
            ValueError: If the payload is not shaped like the wire format
            TypeError: If a discount entry lacks its quantity or unit price
        """
        if not isinstance(data, dict):
            raise ValueError(f"Pricing data must be an object (got {type(data).__name__})")

        builder = PricingBuilder()

        unit_price = data.get("unit_price")
        if unit_price is not None:
            builder.set_unit_price(unit_price)

        discounts = data.get("discounts")
        if discounts is None:
            discounts = []
        if not isinstance(discounts, list):
            raise ValueError(f"'discounts' must be a list (got {type(discounts).__name__})")

        for entry in discounts:
            if not isinstance(entry, dict):
                raise ValueError(f"Discount entry must be an object (got {entry!r})")
            builder.add_discount(entry.get("quantity"), entry.get("unit_price"))

        return builder.build()

    @classmethod
    def from_json(cls, text: str) -> Pricing | None:
        # parse_float keeps "10.00" from collapsing to 10.0
        return cls.from_dict(json.loads(text, parse_float=Decimal))

    # ── Value semantics ───────────────────────────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, Pricing):
            return NotImplemented
        return self._tiers == other._tiers

    def __hash__(self):
        return hash(self._tiers)

    def __repr__(self):
        tiers = ", ".join(f"{d.quantity}: {d.unit_price}" for d in self._tiers)
        return f"Pricing({{{tiers}}})"


class PricingBuilder:
    """
    Accumulates price points and builds a Pricing.

    Adding a price for a quantity that already has one replaces it.
    """

    def __init__(self):
        self._discounts: dict[int, Discount] = {}

    def set_unit_price(self, unit_price) -> PricingBuilder:
        """Set the base price (the price point at quantity 1)."""
        return self.add_discount(BASE_QUANTITY, unit_price)

    def add_discount(self, quantity: int, unit_price) -> PricingBuilder:
        discount = Discount(quantity, unit_price)
        self._discounts[discount.quantity] = discount
        return self

    def add_discounts(self, discounts: Iterable[Discount]) -> PricingBuilder:
        for discount in discounts:
            self._discounts[discount.quantity] = discount
        return self

    def build(self) -> Pricing | None:
        """Build the Pricing, or return None if no price point was added."""
        if not self._discounts:
            return None
        return Pricing(self._discounts.values())
