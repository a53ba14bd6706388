"""Fixed-step pricing policies."""

from __future__ import annotations

from sharemarket.errors import InvalidArgument
from sharemarket.policies.base import PricingPolicy


class ConstantIncrement(PricingPolicy):
    """Raise the price by a fixed step on every buy; sells leave it alone.

    The step is stored as its absolute value.
    """

    def __init__(self, step: int) -> None:
        self.step = abs(step)

    def on_buy(self, listing, quantity):  # type: ignore[override]
        return listing.unit_price + self.step

    def on_sell(self, listing, quantity):  # type: ignore[override]
        return listing.unit_price


class ConstantDecrement(PricingPolicy):
    """Lower the price by a fixed step on every sell, never below 1."""

    def __init__(self, step: int) -> None:
        self.step = abs(step)

    def on_buy(self, listing, quantity):  # type: ignore[override]
        return listing.unit_price

    def on_sell(self, listing, quantity):  # type: ignore[override]
        return max(1, listing.unit_price - self.step)


class SymmetricStep(PricingPolicy):
    """Buys add ``step`` to the price, sells subtract it (floor 1)."""

    def __init__(self, step: int) -> None:
        if step < 0:
            raise InvalidArgument(f"Step must be non-negative, got {step}")
        self.step = step

    def on_buy(self, listing, quantity):  # type: ignore[override]
        return listing.unit_price + self.step

    def on_sell(self, listing, quantity):  # type: ignore[override]
        return max(1, listing.unit_price - self.step)
