"""Volume-threshold pricing policy."""

from __future__ import annotations

from sharemarket.policies.base import PricingPolicy, halve


class Threshold(PricingPolicy):
    """Double or halve the price when a single trade exceeds a size.

    Trades of at most ``threshold`` shares leave the price unchanged.
    A buy above the threshold doubles the price; a sell above it halves
    the price (floor division, never below 1). The threshold is stored
    as its absolute value.
    """

    def __init__(self, threshold: int) -> None:
        self.threshold = abs(threshold)

    def on_buy(self, listing, quantity):  # type: ignore[override]
        if quantity > self.threshold:
            return listing.unit_price * 2
        return listing.unit_price

    def on_sell(self, listing, quantity):  # type: ignore[override]
        if quantity > self.threshold:
            return halve(listing.unit_price)
        return listing.unit_price
