"""Abstract base class for pricing policies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sharemarket.models.exchange import Listing


class PricingPolicy(ABC):
    """Abstract base for all pricing policies.

    A policy is a pure function of a listing's current unit price (and,
    for some policies, the listing's names) and the quantity just traded.
    The exchange calls it after every executed trade and stores the
    returned price. Implementations must never return less than 1.
    """

    @abstractmethod
    def on_buy(self, listing: Listing, quantity: int) -> int:
        """Return the new unit price after ``quantity`` shares were bought.

        Args:
            listing: The listing that was traded, at its pre-adjustment price.
            quantity: Executed number of shares.

        Returns:
            New unit price, at least 1.
        """
        ...

    @abstractmethod
    def on_sell(self, listing: Listing, quantity: int) -> int:
        """Return the new unit price after ``quantity`` shares were sold."""
        ...

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({params})"


def halve(price: int) -> int:
    """Floor-halve a price without dropping below 1."""
    return max(1, price // 2)
