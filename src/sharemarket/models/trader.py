"""Trader — a cash budget plus a cached view of owned shares."""

from __future__ import annotations

import logging
from functools import total_ordering
from threading import RLock
from typing import TYPE_CHECKING

from sharemarket.errors import InvalidArgument, NotFound

if TYPE_CHECKING:
    from sharemarket.models.company import Company
    from sharemarket.models.exchange import Exchange, Listing
    from sharemarket.registry import NameRegistry

logger = logging.getLogger(__name__)


@total_ordering
class Trader:
    """A market participant with a budget and holdings.

    ``held_*`` methods read a cache of the exchanges' ownership ledgers.
    Only ``resync`` writes it, and exchanges call ``resync`` after every
    trade they execute, so the cache never diverges from the ledger.
    Traders sort by name and compare by identity.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._budget = 0
        self._held: dict[Listing, int] = {}
        self._lock = RLock()

    @classmethod
    def create(cls, name: str, registry: NameRegistry) -> Trader:
        registry.claim(name)
        logger.info("Created trader %s", name)
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def budget(self) -> int:
        return self._budget

    # --------------------------------------------------------------- cash

    def deposit(self, amount: int) -> None:
        if amount <= 0:
            raise InvalidArgument(f"Deposit must be positive, got {amount}")
        with self._lock:
            self._budget += amount

    def withdraw(self, amount: int) -> None:
        if amount <= 0:
            raise InvalidArgument(f"Withdrawal must be positive, got {amount}")
        with self._lock:
            if amount > self._budget:
                raise InvalidArgument(
                    f"Cannot withdraw {amount}, {self._name} has {self._budget}"
                )
            self._budget -= amount

    # ----------------------------------------------------------- holdings

    def held_quantity(self, listing: Listing) -> int:
        try:
            return self._held[listing]
        except KeyError:
            raise NotFound(f"{self._name} holds no shares of {listing!r}") from None

    def held_quantity_of(self, company: Company) -> int:
        """Cached quantity of ``company`` shares on the first exchange holding them."""
        for listing in self.held_listings():
            if listing.company is company:
                return self._held[listing]
        raise NotFound(f"{self._name} holds no shares of {company.name}")

    def holds(self, listing: Listing) -> bool:
        return listing in self._held

    def held_listings(self) -> list[Listing]:
        """Listings with a cached position, by (exchange name, company name)."""
        return sorted(self._held)

    def total_holdings_value(self) -> int:
        """Value of all cached positions at each listing's live price."""
        return sum(qty * listing.unit_price for listing, qty in self._held.items())

    def resync(self, exchange: Exchange) -> None:
        """Refresh cached positions for every listing on ``exchange``.

        Reads the ledger only. Idempotent.
        """
        with self._lock:
            for listing in exchange.listings():
                quantity = listing.held_by(self)
                if quantity > 0:
                    self._held[listing] = quantity
                else:
                    self._held.pop(listing, None)

    # ------------------------------------------------------------- trades

    def buy(self, exchange: Exchange, company: Company, cash_to_spend: int) -> int:
        """Buy through ``exchange``; see ``Exchange.buy``."""
        return exchange.buy(self, company, cash_to_spend)

    def sell(self, exchange: Exchange, company: Company, quantity: int) -> int:
        """Sell ``company`` shares through ``exchange``; see ``Exchange.sell``."""
        return exchange.sell(self, exchange.find_listing(company), quantity)

    def __lt__(self, other: Trader) -> bool:
        return self._name < other._name

    def __repr__(self) -> str:
        return f"Trader({self._name!r}, budget={self._budget})"

    def __str__(self) -> str:
        return self._name
