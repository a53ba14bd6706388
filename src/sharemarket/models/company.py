"""Company — an issuer of shares."""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import TYPE_CHECKING

from sharemarket.errors import AlreadyListed, InvalidArgument, NotFound

if TYPE_CHECKING:
    from sharemarket.models.exchange import Exchange, Listing
    from sharemarket.registry import NameRegistry

logger = logging.getLogger(__name__)


@total_ordering
class Company:
    """A company that can list its shares on any number of exchanges.

    Companies sort by name and compare by identity. Instances are created
    through ``Company.create`` (or ``Market.create_company``) so the name is
    checked against a registry.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._listed_on: set[Exchange] = set()

    @classmethod
    def create(cls, name: str, registry: NameRegistry) -> Company:
        registry.claim(name)
        logger.info("Created company %s", name)
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    def listed_on(self) -> list[Exchange]:
        """Exchanges this company is listed on, in name order."""
        return sorted(self._listed_on)

    def is_listed_on(self, exchange: Exchange) -> bool:
        return exchange in self._listed_on

    def list(self, exchange: Exchange, quantity: int, unit_price: int) -> Listing:
        """Issue ``quantity`` shares at ``unit_price`` on ``exchange``.

        Raises:
            InvalidArgument: Non-positive quantity or price.
            AlreadyListed: The company already trades on ``exchange``.
        """
        if exchange is None:
            raise NotFound("Exchange must not be None")
        if quantity <= 0 or unit_price <= 0:
            raise InvalidArgument(
                f"Quantity and unit price must be positive, got {quantity} and {unit_price}"
            )
        if exchange in self._listed_on:
            raise AlreadyListed(f"{self._name} is already listed on {exchange.name}")

        # The exchange checks for this relation before creating the listing.
        self._listed_on.add(exchange)
        try:
            listing = exchange._create_listing(self, unit_price, quantity)
        except Exception:
            self._listed_on.discard(exchange)
            raise

        logger.info(
            "Listed %s on %s: %d shares at %d", self._name, exchange.name, quantity, unit_price,
        )
        return listing

    def __lt__(self, other: Company) -> bool:
        return self._name < other._name

    def __repr__(self) -> str:
        return f"Company({self._name!r})"

    def __str__(self) -> str:
        return self._name
