"""Exchange — the share ledger and the buy/sell engine.

The exchange owns every ``Listing`` of the companies trading on it. A
listing's ownership map is the only record of who holds what; traders keep
a cache that the exchange refreshes after each trade it executes.
"""

from __future__ import annotations

import logging
from functools import total_ordering
from threading import RLock
from typing import TYPE_CHECKING

from sharemarket.audit import audit_exchange
from sharemarket.errors import (
    AlreadyListed,
    InsufficientFunds,
    InsufficientHoldings,
    InsufficientSupply,
    InvalidArgument,
    InvariantViolation,
    NotFound,
)

if TYPE_CHECKING:
    from sharemarket.models.company import Company
    from sharemarket.models.trader import Trader
    from sharemarket.policies.base import PricingPolicy
    from sharemarket.registry import NameRegistry

logger = logging.getLogger(__name__)


@total_ordering
class Listing:
    """One company's shares on one exchange.

    Created and mutated only by its ``Exchange``. Listings sort by
    (exchange name, company name) and compare by identity, so listings of
    separate markets never collide.

    Attributes:
        company: Issuing company.
        exchange: Exchange the shares trade on.
        total_issued: Shares issued at listing time.
        unit_price: Current price per share, always at least 1.
    """

    def __init__(
        self,
        exchange: Exchange,
        company: Company,
        unit_price: int,
        total_issued: int,
    ) -> None:
        if unit_price <= 0 or total_issued <= 0:
            raise InvalidArgument("Listing price and quantity must be positive")
        self._exchange = exchange
        self._company = company
        self._unit_price = unit_price
        self._total_issued = total_issued
        self._holdings: dict[Trader, int] = {}
        self._lock = RLock()

    @property
    def company(self) -> Company:
        return self._company

    @property
    def exchange(self) -> Exchange:
        return self._exchange

    @property
    def total_issued(self) -> int:
        return self._total_issued

    @property
    def unit_price(self) -> int:
        return self._unit_price

    def held_by(self, trader: Trader) -> int:
        """Shares ``trader`` owns according to the ledger (0 if none)."""
        return self._holdings.get(trader, 0)

    def holders(self) -> list[tuple[Trader, int]]:
        """Ledger entries as (trader, quantity), in trader name order."""
        return sorted(self._holdings.items(), key=lambda item: item[0].name)

    def held_quantity(self) -> int:
        return sum(self._holdings.values())

    def available_quantity(self) -> int:
        """Issued shares not held by any trader, recomputed from the ledger."""
        return self._total_issued - self.held_quantity()

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self._exchange.name, self._company.name)

    def _set_holding(self, trader: Trader, quantity: int) -> None:
        if quantity > 0:
            self._holdings[trader] = quantity
        else:
            self._holdings.pop(trader, None)

    def __lt__(self, other: Listing) -> bool:
        return self.sort_key < other.sort_key

    def __repr__(self) -> str:
        return (
            f"Listing({self._company.name!r} on {self._exchange.name!r}: "
            f"price={self._unit_price}, issued={self._total_issued}, "
            f"available={self.available_quantity()})"
        )


@total_ordering
class Exchange:
    """A stock exchange: listings, the traders that used it, and a policy.

    A trade holds the trader's lock and then the listing's lock until it
    returns, so concurrent trades by one trader, or on one listing, run one
    after the other. Exchanges, like every entity, compare by identity.

    Usage::

        market = Market()
        nyse = market.create_exchange("NYSE")
        acme = market.create_company("Acme")
        acme.list(nyse, 100, 10)
        bob = market.create_trader("Bob")
        bob.deposit(1000)
        nyse.buy(bob, acme, 55)
    """

    def __init__(
        self,
        name: str,
        pricing_policy: PricingPolicy | None = None,
        validate: bool = False,
    ) -> None:
        self._name = name
        self._listings: dict[str, Listing] = {}
        self._traders: set[Trader] = set()
        self._pricing_policy = pricing_policy
        self.validate = validate

    @classmethod
    def create(
        cls,
        name: str,
        registry: NameRegistry,
        *,
        pricing_policy: PricingPolicy | None = None,
        validate: bool = False,
    ) -> Exchange:
        registry.claim(name)
        logger.info("Created exchange %s", name)
        return cls(name, pricing_policy=pricing_policy, validate=validate)

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------- policy

    @property
    def pricing_policy(self) -> PricingPolicy | None:
        return self._pricing_policy

    @pricing_policy.setter
    def pricing_policy(self, policy: PricingPolicy | None) -> None:
        logger.debug("Exchange %s pricing policy set to %r", self._name, policy)
        self._pricing_policy = policy

    # ----------------------------------------------------------- listings

    def listings(self) -> list[Listing]:
        """Listings in company name order."""
        return [self._listings[name] for name in sorted(self._listings)]

    def listed_companies(self) -> list[Company]:
        return [listing.company for listing in self.listings()]

    def traders(self) -> list[Trader]:
        """Traders that have bought here, in name order."""
        return sorted(self._traders)

    def find_listing(self, company: Company) -> Listing:
        if company is None:
            raise NotFound("Company must not be None")
        listing = self._listings.get(company.name)
        if listing is None or listing.company is not company:
            raise NotFound(f"{company.name} is not listed on {self._name}")
        return listing

    def available_quantity(self, listing: Listing) -> int:
        self._check_owned(listing)
        return listing.available_quantity()

    def _create_listing(self, company: Company, unit_price: int, quantity: int) -> Listing:
        """Create the listing for ``company``. Called by ``Company.list``."""
        if quantity <= 0 or unit_price <= 0:
            raise InvalidArgument(
                f"Quantity and unit price must be positive, got {quantity} and {unit_price}"
            )
        if company.name in self._listings:
            raise AlreadyListed(f"{company.name} is already listed on {self._name}")
        if not company.is_listed_on(self):
            raise InvariantViolation(
                f"{company.name} has not recorded {self._name} among its exchanges"
            )
        listing = Listing(self, company, unit_price, quantity)
        self._listings[company.name] = listing
        return listing

    # ------------------------------------------------------------- trades

    def buy(self, trader: Trader, company: Company, cash_to_spend: int) -> int:
        """Spend up to ``cash_to_spend`` on shares of ``company``.

        Buys ``cash_to_spend // unit_price`` shares and charges exactly
        that many times the price; the remainder stays in the budget.

        Returns:
            Number of shares bought.

        Raises:
            NotFound: ``company`` is not listed here.
            InsufficientFunds: Budget below ``cash_to_spend``, or cash
                below the price of one share.
            InsufficientSupply: Not enough unowned shares.
        """
        if trader is None:
            raise NotFound("Trader must not be None")
        listing = self.find_listing(company)

        with trader._lock, listing._lock:
            if cash_to_spend > trader.budget:
                raise InsufficientFunds(
                    f"{trader.name} has {trader.budget}, cannot spend {cash_to_spend}"
                )
            price = listing.unit_price
            if cash_to_spend < price:
                raise InsufficientFunds(
                    f"{cash_to_spend} does not buy one share of {company.name} at {price}"
                )
            shares = cash_to_spend // price
            available = listing.available_quantity()
            if shares > available:
                raise InsufficientSupply(
                    f"{shares} shares of {company.name} requested, {available} available"
                )

            debit = shares * price
            held_before = listing.held_by(trader)
            newly_registered = trader not in self._traders

            trader.withdraw(debit)
            listing._set_holding(trader, held_before + shares)
            try:
                if self._pricing_policy is not None:
                    new_price = self._pricing_policy.on_buy(listing, shares)
                    if new_price < 1:
                        raise InvariantViolation(
                            f"{self._pricing_policy!r} returned price {new_price} on buy"
                        )
                    listing._unit_price = new_price
                self._traders.add(trader)
                trader.resync(self)
                self._audit()
            except Exception:
                listing._unit_price = price
                listing._set_holding(trader, held_before)
                trader.deposit(debit)
                if newly_registered:
                    self._traders.discard(trader)
                trader.resync(self)
                raise

        logger.debug(
            "%s bought %d %s on %s at %d (price now %d)",
            trader.name, shares, company.name, self._name, price, listing.unit_price,
        )
        return shares

    def sell(self, trader: Trader, listing: Listing, quantity: int) -> int:
        """Sell ``quantity`` shares of ``listing`` back to the exchange.

        The trader is credited at the current, pre-adjustment price.

        Returns:
            Amount credited to the trader.

        Raises:
            NotFound: Missing trader or listing, or a listing of another
                exchange.
            InvalidArgument: Non-positive ``quantity``.
            InsufficientHoldings: The trader holds fewer than ``quantity``.
        """
        if trader is None:
            raise NotFound("Trader must not be None")
        self._check_owned(listing)
        if quantity <= 0:
            raise InvalidArgument(f"Quantity must be positive, got {quantity}")

        with trader._lock, listing._lock:
            held_before = listing.held_by(trader)
            if quantity > held_before:
                raise InsufficientHoldings(
                    f"{trader.name} holds {held_before} {listing.company.name}, cannot sell {quantity}"
                )
            price = listing.unit_price
            credit = quantity * price

            listing._set_holding(trader, held_before - quantity)
            trader.deposit(credit)
            try:
                if self._pricing_policy is not None:
                    new_price = self._pricing_policy.on_sell(listing, quantity)
                    listing._unit_price = max(1, new_price)
                trader.resync(self)
                self._audit()
            except Exception:
                listing._unit_price = price
                listing._set_holding(trader, held_before)
                trader.withdraw(credit)
                trader.resync(self)
                raise

        logger.debug(
            "%s sold %d %s on %s at %d (price now %d)",
            trader.name, quantity, listing.company.name, self._name, price, listing.unit_price,
        )
        return credit

    # ------------------------------------------------------------ internal

    def _check_owned(self, listing: Listing) -> None:
        if listing is None:
            raise NotFound("Listing must not be None")
        if listing.exchange is not self or self._listings.get(listing.company.name) is not listing:
            raise NotFound(f"{listing.company.name} listing does not belong to {self._name}")

    def _audit(self) -> None:
        if not self.validate:
            return
        result = audit_exchange(self)
        if not result.passed:
            msgs = "; ".join(c.message for c in result.failed_checks)
            raise InvariantViolation(f"Ledger audit failed on {self._name}: {msgs}")

    def __lt__(self, other: Exchange) -> bool:
        return self._name < other._name

    def __repr__(self) -> str:
        return f"Exchange({self._name!r}, listings={len(self._listings)})"

    def __str__(self) -> str:
        return self._name
