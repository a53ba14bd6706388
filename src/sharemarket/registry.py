"""Market — process-scoped registry of companies, exchanges and traders."""

from __future__ import annotations

import logging

from sharemarket.config import MarketConfig
from sharemarket.errors import InvalidName, NameInUse, NotFound
from sharemarket.models.company import Company
from sharemarket.models.exchange import Exchange, Listing
from sharemarket.models.trader import Trader
from sharemarket.policies import create_policy
from sharemarket.policies.base import PricingPolicy

logger = logging.getLogger(__name__)


class NameRegistry:
    """Set of names already taken by one kind of entity."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._names: set[str] = set()

    def claim(self, name: str) -> None:
        """Reserve ``name``.

        Raises:
            InvalidName: ``name`` is not a string, or is empty or blank.
            NameInUse: ``name`` was claimed before.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidName(f"{self.kind.capitalize()} name must not be empty")
        if name in self._names:
            raise NameInUse(f"{self.kind.capitalize()} name already used: {name}")
        self._names.add(name)

    def names(self) -> list[str]:
        return sorted(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)


class Market:
    """Creates entities against its own name registries and looks them up.

    Each ``Market`` is independent, so two markets (or two tests) may reuse
    the same names.

    Usage::

        from sharemarket import Market
        market = Market()
        nyse = market.create_exchange("NYSE")
        market.create_company("Acme").list(nyse, 100, 10)
    """

    def __init__(self, config: MarketConfig | None = None) -> None:
        self.config = config or MarketConfig()

        self.company_names = NameRegistry("company")
        self.exchange_names = NameRegistry("exchange")
        self.trader_names = NameRegistry("trader")

        self._companies: dict[str, Company] = {}
        self._exchanges: dict[str, Exchange] = {}
        self._traders: dict[str, Trader] = {}

        # Policies are stateless; one instance serves every exchange.
        self.default_policy: PricingPolicy | None = None
        if self.config.default_policy is not None:
            self.default_policy = create_policy(
                self.config.default_policy, self.config.policy_argument,
            )

    # ------------------------------------------------------------- create

    def create_company(self, name: str) -> Company:
        company = Company.create(name, self.company_names)
        self._companies[name] = company
        return company

    def create_exchange(self, name: str) -> Exchange:
        exchange = Exchange.create(
            name,
            self.exchange_names,
            pricing_policy=self.default_policy,
            validate=self.config.validate,
        )
        self._exchanges[name] = exchange
        return exchange

    def create_trader(self, name: str) -> Trader:
        trader = Trader.create(name, self.trader_names)
        self._traders[name] = trader
        return trader

    def get_or_create_company(self, name: str) -> Company:
        try:
            return self.create_company(name)
        except NameInUse:
            return self._companies[name]

    def get_or_create_exchange(self, name: str) -> Exchange:
        try:
            return self.create_exchange(name)
        except NameInUse:
            return self._exchanges[name]

    # ------------------------------------------------------------- lookup

    def company(self, name: str) -> Company:
        return self._lookup(self._companies, "company", name)

    def exchange(self, name: str) -> Exchange:
        return self._lookup(self._exchanges, "exchange", name)

    def trader(self, name: str) -> Trader:
        return self._lookup(self._traders, "trader", name)

    def companies(self) -> list[Company]:
        return [self._companies[n] for n in sorted(self._companies)]

    def exchanges(self) -> list[Exchange]:
        return [self._exchanges[n] for n in sorted(self._exchanges)]

    def traders(self) -> list[Trader]:
        return [self._traders[n] for n in sorted(self._traders)]

    def listings(self) -> list[Listing]:
        """Every listing on every exchange, by (exchange name, company name)."""
        return [listing for exchange in self.exchanges() for listing in exchange.listings()]

    # ------------------------------------------------------------ internal

    @staticmethod
    def _lookup(table: dict, kind: str, name: str):
        try:
            return table[name]
        except KeyError:
            raise NotFound(f"Unknown {kind}: {name}") from None
