"""Ledger consistency checks for an exchange."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sharemarket.models.exchange import Exchange


@dataclass
class AuditCheck:
    """Single audit check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class AuditResult:
    """Aggregate audit result."""

    checks: list[AuditCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[AuditCheck]:
        return [c for c in self.checks if not c.passed]


def audit_exchange(exchange: Exchange) -> AuditResult:
    """Run all consistency checks on an exchange's ledger.

    Checks:
        1. Conservation (held <= issued)
        2. Positive holdings (no zero or negative ledger entries)
        3. Price floor (every unit price >= 1)
        4. Cache fidelity (trader caches equal the ledger)
        5. Listing relation (listed companies record the exchange)
    """
    result = AuditResult()
    listings = exchange.listings()

    # 1. Conservation
    broken = []
    for listing in listings:
        held = listing.held_quantity()
        if held > listing.total_issued:
            broken.append(f"{listing.company.name} ({held}/{listing.total_issued})")
    if broken:
        result.checks.append(
            AuditCheck("conservation", False, f"over-allocated: {', '.join(broken)}")
        )
    else:
        result.checks.append(AuditCheck("conservation", True, f"{len(listings)} listings"))

    # 2. Positive holdings
    bad_entries = 0
    for listing in listings:
        bad_entries += sum(1 for _, qty in listing.holders() if qty <= 0)
    if bad_entries:
        result.checks.append(
            AuditCheck("positive_holdings", False, f"{bad_entries} non-positive entries")
        )
    else:
        result.checks.append(AuditCheck("positive_holdings", True))

    # 3. Price floor
    below = [listing.company.name for listing in listings if listing.unit_price < 1]
    if below:
        result.checks.append(
            AuditCheck("price_floor", False, f"price below 1: {', '.join(below)}")
        )
    else:
        result.checks.append(AuditCheck("price_floor", True))

    # 4. Cache fidelity
    stale = []
    for trader in exchange.traders():
        for listing in listings:
            ledger_qty = listing.held_by(trader)
            cached_qty = trader.held_quantity(listing) if trader.holds(listing) else 0
            if ledger_qty != cached_qty:
                stale.append(f"{trader.name}/{listing.company.name}")
    if stale:
        result.checks.append(
            AuditCheck("cache_fidelity", False, f"stale cache: {', '.join(stale)}")
        )
    else:
        result.checks.append(AuditCheck("cache_fidelity", True))

    # 5. Listing relation
    orphans = [
        listing.company.name for listing in listings
        if not listing.company.is_listed_on(exchange)
    ]
    if orphans:
        result.checks.append(
            AuditCheck("listing_relation", False, f"missing relation: {', '.join(orphans)}")
        )
    else:
        result.checks.append(AuditCheck("listing_relation", True))

    return result
