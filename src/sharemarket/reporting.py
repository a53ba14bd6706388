"""Report projections of the ledger — DataFrames and driver output lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from sharemarket.models.company import Company
    from sharemarket.models.exchange import Exchange, Listing
    from sharemarket.models.trader import Trader
    from sharemarket.registry import Market

LISTING_COLUMNS = ["company", "exchange", "price", "issued", "available"]
HOLDING_COLUMNS = ["exchange", "company", "quantity", "price", "value"]


def _listings_to_df(listings: list[Listing]) -> pd.DataFrame:
    records = [
        {
            "company": listing.company.name,
            "exchange": listing.exchange.name,
            "price": listing.unit_price,
            "issued": listing.total_issued,
            "available": listing.available_quantity(),
        }
        for listing in listings
    ]
    return pd.DataFrame(records, columns=LISTING_COLUMNS)


def listings_frame(exchange: Exchange) -> pd.DataFrame:
    """One row per listing on ``exchange``, in company name order."""
    return _listings_to_df(exchange.listings())


def market_listings_frame(market: Market) -> pd.DataFrame:
    """Every listing in ``market``, by exchange then company."""
    return _listings_to_df(market.listings())


def holdings_frame(trader: Trader) -> pd.DataFrame:
    """The trader's positions valued at live prices."""
    records = []
    for listing in trader.held_listings():
        quantity = trader.held_quantity(listing)
        records.append({
            "exchange": listing.exchange.name,
            "company": listing.company.name,
            "quantity": quantity,
            "price": listing.unit_price,
            "value": quantity * listing.unit_price,
        })
    return pd.DataFrame(records, columns=HOLDING_COLUMNS)


# ---- driver output lines ----

def format_listing(listing: Listing) -> str:
    return f"{listing.company.name}, {listing.unit_price}, {listing.available_quantity()}"


def format_price(listing: Listing) -> str:
    return f"{listing.company.name}, {listing.unit_price}"


def format_company_exchanges(company: Company) -> list[str]:
    return [company.name] + [f"- {exchange.name}" for exchange in company.listed_on()]


def format_exchange_companies(exchange: Exchange) -> list[str]:
    return [exchange.name] + [f"- {company.name}" for company in exchange.listed_companies()]
