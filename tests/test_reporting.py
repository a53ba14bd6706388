"""Tests for ledger reports."""

import pandas as pd

from sharemarket.reporting import (
    HOLDING_COLUMNS,
    LISTING_COLUMNS,
    format_company_exchanges,
    format_exchange_companies,
    format_listing,
    format_price,
    holdings_frame,
    listings_frame,
    market_listings_frame,
)


class TestFrames:
    def test_listings_frame(self, market, nyse, acme, acme_nyse, bob):
        market.create_company("Beta").list(nyse, 20, 3)
        bob.buy(nyse, acme, 55)

        df = listings_frame(nyse)
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == LISTING_COLUMNS
        assert list(df["company"]) == ["Acme", "Beta"]
        assert df.iloc[0]["available"] == 95
        assert df.iloc[1]["price"] == 3

    def test_empty_frames_keep_columns(self, nyse, bob):
        assert list(listings_frame(nyse).columns) == LISTING_COLUMNS
        assert holdings_frame(bob).empty
        assert list(holdings_frame(bob).columns) == HOLDING_COLUMNS

    def test_holdings_frame(self, market, nyse, acme, acme_nyse, bob):
        lse = market.create_exchange("LSE")
        acme.list(lse, 10, 4)
        bob.buy(nyse, acme, 30)
        bob.buy(lse, acme, 8)

        df = holdings_frame(bob)
        assert list(df["exchange"]) == ["LSE", "NYSE"]
        assert list(df["quantity"]) == [2, 3]
        assert df["value"].sum() == bob.total_holdings_value() == 38

    def test_market_listings_frame(self, market, nyse, acme, acme_nyse):
        acme.list(market.create_exchange("LSE"), 10, 4)
        df = market_listings_frame(market)
        assert list(zip(df["exchange"], df["company"])) == [("LSE", "Acme"), ("NYSE", "Acme")]


class TestFormatLines:
    def test_listing_and_price(self, nyse, acme, acme_nyse, bob):
        bob.buy(nyse, acme, 55)
        assert format_listing(acme_nyse) == "Acme, 10, 95"
        assert format_price(acme_nyse) == "Acme, 10"

    def test_relations(self, market, nyse, acme, acme_nyse):
        acme.list(market.create_exchange("Borsa"), 5, 1)
        assert format_company_exchanges(acme) == ["Acme", "- Borsa", "- NYSE"]
        assert format_exchange_companies(nyse) == ["NYSE", "- Acme"]
