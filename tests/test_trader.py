"""Tests for Trader — budget, holdings cache, resync."""

import pytest

from sharemarket.errors import InvalidArgument, NotFound
from sharemarket.policies import ConstantIncrement


class TestTraderBudget:
    def test_starts_empty(self, market):
        trader = market.create_trader("Dana")
        assert trader.budget == 0
        assert trader.held_listings() == []
        assert trader.total_holdings_value() == 0

    def test_deposit(self, bob):
        bob.deposit(250)
        assert bob.budget == 1250

    @pytest.mark.parametrize("amount", [0, -10])
    def test_deposit_non_positive(self, bob, amount):
        with pytest.raises(InvalidArgument):
            bob.deposit(amount)
        assert bob.budget == 1000

    def test_withdraw(self, bob):
        bob.withdraw(400)
        assert bob.budget == 600
        bob.withdraw(600)
        assert bob.budget == 0

    @pytest.mark.parametrize("amount", [0, -1, 1001])
    def test_withdraw_rejected(self, bob, amount):
        with pytest.raises(InvalidArgument):
            bob.withdraw(amount)
        assert bob.budget == 1000


class TestTraderHoldings:
    def test_held_quantity_unknown(self, bob, acme_nyse):
        with pytest.raises(NotFound):
            bob.held_quantity(acme_nyse)
        assert not bob.holds(acme_nyse)

    def test_value_uses_live_price(self, market, nyse, acme, acme_nyse, bob):
        nyse.pricing_policy = ConstantIncrement(1)
        bob.buy(nyse, acme, 55)
        assert bob.held_quantity(acme_nyse) == 5
        assert bob.total_holdings_value() == 55

        alice = market.create_trader("Alice")
        alice.deposit(100)
        alice.buy(nyse, acme, 22)
        assert acme_nyse.unit_price == 12
        assert bob.total_holdings_value() == 60

    def test_cache_across_exchanges(self, market, nyse, acme, acme_nyse, bob):
        lse = market.create_exchange("LSE")
        acme_lse = acme.list(lse, 20, 5)
        bob.buy(nyse, acme, 30)
        bob.buy(lse, acme, 10)

        assert bob.held_listings() == [acme_lse, acme_nyse]
        assert bob.held_quantity(acme_nyse) == 3
        assert bob.held_quantity(acme_lse) == 2
        assert bob.held_quantity_of(acme) == 2
        assert bob.total_holdings_value() == 40

        bob.sell(lse, acme, 2)
        assert bob.held_listings() == [acme_nyse]
        assert bob.held_quantity_of(acme) == 3

    def test_held_quantity_of_unknown(self, market, bob):
        with pytest.raises(NotFound):
            bob.held_quantity_of(market.create_company("Nope"))

    def test_sell_unlisted_company(self, market, nyse, bob):
        with pytest.raises(NotFound):
            bob.sell(nyse, market.create_company("Ghost"), 1)


class TestTraderResync:
    def test_idempotent(self, nyse, acme, acme_nyse, bob):
        bob.buy(nyse, acme, 40)
        bob.resync(nyse)
        bob.resync(nyse)
        assert bob.held_quantity(acme_nyse) == 4
        assert acme_nyse.holders() == [(bob, 4)]

    def test_does_not_touch_ledger(self, market, nyse, acme, acme_nyse):
        stranger = market.create_trader("Stranger")
        stranger.resync(nyse)
        assert stranger.held_listings() == []
        assert acme_nyse.holders() == []
        assert acme_nyse.available_quantity() == 100

    def test_drops_stale_entries(self, nyse, acme, acme_nyse, bob):
        bob.buy(nyse, acme, 40)
        # Simulate a ledger change the cache has not seen yet.
        acme_nyse._set_holding(bob, 0)
        assert bob.holds(acme_nyse)
        bob.resync(nyse)
        assert not bob.holds(acme_nyse)

    def test_only_refreshes_given_exchange(self, market, nyse, acme, acme_nyse, bob):
        lse = market.create_exchange("LSE")
        acme_lse = acme.list(lse, 20, 5)
        bob.buy(lse, acme, 10)
        bob.resync(nyse)
        assert bob.held_quantity(acme_lse) == 2
