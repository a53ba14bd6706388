"""Shared fixtures for sharemarket tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from sharemarket.config import MarketConfig
from sharemarket.models.company import Company
from sharemarket.models.exchange import Exchange, Listing
from sharemarket.models.trader import Trader
from sharemarket.registry import Market


@pytest.fixture
def market() -> Market:
    return Market(MarketConfig(validate=True))


@pytest.fixture
def nyse(market) -> Exchange:
    return market.create_exchange("NYSE")


@pytest.fixture
def acme(market) -> Company:
    return market.create_company("Acme")


@pytest.fixture
def acme_nyse(acme, nyse) -> Listing:
    """100 Acme shares at 10 on NYSE."""
    return acme.list(nyse, 100, 10)


@pytest.fixture
def bob(market) -> Trader:
    trader = market.create_trader("Bob")
    trader.deposit(1000)
    return trader
