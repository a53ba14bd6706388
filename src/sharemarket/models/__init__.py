"""Share market entities."""

from sharemarket.models.company import Company
from sharemarket.models.exchange import Exchange, Listing
from sharemarket.models.trader import Trader

__all__ = [
    "Company",
    "Exchange",
    "Listing",
    "Trader",
]
