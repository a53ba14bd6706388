"""sharemarket — a toy securities market.

Companies list shares on exchanges, traders buy and sell them against a
cash budget, and each exchange may reprice a listing after every trade
through a pluggable pricing policy.

Quick start::

    from sharemarket import Market
    market = Market()
    nyse = market.create_exchange("NYSE")
    acme = market.create_company("Acme")
    acme.list(nyse, 100, 10)
    bob = market.create_trader("Bob")
    bob.deposit(1000)
    nyse.buy(bob, acme, 55)
"""

from __future__ import annotations

import os

from sharemarket.audit import AuditCheck, AuditResult, audit_exchange
from sharemarket.config import MarketConfig, PricingPolicyType
from sharemarket.errors import (
    AlreadyListed,
    InsufficientFunds,
    InsufficientHoldings,
    InsufficientSupply,
    InvalidArgument,
    InvalidName,
    InvariantViolation,
    MarketError,
    MarketErrorCode,
    NameInUse,
    NotFound,
)
from sharemarket.models.company import Company
from sharemarket.models.exchange import Exchange, Listing
from sharemarket.models.trader import Trader
from sharemarket.policies import (
    ConstantDecrement,
    ConstantIncrement,
    InitialLetterOrVowel,
    PricingPolicy,
    SymmetricStep,
    Threshold,
    create_policy,
)
from sharemarket.registry import Market, NameRegistry

__version__ = "0.1.0"

__all__ = [
    # Market
    "Market",
    "NameRegistry",
    "create_market_from_env",
    # Config
    "MarketConfig",
    "PricingPolicyType",
    # Entities
    "Company",
    "Exchange",
    "Listing",
    "Trader",
    # Pricing policies
    "PricingPolicy",
    "ConstantIncrement",
    "ConstantDecrement",
    "SymmetricStep",
    "Threshold",
    "InitialLetterOrVowel",
    "create_policy",
    # Audit
    "AuditCheck",
    "AuditResult",
    "audit_exchange",
    # Errors
    "MarketError",
    "MarketErrorCode",
    "InvalidName",
    "NameInUse",
    "InvalidArgument",
    "AlreadyListed",
    "NotFound",
    "InsufficientFunds",
    "InsufficientSupply",
    "InsufficientHoldings",
    "InvariantViolation",
]


def create_market_from_env() -> Market:
    """Zero-config factory — reads market settings from env vars.

    Environment variables:
        SHAREMARKET_DEFAULT_POLICY: Policy for new exchanges — "increment",
            "decrement", "step", "threshold", "initial_letter" (default: none).
        SHAREMARKET_POLICY_ARGUMENT: Integer step/threshold, or the letter
            for "initial_letter".
        SHAREMARKET_VALIDATE: "1", "true" or "yes" to audit the ledger after
            every trade (default: off).
    """
    policy_str = os.getenv("SHAREMARKET_DEFAULT_POLICY", "").strip()
    try:
        policy_type = PricingPolicyType(policy_str) if policy_str else None
    except ValueError:
        raise InvalidArgument(f"Unknown pricing policy: {policy_str}") from None

    argument = os.getenv("SHAREMARKET_POLICY_ARGUMENT")
    config = MarketConfig(
        default_policy=policy_type,
        policy_argument=argument.strip() if argument else None,
        validate=os.getenv("SHAREMARKET_VALIDATE", "").strip().lower() in ("1", "true", "yes"),
    )

    return Market(config)
