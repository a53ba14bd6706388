"""Share market configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PricingPolicyType(Enum):
    """Built-in pricing policies."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    STEP = "step"
    THRESHOLD = "threshold"
    INITIAL_LETTER = "initial_letter"


@dataclass
class MarketConfig:
    """Configuration for Market.

    Attributes:
        default_policy: Policy installed on every exchange the market
            creates. ``None`` leaves prices fixed until a policy is set.
        policy_argument: Constructor argument for ``default_policy`` (a
            step, a threshold, or a single letter).
        validate: Whether exchanges audit their ledger after every trade.
    """

    default_policy: PricingPolicyType | None = None
    policy_argument: int | str | None = None
    validate: bool = False
