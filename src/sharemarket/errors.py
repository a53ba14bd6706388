"""Share market error types."""

from __future__ import annotations

from enum import Enum


class MarketErrorCode(Enum):
    """Error classification codes."""

    INVALID_NAME = "invalid_name"
    NAME_IN_USE = "name_in_use"
    INVALID_ARGUMENT = "invalid_argument"
    ALREADY_LISTED = "already_listed"
    NOT_FOUND = "not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INSUFFICIENT_SUPPLY = "insufficient_supply"
    INSUFFICIENT_HOLDINGS = "insufficient_holdings"
    INVARIANT_VIOLATION = "invariant_violation"


class MarketError(Exception):
    """Share market exception with an error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    default_code = MarketErrorCode.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        code: MarketErrorCode | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class InvalidName(MarketError):
    """Empty or blank entity name."""

    default_code = MarketErrorCode.INVALID_NAME


class NameInUse(MarketError):
    """Entity name already taken in its namespace."""

    default_code = MarketErrorCode.NAME_IN_USE


class InvalidArgument(MarketError):
    """Non-positive quantity, price or amount, or a bad policy parameter."""

    default_code = MarketErrorCode.INVALID_ARGUMENT


class AlreadyListed(MarketError):
    default_code = MarketErrorCode.ALREADY_LISTED


class NotFound(MarketError):
    """Unknown company, listing, trader or exchange."""

    default_code = MarketErrorCode.NOT_FOUND


class InsufficientFunds(MarketError):
    default_code = MarketErrorCode.INSUFFICIENT_FUNDS


class InsufficientSupply(MarketError):
    default_code = MarketErrorCode.INSUFFICIENT_SUPPLY


class InsufficientHoldings(MarketError):
    default_code = MarketErrorCode.INSUFFICIENT_HOLDINGS


class InvariantViolation(MarketError):
    """Internal consistency check failed.

    Unreachable from correct client code: raised for a listing created
    without the company-side relation, a pricing policy returning a price
    below 1, or a failed ledger audit.
    """

    default_code = MarketErrorCode.INVARIANT_VIOLATION
