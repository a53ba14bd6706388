"""Tests for error classification."""

import pytest

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


@pytest.mark.parametrize("cls, code", [
    (InvalidName, MarketErrorCode.INVALID_NAME),
    (NameInUse, MarketErrorCode.NAME_IN_USE),
    (InvalidArgument, MarketErrorCode.INVALID_ARGUMENT),
    (AlreadyListed, MarketErrorCode.ALREADY_LISTED),
    (NotFound, MarketErrorCode.NOT_FOUND),
    (InsufficientFunds, MarketErrorCode.INSUFFICIENT_FUNDS),
    (InsufficientSupply, MarketErrorCode.INSUFFICIENT_SUPPLY),
    (InsufficientHoldings, MarketErrorCode.INSUFFICIENT_HOLDINGS),
    (InvariantViolation, MarketErrorCode.INVARIANT_VIOLATION),
])
def test_subclass_codes(cls, code):
    err = cls("boom")
    assert isinstance(err, MarketError)
    assert err.code == code
    assert str(err) == "boom"


def test_explicit_code():
    err = MarketError("custom", MarketErrorCode.NOT_FOUND)
    assert err.code == MarketErrorCode.NOT_FOUND
    assert err.message == "custom"
