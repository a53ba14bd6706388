"""Initial-letter pricing policy."""

from __future__ import annotations

from sharemarket.errors import InvalidArgument
from sharemarket.policies.base import PricingPolicy, halve

VOWELS = frozenset("aeiouAEIOU")


class InitialLetterOrVowel(PricingPolicy):
    """Move the price of listings whose names start with a marked letter.

    A listing matches when the first character of its company name or of
    its exchange name equals ``letter`` (case-sensitive) or is a vowel in
    either case. Matching listings double on a buy and halve on a sell
    (floor, never below 1); others keep their price.
    """

    def __init__(self, letter: str) -> None:
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
            raise InvalidArgument(f"Expected a single letter, got {letter!r}")
        self.letter = letter

    def matches(self, listing) -> bool:
        initials = (listing.company.name[0], listing.exchange.name[0])
        return any(c == self.letter or c in VOWELS for c in initials)

    def on_buy(self, listing, quantity):  # type: ignore[override]
        if self.matches(listing):
            return listing.unit_price * 2
        return listing.unit_price

    def on_sell(self, listing, quantity):  # type: ignore[override]
        if self.matches(listing):
            return halve(listing.unit_price)
        return listing.unit_price
