"""Pricing policy registry."""

from __future__ import annotations

from sharemarket.config import PricingPolicyType
from sharemarket.errors import InvalidArgument
from sharemarket.policies.base import PricingPolicy
from sharemarket.policies.constant import ConstantDecrement, ConstantIncrement, SymmetricStep
from sharemarket.policies.initial_letter import InitialLetterOrVowel
from sharemarket.policies.threshold import Threshold

POLICY_CLASSES: dict[PricingPolicyType, type[PricingPolicy]] = {
    PricingPolicyType.INCREMENT: ConstantIncrement,
    PricingPolicyType.DECREMENT: ConstantDecrement,
    PricingPolicyType.STEP: SymmetricStep,
    PricingPolicyType.THRESHOLD: Threshold,
    PricingPolicyType.INITIAL_LETTER: InitialLetterOrVowel,
}


def create_policy(
    policy_type: PricingPolicyType,
    argument: int | str | None,
) -> PricingPolicy:
    """Instantiate a policy by type.

    Numeric policies accept an ``int`` or a string holding one;
    ``INITIAL_LETTER`` takes the letter itself.
    """
    if argument is None:
        raise InvalidArgument(f"Policy '{policy_type.value}' requires an argument")
    if policy_type is not PricingPolicyType.INITIAL_LETTER and isinstance(argument, str):
        try:
            argument = int(argument.strip())
        except ValueError:
            raise InvalidArgument(
                f"Policy '{policy_type.value}' expects an integer, got {argument!r}"
            ) from None

    return POLICY_CLASSES[policy_type](argument)


__all__ = [
    "PricingPolicy",
    "ConstantIncrement",
    "ConstantDecrement",
    "SymmetricStep",
    "Threshold",
    "InitialLetterOrVowel",
    "POLICY_CLASSES",
    "create_policy",
]
