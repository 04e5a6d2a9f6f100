from typing import NamedTuple

from distributor.errors import InvalidFeeAmount
from distributor.models.Fee import BASIS_POINTS


class FeeSplit(NamedTuple):
    fee: int
    recipient_amount: int


def validate_fee_amount(fee_basis_points: int) -> int:
    if fee_basis_points < 0 or fee_basis_points > BASIS_POINTS:
        raise InvalidFeeAmount(f"Fee out of range, passed {fee_basis_points}")
    return fee_basis_points


def split_fee(amount: int, fee_basis_points: int) -> FeeSplit:
    """
    Splits a claimed amount into the protocol fee and what the claimant receives.
    The fee rounds down, so `fee + recipient_amount == amount` and any dust goes to the claimant.
    """
    validate_fee_amount(fee_basis_points)
    fee = amount * fee_basis_points // BASIS_POINTS
    return FeeSplit(fee=fee, recipient_amount=amount - fee)
