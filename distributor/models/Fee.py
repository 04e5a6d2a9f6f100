from typing import Any

from pydantic import BaseModel, field_validator

from distributor.errors import InvalidAddress, InvalidFeeAmount
from distributor.models.types import ZERO_ADDRESS, EthereumAddress, checksum_address

BASIS_POINTS = 10_000


class FeeConfig(BaseModel):
    """
    Protocol fee taken on each cumulative claim
    :param `fee_address`: receives the fee, cannot be the zero address
    :param `fee_basis_points`: fee as a fraction of 10000 of each claimed amount
    """

    fee_address: EthereumAddress
    fee_basis_points: int = 0

    @field_validator("fee_address", mode="before")
    @classmethod
    def validate_fee_address(cls, address: Any) -> EthereumAddress:
        checksummed = checksum_address(address)
        if checksummed == ZERO_ADDRESS:
            raise InvalidAddress("Fee address cannot be the zero address")
        return checksummed

    @field_validator("fee_basis_points")
    @classmethod
    def validate_fee_basis_points(cls, bps: int) -> int:
        if bps < 0 or bps > BASIS_POINTS:
            raise InvalidFeeAmount(f"Fee out of range, passed {bps}")
        return bps
