from __future__ import annotations
from typing import Any

from pydantic import BaseModel, field_validator

from distributor.errors import InvalidAmount
from distributor.models.types import EthereumAddress, checksum_address, to_uint256


class User(BaseModel):
    """Base class for a user with an eth address"""

    address: EthereumAddress

    @field_validator("address", mode="before")
    @classmethod
    def checksum_user_address(cls, input: Any):
        return checksum_address(input)


class BalanceEntry(User):
    """
    A single row of a balance map
    :param `amount`: the entitlement of the account, in token base units. Must be > 0
    """

    amount: int

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, amount: Any) -> int:
        parsed = to_uint256(amount)
        if parsed == 0:
            raise InvalidAmount(f"Invalid amount: {amount!r}")
        return parsed


class Leaf(BalanceEntry):
    """
    A balance entry with the position it was given in the sorted distribution.
    This is what gets hashed into the merkle tree.
    """

    index: int
