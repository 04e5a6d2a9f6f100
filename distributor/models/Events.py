from typing import Optional

from pydantic import BaseModel

from distributor.models.types import EthereumAddress, HexStr


class Event(BaseModel):
    """Log entry emitted by a distributor once a call succeeds"""


class Claimed(Event):
    index: int
    account: EthereumAddress
    amount: int
    # only set by the cumulative distributor
    feeAmount: Optional[int] = None


class MerkleRootUpdated(Event):
    merkleRoot: HexStr


class FeeAddressUpdated(Event):
    feeAddress: EthereumAddress


class FeeAmountUpdated(Event):
    feeBasisPoints: int


class OwnershipTransferred(Event):
    previousOwner: EthereumAddress
    newOwner: EthereumAddress
