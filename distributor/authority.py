from typing import Any

from eth_utils import encode_hex

from distributor.chain import Stateful, transaction
from distributor.codec import to_bytes32
from distributor.errors import (
    DuplicateAddress,
    DuplicateRoot,
    InvalidAddress,
    SameFee,
    Unauthorized,
)
from distributor.fees import validate_fee_amount
from distributor.models import (
    ZERO_ADDRESS,
    Bytes32,
    EthereumAddress,
    Event,
    FeeAddressUpdated,
    FeeAmountUpdated,
    HexStr,
    MerkleRootUpdated,
    checksum_address,
)
from distributor.ownership import OwnershipCapability


class DistributionAuthority(Stateful):
    """
    Holds the active merkle root and lets the owner rotate it.

    Ownership is injected: anything with an `is_owner(account)` predicate works.
    Setters refuse to write the value already in effect so every update event is a real change.
    """

    _state_fields: tuple[str, ...] = ("merkle_root", "events")

    def __init__(
        self,
        address: EthereumAddress,
        merkle_root: Bytes32,
        ownership: OwnershipCapability,
    ):
        self.address = checksum_address(address)
        self.merkle_root = to_bytes32(merkle_root)
        self.ownership = ownership
        self.events: list[Event] = []

    @property
    def participants(self) -> list[Any]:
        """Everything a call of this contract can modify"""
        return [self]

    def _atomic(self):
        return transaction(*self.participants)

    def _only_owner(self, sender: EthereumAddress) -> None:
        if not self.ownership.is_owner(sender):
            raise Unauthorized()

    def _emit(self, event: Event) -> None:
        self.events.append(event)

    @property
    def hex_merkle_root(self) -> HexStr:
        return encode_hex(self.merkle_root)

    def set_merkle_root(self, merkle_root: Bytes32, sender: EthereumAddress) -> None:
        """
        Rotating the root keeps every existing claim record. Callers must make sure the
        new tree does not lower the entitlement of accounts that have already claimed.
        """
        with self._atomic():
            self._only_owner(sender)
            new_root = to_bytes32(merkle_root)
            if new_root == self.merkle_root:
                raise DuplicateRoot()
            self.merkle_root = new_root
            self._emit(MerkleRootUpdated(merkleRoot=self.hex_merkle_root))


class FeeAuthority(DistributionAuthority):
    """Adds the protocol fee recipient and rate, both owner controlled"""

    _state_fields = DistributionAuthority._state_fields + (
        "fee_address",
        "fee_basis_points",
    )

    def __init__(
        self,
        address: EthereumAddress,
        merkle_root: Bytes32,
        ownership: OwnershipCapability,
        fee_address: EthereumAddress,
        fee_basis_points: int = 0,
    ):
        super().__init__(address, merkle_root, ownership)
        self.fee_address = self._valid_fee_address(fee_address)
        self.fee_basis_points = validate_fee_amount(fee_basis_points)

    @staticmethod
    def _valid_fee_address(fee_address: EthereumAddress) -> EthereumAddress:
        fee_address = checksum_address(fee_address)
        if fee_address == ZERO_ADDRESS:
            raise InvalidAddress()
        return fee_address

    def set_fee_address(
        self, fee_address: EthereumAddress, sender: EthereumAddress
    ) -> None:
        with self._atomic():
            self._only_owner(sender)
            fee_address = self._valid_fee_address(fee_address)
            if fee_address == self.fee_address:
                raise DuplicateAddress()
            self.fee_address = fee_address
            self._emit(FeeAddressUpdated(feeAddress=fee_address))

    def set_fee_amount(self, fee_basis_points: int, sender: EthereumAddress) -> None:
        with self._atomic():
            self._only_owner(sender)
            if fee_basis_points == self.fee_basis_points:
                raise SameFee()
            self.fee_basis_points = validate_fee_amount(fee_basis_points)
            self._emit(FeeAmountUpdated(feeBasisPoints=fee_basis_points))
