from typing import Any, Optional, Sequence

from distributor.authority import DistributionAuthority, FeeAuthority
from distributor.errors import (
    AlreadyClaimed,
    InvalidClaimAmount,
    InvalidProof,
    MintFailed,
    TransferFailed,
)
from distributor.fees import split_fee
from distributor.ledger import BitmapClaimLedger, CumulativeClaimLedger
from distributor.models import (
    MAX_UINT256,
    Bytes32,
    Claimed,
    EthereumAddress,
    checksum_address,
)
from distributor.ownership import OwnershipCapability
from distributor.tokens import ERC20Token, MintableToken
from distributor.tree import BalanceTree


def _in_uint256(*values: int) -> bool:
    return all(0 <= v <= MAX_UINT256 for v in values)


class MerkleDistributor(DistributionAuthority):
    """
    Pays out a funded token balance, one claim per leaf of the tree.
    Anyone may submit the claim of an account, tokens always go to the account in the leaf.
    """

    def __init__(
        self,
        address: EthereumAddress,
        token: ERC20Token,
        merkle_root: Bytes32,
        ownership: OwnershipCapability,
    ):
        super().__init__(address, merkle_root, ownership)
        self.token = token
        self.ledger = BitmapClaimLedger()

    @property
    def participants(self) -> list[Any]:
        return [self, self.ledger, self.token]

    def is_claimed(self, index: int) -> bool:
        return self.ledger.is_claimed(index)

    def claim(
        self,
        index: int,
        account: EthereumAddress,
        amount: int,
        proof: Sequence[Bytes32],
        sender: Optional[EthereumAddress] = None,
    ) -> None:
        with self._atomic():
            account = checksum_address(account)
            if self.is_claimed(index):
                raise AlreadyClaimed()

            if not _in_uint256(index, amount) or not BalanceTree.verify_proof(
                index, account, amount, proof, self.merkle_root
            ):
                raise InvalidProof()

            self.ledger.set_claimed(index)

            if not self.token.transfer(account, amount, sender=self.address):
                raise TransferFailed()

            self._emit(Claimed(index=index, account=account, amount=amount))


class CumulativeMerkleDistributor(FeeAuthority):
    """
    Mints entitlements on claim. An account may claim its entitlement in any number of
    parts, and a protocol fee in basis points is minted to the fee address on each claim.
    The leaf is checked against the caller, so a proof can only be used by its own account.
    """

    def __init__(
        self,
        address: EthereumAddress,
        token: MintableToken,
        merkle_root: Bytes32,
        ownership: OwnershipCapability,
        fee_address: EthereumAddress,
        fee_basis_points: int = 0,
    ):
        super().__init__(address, merkle_root, ownership, fee_address, fee_basis_points)
        self.token = token
        self.ledger = CumulativeClaimLedger()

    @property
    def participants(self) -> list[Any]:
        return [self, self.ledger, self.token]

    def claimed_amount(self, account: EthereumAddress) -> int:
        return self.ledger.claimed_amount(checksum_address(account))

    def claim(
        self,
        index: int,
        total_entitlement: int,
        claim_amount: int,
        proof: Sequence[Bytes32],
        sender: EthereumAddress,
    ) -> None:
        with self._atomic():
            account = checksum_address(sender)
            if claim_amount < 0 or claim_amount > total_entitlement:
                raise InvalidClaimAmount()

            if not _in_uint256(index, total_entitlement) or not BalanceTree.verify_proof(
                index, account, total_entitlement, proof, self.merkle_root
            ):
                raise InvalidProof()

            self.ledger.consume(account, total_entitlement, claim_amount)

            split = split_fee(claim_amount, self.fee_basis_points)
            if not self.token.mint_shares(account, split.recipient_amount, sender=self.address):
                raise MintFailed()
            if split.fee != 0 and not self.token.mint_shares(
                self.fee_address, split.fee, sender=self.address
            ):
                raise MintFailed()

            self._emit(
                Claimed(index=index, account=account, amount=claim_amount, feeAmount=split.fee)
            )
