from pydantic import BaseModel

from distributor.models.types import BigNumber, EthereumAddress, HexStr, to_uint256


class ClaimInfo(BaseModel):
    """
    Claim data for a single recipient, as published with the merkle root
    :param `index`: position of the account in the address-sorted distribution.
    Used by the MerkleDistributor to index on-chain claiming.
    :param `amount`: entitlement, hex encoded when generated. Decimal strings are read too
    :param `proof`: sibling hashes from the leaf up to the root
    """

    index: int
    amount: BigNumber
    proof: list[HexStr]

    @property
    def amount_int(self) -> int:
        return to_uint256(self.amount)


class MerkleDistributorInfo(BaseModel):
    """
    The blob that gets published alongside the root.
    It is sufficient for recreating the entire merkle tree, so anyone can check that
    every claim is in the tree and that the tree holds nothing else.
    """

    merkleRoot: HexStr
    tokenTotal: BigNumber
    claims: dict[EthereumAddress, ClaimInfo]
