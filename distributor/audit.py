from typing import Any, Union

from eth_utils import to_hex

from distributor.codec import to_bytes32
from distributor.errors import InvalidAmount, InvalidDistributionError, InvalidProof
from distributor.models import BalanceEntry, MerkleDistributorInfo, to_uint256
from distributor.tree import BalanceTree


def verify_distribution(info: Union[MerkleDistributorInfo, dict[str, Any]]) -> bytes:
    """
    Recomputes the merkle root of a published distribution from its claims alone
    and checks it against the published root, total and proofs.
    Returns the root, raises `InvalidDistributionError` on the first mismatch.
    """
    if not isinstance(info, MerkleDistributorInfo):
        info = MerkleDistributorInfo.model_validate(info)

    if not info.claims:
        raise InvalidDistributionError("Distribution has no claims")

    ordered = sorted(info.claims.items(), key=lambda kv: kv[1].index)
    indices = [claim.index for _, claim in ordered]
    if indices != list(range(len(ordered))):
        raise InvalidDistributionError("Claim indices must run from 0 to N-1")

    entries = [BalanceEntry(address=a, amount=claim.amount) for a, claim in ordered]
    tree = BalanceTree(entries)

    published_root = to_bytes32(info.merkleRoot)
    if tree.get_root() != published_root:
        raise InvalidDistributionError(
            f"Root mismatch: computed {tree.get_hex_root()}, published {info.merkleRoot}"
        )

    total = sum(e.amount for e in entries)
    try:
        published_total = to_uint256(info.tokenTotal)
    except InvalidAmount as e:
        raise InvalidDistributionError(f"Malformed token total: {info.tokenTotal}") from e
    if total != published_total:
        raise InvalidDistributionError(
            f"Token total mismatch: computed {to_hex(total)}, published {info.tokenTotal}"
        )

    for entry, (_, claim) in zip(entries, ordered):
        try:
            valid = BalanceTree.verify_proof(
                claim.index, entry.address, entry.amount, claim.proof, published_root
            )
        except InvalidProof as e:
            raise InvalidDistributionError(f"Malformed proof for {entry.address}") from e
        if not valid:
            raise InvalidDistributionError(f"Invalid proof for {entry.address}")

    return published_root
