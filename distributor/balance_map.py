from typing import Any, Union

from eth_utils import to_hex

from distributor.errors import DuplicateAccount, InvalidDistributionError
from distributor.models import BalanceEntry, ClaimInfo, MerkleDistributorInfo
from distributor.tree import BalanceTree

# {account: amount} or [{"address": account, "earnings": amount}]
BalanceMap = Union[dict[str, Any], list[dict[str, Any]]]


def to_balance_entries(balances: BalanceMap) -> list[BalanceEntry]:
    """
    Validates every record of a balance map and returns them sorted by checksummed address.
    The position of an entry in the returned list is the index of its leaf.
    """
    records = (
        balances
        if isinstance(balances, list)
        else [{"address": a, "earnings": e} for a, e in balances.items()]
    )

    entries: dict[str, BalanceEntry] = {}
    for record in records:
        entry = BalanceEntry(address=record["address"], amount=record["earnings"])
        if entry.address in entries:
            raise DuplicateAccount(f"Duplicate address: {entry.address}")
        entries[entry.address] = entry

    return [entries[address] for address in sorted(entries)]


def build_distribution(entries: list[BalanceEntry]) -> MerkleDistributorInfo:
    """Builds the tree over already sorted entries and generates every claim"""
    if not entries:
        raise InvalidDistributionError("Cannot build a distribution without balances")

    tree = BalanceTree(entries)
    claims = {
        leaf.address: ClaimInfo(
            index=leaf.index,
            amount=to_hex(leaf.amount),
            proof=tree.get_proof(leaf.index, leaf.address, leaf.amount),
        )
        for leaf in tree.leaves
    }
    token_total = sum(e.amount for e in entries)

    return MerkleDistributorInfo(
        merkleRoot=tree.get_hex_root(),
        tokenTotal=to_hex(token_total),
        claims=claims,
    )


def parse_balance_map(balances: BalanceMap) -> MerkleDistributorInfo:
    return build_distribution(to_balance_entries(balances))
