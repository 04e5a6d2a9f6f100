import json
import os

import pytest

from distributor.balance_map import parse_balance_map, to_balance_entries
from distributor.codec import hash_leaf
from distributor.errors import (
    DuplicateAccount,
    InvalidAddress,
    InvalidAmount,
    InvalidDistributionError,
)
from distributor.models import MAX_UINT256
from distributor.tree import BalanceTree
from distributor.test.conftest import ALICE, BOB, CAROL, STUBS


def read_stub(name: str):
    with open(os.path.join(STUBS, name)) as j:
        return json.load(j)


def test_parse_balance_map():
    info = parse_balance_map({CAROL: 200, ALICE: 300, BOB: 250})

    assert info.tokenTotal == "0x2ee"
    assert int(info.tokenTotal, 16) == 750

    # indices follow the sorted addresses
    for index, account in enumerate(sorted([ALICE, BOB, CAROL])):
        assert info.claims[account].index == index

    assert info.claims[CAROL].amount == "0xc8"
    assert info.claims[ALICE].amount == "0x12c"
    assert info.claims[BOB].amount == "0xfa"

    for account, claim in info.claims.items():
        assert BalanceTree.verify_proof(
            claim.index, account, claim.amount_int, claim.proof, info.merkleRoot
        )


def test_input_order_does_not_matter():
    forward = parse_balance_map({CAROL: 200, ALICE: 300, BOB: 250})
    backward = parse_balance_map({BOB: 250, ALICE: 300, CAROL: 200})

    assert forward == backward
    assert forward.model_dump() == backward.model_dump()


def test_mapping_and_list_formats_agree():
    from_mapping = parse_balance_map(read_stub("balances.json"))
    from_list = parse_balance_map(read_stub("balances-list.json"))

    assert from_mapping == from_list
    assert from_mapping == parse_balance_map({CAROL: 200, ALICE: 300, BOB: 250})


def test_accounts_are_checksummed():
    entries = to_balance_entries({ALICE.lower(): 1, BOB.upper().replace("0X", "0x"): 2})
    assert [e.address for e in entries] == sorted([ALICE, BOB])


def test_single_account():
    info = parse_balance_map({ALICE: 5})

    assert info.claims[ALICE].proof == []
    assert info.merkleRoot == "0x" + hash_leaf(0, ALICE, 5).hex()


def test_duplicate_account():
    with pytest.raises(DuplicateAccount, match="Duplicate address"):
        parse_balance_map({ALICE: 1, ALICE.lower(): 2})

    with pytest.raises(DuplicateAccount):
        parse_balance_map(
            [{"address": BOB, "earnings": 1}, {"address": BOB, "earnings": 1}]
        )


@pytest.mark.parametrize("address", ["0x1234", "not an address", ""])
def test_invalid_address(address):
    with pytest.raises(InvalidAddress, match="Found invalid address"):
        parse_balance_map({ALICE: 1, address: 2})


@pytest.mark.parametrize("amount", [0, -1, "0x0", "abc", MAX_UINT256 + 1, 1.5, True])
def test_invalid_amount(amount):
    with pytest.raises(InvalidAmount):
        parse_balance_map({ALICE: 1, BOB: amount})


def test_empty_balance_map():
    with pytest.raises(InvalidDistributionError):
        parse_balance_map({})
