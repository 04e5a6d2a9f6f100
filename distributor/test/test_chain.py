import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from distributor.chain import Stateful, transaction
from distributor.errors import AlreadyClaimed, InvalidAddress, InvalidClaimAmount, Unauthorized
from distributor.models import ZERO_ADDRESS, BalanceEntry, OwnershipTransferred
from distributor.ownership import Ownable
from distributor.tree import BalanceTree
from distributor.test.conftest import ADMIN, ALICE, BOB, DISTRIBUTOR

THREADS = 8


class Counter(Stateful):
    _state_fields = ("count", "history")

    def __init__(self):
        self.count = 0
        self.history = []


class Plain:
    def __init__(self):
        self.count = 0


def test_transaction_commits():
    counter = Counter()
    with transaction(counter):
        counter.count += 1
        counter.history.append(1)

    assert counter.count == 1
    assert counter.history == [1]


def test_transaction_reverts_every_participant():
    first, second, plain = Counter(), Counter(), Plain()

    with pytest.raises(RuntimeError):
        with transaction(first, second, plain):
            first.count += 1
            second.history.append("x")
            plain.count += 1
            raise RuntimeError("revert")

    assert first.count == 0
    assert second.history == []
    # only stateful participants are restored
    assert plain.count == 1


def test_nested_transactions():
    counter = Counter()
    with transaction(counter):
        counter.count += 1
        with pytest.raises(ValueError):
            with transaction(counter):
                counter.count += 10
                raise ValueError()

    assert counter.count == 1


def test_ownable():
    ownable = Ownable(ADMIN.lower())

    assert ownable.owner == ADMIN
    assert ownable.is_owner(ADMIN)
    assert not ownable.is_owner(ALICE)
    assert not ownable.is_owner(None)

    with pytest.raises(Unauthorized, match="Ownable: caller is not the owner"):
        ownable.transfer_ownership(ALICE, sender=ALICE)

    with pytest.raises(InvalidAddress):
        ownable.transfer_ownership(ZERO_ADDRESS, sender=ADMIN)

    ownable.transfer_ownership(ALICE, sender=ADMIN)
    assert ownable.is_owner(ALICE)
    assert ownable.events == [OwnershipTransferred(previousOwner=ADMIN, newOwner=ALICE)]


def run_concurrently(fn, n: int = THREADS) -> list:
    """Calls `fn` from `n` threads released together, returns what each call raised or None"""
    barrier = threading.Barrier(n)

    def call(_):
        barrier.wait()
        try:
            fn()
        except Exception as e:
            return e
        return None

    with ThreadPoolExecutor(max_workers=n) as pool:
        return list(pool.map(call, range(n)))


@pytest.fixture
def tree() -> BalanceTree:
    return BalanceTree(
        [BalanceEntry(address=ALICE, amount=100), BalanceEntry(address=BOB, amount=101)]
    )


def test_concurrent_bitmap_claims(distributor, token, tree):
    distributor.set_merkle_root(tree.get_hex_root(), sender=ADMIN)
    token.set_balance(DISTRIBUTOR, 201)
    proof = tree.get_proof(0, ALICE, 100)

    results = run_concurrently(lambda: distributor.claim(0, ALICE, 100, proof, sender=ALICE))

    assert results.count(None) == 1
    assert all(isinstance(r, AlreadyClaimed) for r in results if r is not None)
    assert token.balance_of(ALICE) == 100
    assert token.balance_of(DISTRIBUTOR) == 101
    assert len(distributor.events) == 2


def test_concurrent_cumulative_claims(cumulative_distributor, mintable_token, tree):
    cumulative_distributor.set_merkle_root(tree.get_hex_root(), sender=ADMIN)
    proof = tree.get_proof(0, ALICE, 100)

    # eight claims of 30 against an entitlement of 100
    results = run_concurrently(
        lambda: cumulative_distributor.claim(0, 100, 30, proof, sender=ALICE)
    )

    assert results.count(None) == 3
    assert all(isinstance(r, InvalidClaimAmount) for r in results if r is not None)
    assert cumulative_distributor.claimed_amount(ALICE) == 90
    assert mintable_token.balance_of(ALICE) == 90
