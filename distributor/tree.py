from __future__ import annotations

import functools
from typing import Sequence

from eth_utils import encode_hex

from distributor.codec import hash_leaf, hash_pair, to_bytes32
from distributor.errors import InvalidProof
from distributor.models import BalanceEntry, Bytes32, HexStr, Leaf


def process_proof(proof: Sequence[Bytes32], leaf: bytes) -> bytes:
    """
    Folds each proof element into the leaf with the sorted pair hash.
    Raises `InvalidProof` if an element is not a 32 byte hash
    """
    try:
        nodes = [to_bytes32(p) for p in proof]
    except ValueError as e:
        raise InvalidProof(f"Malformed proof: {e}") from e
    return functools.reduce(hash_pair, nodes, leaf)


def verify_proof(proof: Sequence[Bytes32], root: Bytes32, leaf: bytes) -> bool:
    """An empty proof only verifies a tree made of a single leaf"""
    return process_proof(proof, leaf) == to_bytes32(root)


class MerkleTree:
    """
    Binary merkle tree over 32 byte elements.

    Elements are deduplicated and sorted before building, so the root only depends on the
    set of elements. Parents are `hash_pair` of two siblings, and an unpaired node at the
    end of a layer moves up unchanged.
    """

    def __init__(self, elements: Sequence[bytes]):
        if not elements:
            raise ValueError("Cannot build a merkle tree without elements")
        self.elements = sorted(set(elements))
        self.element_positions = {el: i for i, el in enumerate(self.elements)}
        self.layers = self.get_layers(self.elements)

    @staticmethod
    def get_layers(elements: list[bytes]) -> list[list[bytes]]:
        layers = [elements]
        while len(layers[-1]) > 1:
            layers.append(MerkleTree.get_next_layer(layers[-1]))
        return layers

    @staticmethod
    def get_next_layer(elements: list[bytes]) -> list[bytes]:
        return [
            hash_pair(elements[i], elements[i + 1]) if i + 1 < len(elements) else elements[i]
            for i in range(0, len(elements), 2)
        ]

    def get_root(self) -> bytes:
        return self.layers[-1][0]

    def get_hex_root(self) -> HexStr:
        return encode_hex(self.get_root())

    @property
    def depth(self) -> int:
        return len(self.layers) - 1

    def get_proof(self, el: bytes) -> list[bytes]:
        idx = self.element_positions.get(el)
        if idx is None:
            raise ValueError("Element does not exist in Merkle tree")

        proof = []
        for layer in self.layers:
            pair_idx = idx ^ 1
            if pair_idx < len(layer):
                proof.append(layer[pair_idx])
            idx //= 2
        return proof

    def get_hex_proof(self, el: bytes) -> list[HexStr]:
        return [encode_hex(p) for p in self.get_proof(el)]


class BalanceTree:
    """
    Merkle tree over a distribution. Balances are expected in index order,
    the leaf of `balances[i]` commits to `(i, address, amount)` and is kept in `leaves`
    """

    def __init__(self, balances: Sequence[BalanceEntry]):
        self.leaves = [
            Leaf(index=i, address=b.address, amount=b.amount)
            for i, b in enumerate(balances)
        ]
        self.tree = MerkleTree(
            [self.to_node(leaf.index, leaf.address, leaf.amount) for leaf in self.leaves]
        )

    @staticmethod
    def to_node(index: int, account: str, amount: int) -> bytes:
        return hash_leaf(index, account, amount)

    @staticmethod
    def verify_proof(
        index: int, account: str, amount: int, proof: Sequence[Bytes32], root: Bytes32
    ) -> bool:
        return verify_proof(proof, root, BalanceTree.to_node(index, account, amount))

    def get_root(self) -> bytes:
        return self.tree.get_root()

    def get_hex_root(self) -> HexStr:
        return self.tree.get_hex_root()

    def get_proof(self, index: int, account: str, amount: int) -> list[HexStr]:
        return self.tree.get_hex_proof(self.to_node(index, account, amount))
