"""
Leaf encoding and node hashing shared by the tree builder and the on-chain verifier.

A leaf is `keccak256(abi.encodePacked(uint256 index, address account, uint256 amount))`.
Two nodes are combined by hashing them in ascending byte order, so a proof is a flat list
of sibling hashes with no left/right flags.
"""

from typing import Any

from eth_abi.packed import encode_packed
from eth_utils import is_hex, keccak, to_bytes

LEAF_TYPES = ["uint256", "address", "uint256"]
NODE_LENGTH = 32


def encode_leaf(index: int, account: str, amount: int) -> bytes:
    """32 byte index, 20 byte address, 32 byte amount, no padding between fields"""
    return encode_packed(LEAF_TYPES, [index, account, amount])


def hash_leaf(index: int, account: str, amount: int) -> bytes:
    return keccak(encode_leaf(index, account, amount))


def hash_pair(first: bytes, second: bytes) -> bytes:
    if first <= second:
        return keccak(first + second)
    return keccak(second + first)


def to_bytes32(value: Any) -> bytes:
    """Accepts 32 raw bytes or a 0x prefixed hex string of 32 bytes"""
    if isinstance(value, str):
        if not is_hex(value):
            raise ValueError(f"Not a hex string: {value!r}")
        value = to_bytes(hexstr=value)
    if not isinstance(value, (bytes, bytearray)) or len(value) != NODE_LENGTH:
        raise ValueError(f"Expected {NODE_LENGTH} bytes, got {value!r}")
    return bytes(value)
