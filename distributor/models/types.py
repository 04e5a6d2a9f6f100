from typing import Any, Union

import eth_utils as eth

from distributor.errors import InvalidAddress, InvalidAmount

# type aliases for clarity
EthereumAddress = str
BigNumber = str
HexStr = str
Bytes32 = Union[bytes, HexStr]

ZERO_ADDRESS: EthereumAddress = "0x0000000000000000000000000000000000000000"
ZERO_BYTES32: HexStr = "0x" + "00" * 32
MAX_UINT256 = 2**256 - 1


def checksum_address(address: Any) -> EthereumAddress:
    """
    Checksum an address, raising `InvalidAddress` if it is not one.
    Mixed case input must already carry a valid EIP-55 checksum
    """
    if not isinstance(address, (str, bytes)) or not eth.is_address(address):
        raise InvalidAddress(f"Found invalid address: {address!r}")
    if isinstance(address, str):
        body = address[2:] if address[:2].lower() == "0x" else address
        if body not in (body.lower(), body.upper()) and not eth.is_checksum_address(
            address
        ):
            raise InvalidAddress(f"Found invalid address checksum: {address!r}")
    return eth.to_checksum_address(address)


def to_uint256(value: Any) -> int:
    """
    Accepts ints, decimal strings and 0x prefixed hex strings,
    returns an int if it fits a uint256
    """
    if isinstance(value, bool):
        raise InvalidAmount(f"Invalid amount: {value!r}")
    if isinstance(value, str):
        v = value.strip()
        try:
            value = int(v, 16) if v.lower().startswith("0x") else int(v)
        except ValueError as e:
            raise InvalidAmount(f"Invalid amount: {value!r}") from e
    if not isinstance(value, int) or value < 0 or value > MAX_UINT256:
        raise InvalidAmount(f"Invalid amount: {value!r}")
    return value
