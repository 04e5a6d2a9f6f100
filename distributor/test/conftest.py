import os

import pytest
from eth_utils import to_checksum_address

from distributor.models import ZERO_BYTES32
from distributor.ownership import Ownable
from distributor.tokens import InMemoryERC20, InMemoryMintableToken
from distributor.distributor import CumulativeMerkleDistributor, MerkleDistributor

STUBS = os.path.join(os.path.dirname(__file__), "stubs")

# well known dev chain accounts
ADMIN = to_checksum_address("0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266")
ALICE = to_checksum_address("0x70997970c51812dc3a010c7d01b50e0d17dc79c8")
BOB = to_checksum_address("0x3c44cdddb6a900fa2b585dd299e03d12fa4293bc")
CAROL = to_checksum_address("0x90f79bf6eb2c4f870365e785982e1f101e93b906")
FEE_RECIPIENT = to_checksum_address("0x9965507d1a55bcc2695c58ba16fb37d819b0a4dc")
DISTRIBUTOR = to_checksum_address("0x5fbdb2315678afecb367f032d93f642f64180aa3")
TOKEN = to_checksum_address("0xe7f1725e7734ce288f8367e1bb143e90bb3f0512")


@pytest.fixture
def ownership() -> Ownable:
    return Ownable(ADMIN)


@pytest.fixture
def token() -> InMemoryERC20:
    return InMemoryERC20("TestToken", "TST", TOKEN)


@pytest.fixture
def mintable_token() -> InMemoryMintableToken:
    token = InMemoryMintableToken("TestToken", "TST", TOKEN)
    token.set_minter_address(DISTRIBUTOR)
    return token


@pytest.fixture
def distributor(token, ownership) -> MerkleDistributor:
    return MerkleDistributor(DISTRIBUTOR, token, ZERO_BYTES32, ownership)


@pytest.fixture
def cumulative_distributor(mintable_token, ownership) -> CumulativeMerkleDistributor:
    return CumulativeMerkleDistributor(
        DISTRIBUTOR, mintable_token, ZERO_BYTES32, ownership, FEE_RECIPIENT
    )
