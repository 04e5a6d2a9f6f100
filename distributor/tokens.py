"""
Token collaborators used by the distributors, and in-memory tokens to run them against.
"""

from typing import Protocol

from distributor.chain import Stateful, transaction
from distributor.errors import InsufficientBalance, InvalidAddress
from distributor.models import ZERO_ADDRESS, EthereumAddress, checksum_address


class ERC20Token(Protocol):
    def transfer(self, to: EthereumAddress, amount: int, sender: EthereumAddress) -> bool:
        ...

    def balance_of(self, account: EthereumAddress) -> int:
        ...


class MintableToken(Protocol):
    def mint_shares(
        self, to: EthereumAddress, amount: int, sender: EthereumAddress
    ) -> bool:
        ...

    def balance_of(self, account: EthereumAddress) -> int:
        ...


class InMemoryERC20(Stateful):
    _state_fields = ("balances", "total_supply")

    def __init__(self, name: str, symbol: str, address: EthereumAddress = ZERO_ADDRESS):
        self.name = name
        self.symbol = symbol
        self.address = checksum_address(address)
        self.balances: dict[EthereumAddress, int] = {}
        self.total_supply = 0

    def balance_of(self, account: EthereumAddress) -> int:
        return self.balances.get(checksum_address(account), 0)

    def set_balance(self, account: EthereumAddress, amount: int) -> None:
        account = checksum_address(account)
        self.total_supply += amount - self.balance_of(account)
        self.balances[account] = amount

    def transfer(self, to: EthereumAddress, amount: int, sender: EthereumAddress) -> bool:
        with transaction(self):
            sender, to = checksum_address(sender), checksum_address(to)
            if to == ZERO_ADDRESS:
                raise InvalidAddress("ERC20: transfer to the zero address")
            if self.balance_of(sender) < amount:
                raise InsufficientBalance()
            self.balances[sender] = self.balance_of(sender) - amount
            self.balances[to] = self.balance_of(to) + amount
        return True


class InMemoryMintableToken(InMemoryERC20):
    """Only the minter may mint, other callers get `False` back"""

    _state_fields = ("balances", "total_supply", "minter")

    def __init__(self, name: str, symbol: str, address: EthereumAddress = ZERO_ADDRESS):
        super().__init__(name, symbol, address)
        self.minter = ZERO_ADDRESS

    def set_minter_address(self, minter: EthereumAddress) -> None:
        self.minter = checksum_address(minter)

    def mint_shares(
        self, to: EthereumAddress, amount: int, sender: EthereumAddress
    ) -> bool:
        if self.minter == ZERO_ADDRESS or checksum_address(sender) != self.minter:
            return False
        with transaction(self):
            to = checksum_address(to)
            self.balances[to] = self.balance_of(to) + amount
            self.total_supply += amount
        return True
