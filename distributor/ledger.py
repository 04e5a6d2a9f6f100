from distributor.chain import Stateful
from distributor.errors import AlreadyClaimed, InvalidClaimAmount
from distributor.models import EthereumAddress


class BitmapClaimLedger(Stateful):
    """Set of claimed indices, each index can be claimed once"""

    _state_fields = ("claimed",)

    def __init__(self):
        self.claimed: set[int] = set()

    def is_claimed(self, index: int) -> bool:
        return index in self.claimed

    def set_claimed(self, index: int) -> None:
        if self.is_claimed(index):
            raise AlreadyClaimed()
        self.claimed.add(index)


class CumulativeClaimLedger(Stateful):
    """
    Running total claimed by each account.
    Totals are never reset, including when the merkle root is rotated, so claims are bounded
    by whatever entitlement the active root asserts minus everything claimed so far.
    """

    _state_fields = ("claimed",)

    def __init__(self):
        self.claimed: dict[EthereumAddress, int] = {}

    def claimed_amount(self, account: EthereumAddress) -> int:
        return self.claimed.get(account, 0)

    def remaining(self, account: EthereumAddress, entitlement: int) -> int:
        return entitlement - self.claimed_amount(account)

    def consume(self, account: EthereumAddress, entitlement: int, amount: int) -> int:
        """Adds `amount` to the running total of `account` and returns the new total"""
        if amount < 0 or self.remaining(account, entitlement) < amount:
            raise InvalidClaimAmount()
        self.claimed[account] = self.claimed_amount(account) + amount
        return self.claimed[account]
