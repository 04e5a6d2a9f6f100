from typing import Protocol

from distributor.chain import Stateful, transaction
from distributor.errors import InvalidAddress, Unauthorized
from distributor.models import (
    ZERO_ADDRESS,
    EthereumAddress,
    OwnershipTransferred,
    checksum_address,
)


class OwnershipCapability(Protocol):
    """Anything that can tell whether an account may call restricted functions"""

    def is_owner(self, account: EthereumAddress) -> bool:
        ...


class Ownable(Stateful):
    """Single owner access control"""

    _state_fields = ("owner", "events")

    def __init__(self, owner: EthereumAddress):
        self.owner = checksum_address(owner)
        self.events: list[OwnershipTransferred] = []

    def is_owner(self, account: EthereumAddress) -> bool:
        try:
            return checksum_address(account) == self.owner
        except InvalidAddress:
            return False

    def only_owner(self, sender: EthereumAddress) -> None:
        if not self.is_owner(sender):
            raise Unauthorized()

    def transfer_ownership(
        self, new_owner: EthereumAddress, sender: EthereumAddress
    ) -> None:
        with transaction(self):
            self.only_owner(sender)
            new_owner = checksum_address(new_owner)
            if new_owner == ZERO_ADDRESS:
                raise InvalidAddress("Ownable: new owner is the zero address")
            self.events.append(
                OwnershipTransferred(previousOwner=self.owner, newOwner=new_owner)
            )
            self.owner = new_owner
