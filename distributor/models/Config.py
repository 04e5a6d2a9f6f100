from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, field_validator, model_validator

from distributor.errors import BadConfigException
from distributor.models.Fee import FeeConfig
from distributor.models.types import EthereumAddress, checksum_address


class ERROR_MESSAGES:
    WINDOW_OUT_OF_RANGE = "Distribution window out of range"
    CHAIN_ID_OUT_OF_RANGE = "Chain id out of range"
    MISSING_FEE = "Cumulative distributions require a fee config"
    UNEXPECTED_FEE = "Fees are only supported by cumulative distributions"


class DistributorVariant(str, Enum):
    # one claim per index, transfers from a funded distributor
    BITMAP = "bitmap"

    # any number of partial claims up to the entitlement, minted with a protocol fee
    CUMULATIVE = "cumulative"


class InputConfig(BaseModel):
    """
    Settings for a single distribution, read from a JSON file
    :param `distribution_window`: unique number of the distribution, used to name the output folder
    :param `balances`: path to the balance map, either `{account: amount}` or a list of
    `{"address": ..., "earnings": ...}` records
    """

    distribution_window: int
    chain_id: int = 1
    token: EthereumAddress
    balances: str
    variant: DistributorVariant = DistributorVariant.BITMAP
    fee: Optional[FeeConfig] = None

    @field_validator("distribution_window")
    @classmethod
    def validate_window(cls, window: int) -> int:
        if window < 0:
            raise BadConfigException(ERROR_MESSAGES.WINDOW_OUT_OF_RANGE)
        return window

    @field_validator("chain_id")
    @classmethod
    def validate_chain_id(cls, chain_id: int) -> int:
        if chain_id < 1:
            raise BadConfigException(ERROR_MESSAGES.CHAIN_ID_OUT_OF_RANGE)
        return chain_id

    @field_validator("token", mode="before")
    @classmethod
    def checksum_token(cls, addr: Any) -> EthereumAddress:
        return checksum_address(addr)

    @model_validator(mode="after")
    def validate_fee(self):
        if self.variant == DistributorVariant.CUMULATIVE and self.fee is None:
            raise BadConfigException(ERROR_MESSAGES.MISSING_FEE)
        if self.variant == DistributorVariant.BITMAP and self.fee is not None:
            raise BadConfigException(ERROR_MESSAGES.UNEXPECTED_FEE)
        return self


class Config(InputConfig):
    """Input config plus the folder the distribution is written to"""

    path: str
