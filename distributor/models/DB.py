import os
from typing import Optional

from tinydb import TinyDB, where

from distributor.errors import MissingDBException
from distributor.models.Balance import BalanceEntry
from distributor.models.Claim import ClaimInfo, MerkleDistributorInfo
from distributor.models.Config import Config
from distributor.models.types import EthereumAddress, checksum_address


class DB(TinyDB):
    """
    Stores the inputs and outputs of a distribution in `{path}/distributor-db.json`
    so claims can be looked up after the tree has been built.
    """

    config: Config

    def __init__(self, conf: Config, drop=False, **kwargs):
        self.config = conf
        path = self.db_path(conf)

        # check if the directory exists
        create_dirs = self.exists(path) == False
        super().__init__(
            path,
            indent=4,
            create_dirs=create_dirs,
            **kwargs,
        )

        if drop:
            self.drop_tables()

    @staticmethod
    def db_path(conf: Config) -> str:
        return f"{conf.path}/distributor-db.json"

    @staticmethod
    def exists(path: str):
        return os.path.exists(path)

    @classmethod
    def load(cls, conf: Config) -> "DB":
        """Opens the DB of an existing distribution"""
        if not cls.exists(cls.db_path(conf)):
            raise MissingDBException(f"No distribution DB found in {conf.path}")
        return cls(conf)

    def write_balances(self, entries: list[BalanceEntry]) -> None:
        self.table("balances").insert_multiple([e.model_dump() for e in entries])

    def write_claims(self, info: MerkleDistributorInfo) -> None:
        self.table("claims").insert_multiple(
            [{"account": a, **c.model_dump()} for a, c in info.claims.items()]
        )
        self.table("distribution").insert(
            {
                "windowIndex": self.config.distribution_window,
                "chainId": self.config.chain_id,
                "token": self.config.token,
                "merkleRoot": info.merkleRoot,
                "tokenTotal": info.tokenTotal,
            }
        )

    def write_distribution(
        self, entries: list[BalanceEntry], info: MerkleDistributorInfo
    ) -> None:
        self.write_balances(entries)
        self.write_claims(info)

    def get_claim(self, account: EthereumAddress) -> Optional[ClaimInfo]:
        found = self.table("claims").get(where("account") == checksum_address(account))
        if not found:
            return None
        return ClaimInfo(**{k: v for k, v in found.items() if k != "account"})

    def get_distribution(self) -> MerkleDistributorInfo:
        distribution = self.table("distribution").all()
        if not distribution:
            raise MissingDBException(f"No distribution written to {self.config.path}")
        claims = {
            c["account"]: ClaimInfo(index=c["index"], amount=c["amount"], proof=c["proof"])
            for c in self.table("claims").all()
        }
        return MerkleDistributorInfo(
            merkleRoot=distribution[0]["merkleRoot"],
            tokenTotal=distribution[0]["tokenTotal"],
            claims=claims,
        )
