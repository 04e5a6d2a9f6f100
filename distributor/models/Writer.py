from pathlib import Path
from dataclasses import dataclass

from distributor import utils
from distributor.models.Claim import MerkleDistributorInfo
from distributor.models.Config import Config

CLAIMS_FIELDS = ["account", "index", "amount"]


@dataclass
class Writer:
    config: Config

    @property
    def path(self) -> str:
        return self.config.path

    @property
    def csv_path(self) -> str:
        return f"{self.path}/csv"

    @property
    def json_path(self) -> str:
        return f"{self.path}/json"

    @property
    def distribution_file(self) -> str:
        return f"{self.json_path}/merkle-distribution.json"

    @staticmethod
    def flatten_claims(info: MerkleDistributorInfo) -> list[dict]:
        """One row per claim, amounts in decimal for readability"""
        return [
            {"account": account, "index": c.index, "amount": str(c.amount_int)}
            for account, c in sorted(info.claims.items(), key=lambda kv: kv[1].index)
        ]

    # create the directory for csv and json if it doesn't exist
    def _create_dir(self) -> None:
        Path(self.path).mkdir(parents=True, exist_ok=True)
        Path(self.csv_path).mkdir(parents=True, exist_ok=True)
        Path(self.json_path).mkdir(parents=True, exist_ok=True)

    def to_csv(self, data: list[dict], name: str, fieldnames: list[str]) -> None:
        self._create_dir()
        utils.write_csv(data, f"{self.csv_path}/{name}.csv", fieldnames)

    def to_json(self, data, name: str) -> None:
        self._create_dir()
        utils.write_json(data, f"{self.json_path}/{name}.json")

    def write_distribution(self, info: MerkleDistributorInfo) -> str:
        """Writes the published artifact and a flat csv of the claims, returns the artifact path"""
        self.to_json(info.model_dump(), "merkle-distribution")
        self.to_csv(self.flatten_claims(info), "claims", CLAIMS_FIELDS)
        return self.distribution_file
