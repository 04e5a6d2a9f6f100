import fire
from eth_utils import encode_hex

from distributor import config, utils
from distributor.audit import verify_distribution
from distributor.balance_map import build_distribution, to_balance_entries
from distributor.errors import MissingDBException
from distributor.models import DB, MerkleDistributorInfo, Writer


def create(input_config: str = "") -> str:
    """Creates the folder and config of a new distribution"""
    return config.main(input_config)


def build(path: str) -> str:
    """
    Builds the merkle tree of the distribution in `path` and writes
    the published artifact, a csv of the claims and the DB
    """
    conf = config.load_conf(path)

    if DB.exists(DB.db_path(conf)) and not utils.yes_or_no(
        f"⚠️ A distribution already exists in {conf.path}, overwrite it?"
    ):
        return ""

    entries = to_balance_entries(utils.read_json(conf.balances))
    info = build_distribution(entries)
    print(f"🌳 Built a tree of {len(entries)} claims with root {info.merkleRoot}")

    db = DB(conf, drop=True)
    db.write_distribution(entries, info)
    db.close()

    artifact = Writer(conf).write_distribution(info)
    print(
        f"🚀🚀🚀 Successfully created the {conf.variant.value} distribution, publish {artifact} alongside the root"
    )
    return artifact


def verify(artifact: str) -> str:
    """Recomputes the root of a published distribution and checks its claims"""
    info = MerkleDistributorInfo.model_validate(utils.read_json(artifact))
    root = encode_hex(verify_distribution(info))
    print(f"✅ {len(info.claims)} claims match root {root}")
    return root


def proof(path: str, account: str) -> dict:
    """Prints the stored claim of `account` in the distribution at `path`"""
    conf = config.load_conf(path)
    db = DB.load(conf)
    claim = db.get_claim(account)
    db.close()
    if claim is None:
        raise MissingDBException(f"{account} has no claim in {conf.path}")
    return claim.model_dump()


def main():
    fire.Fire(
        {
            "create": create,
            "build": build,
            "verify": verify,
            "proof": proof,
        }
    )


if __name__ == "__main__":
    main()
