import json
from pathlib import Path

from distributor import env, utils
from distributor.models import Config, InputConfig

CONFIG_FILE = "distribution-conf.json"


def distribution_path(window: int) -> str:
    return f"{env.REPORTS_DIR}/{window}"


def create_conf(path: str) -> Config:
    """Generates the base config object from an input config file"""
    base_config = InputConfig.model_validate(utils.read_json(path))

    return Config(
        path=distribution_path(base_config.distribution_window),
        **base_config.model_dump(),
    )


def load_conf(config_path: str) -> Config:
    """Loads an existing config from file"""
    return Config.model_validate(utils.read_json(f"{config_path}/{CONFIG_FILE}"))


def main(path_to_config_file: str = "") -> str:
    """Generates config file and saves in newly created directory with correct structure"""
    if not path_to_config_file:
        path_to_config_file = input(" Path to the config file ")
    conf = create_conf(path_to_config_file)

    # create directories
    Path(conf.path).mkdir(parents=True, exist_ok=True)
    Path(f"{conf.path}/csv/").mkdir(parents=True, exist_ok=True)
    Path(f"{conf.path}/json/").mkdir(parents=True, exist_ok=True)

    # write new config file
    with open(f"{conf.path}/{CONFIG_FILE}", "w+") as j:
        j.write(json.dumps(conf.model_dump(mode="json"), indent=4))

    print(f"😃 Created a new distribution folder {conf.path}")

    return conf.path
