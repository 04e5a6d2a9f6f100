import os

import pytest
from pydantic import ValidationError

from distributor.config import create_conf, load_conf, main
from distributor.models import DistributorVariant
from distributor.test.conftest import FEE_RECIPIENT, STUBS, TOKEN

PATH = os.path.join(STUBS, "config")


@pytest.fixture(autouse=True)
def reports_dir(monkeypatch, tmp_path):
    monkeypatch.setattr("distributor.env.REPORTS_DIR", str(tmp_path))
    return tmp_path


def test_create_conf(reports_dir):
    conf = create_conf(f"{PATH}/input.json")

    assert conf.path == f"{reports_dir}/3"
    assert conf.distribution_window == 3
    assert conf.token == TOKEN
    assert conf.variant == DistributorVariant.CUMULATIVE
    assert conf.fee.fee_address == FEE_RECIPIENT
    assert conf.fee.fee_basis_points == 250


def test_config_file(monkeypatch):
    conf = create_conf(f"{PATH}/input.json")
    monkeypatch.setattr("builtins.input", lambda _: f"{PATH}/input.json")
    path = main()

    assert os.path.exists(f"{path}/csv")
    assert os.path.exists(f"{path}/json")

    epoch_conf = load_conf(path)
    assert epoch_conf == conf


@pytest.mark.parametrize("invalids", [f"{PATH}/invalid_{i}.json" for i in range(1, 4)])
def test_invalid_json_fails(invalids):
    with pytest.raises(ValidationError):
        create_conf(invalids)
