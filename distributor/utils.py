import csv
import json
from typing import Any


def yes_or_no(question: str) -> bool:
    """
    Require y or n (case insenstive) as answer to `question`.
    Defaults to N with no response
    """
    while "the answer is invalid":
        reply = input(f"{question} [y/N]: ")
        if not reply:
            return False
        reply = str(reply).lower().strip()
        if reply[:1] == "y":
            return True
        if reply[:1] == "n":
            return False
    return False


def read_json(path: str) -> Any:
    with open(path) as f:
        return json.load(f)


def write_csv(data: Any, path: str, fieldnames: list[str]) -> None:
    with open(path, "w+", newline="") as f:
        writer = csv.DictWriter(
            f, delimiter=",", fieldnames=fieldnames, extrasaction="ignore"
        )
        writer.writeheader()
        if isinstance(data, list):
            writer.writerows(data)
        else:
            writer.writerow(data)


def write_json(data: Any, path: str) -> None:
    with open(path, "w+") as f:
        data_json = json.dumps(data, indent=4)
        f.write(data_json)
