import os
from typing import Optional

from dotenv import load_dotenv
from distributor.errors import MissingEnvironmentVariableException

load_dotenv()


def env_var(accessor: str, default: Optional[str] = None) -> str:
    """
    Attempt to fetch an environment variable, fall back to `default`
    and throw an error if neither is set
    """
    var = os.environ.get(accessor, default)
    if not var:
        raise MissingEnvironmentVariableException(accessor)
    return var


# root folder for distribution outputs, one sub folder per distribution window
REPORTS_DIR = env_var("REPORTS_DIR", "reports")
