"""Pick up LEAKSCAN_* settings from a .env file."""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

ENV_PREFIX = "LEAKSCAN_"
ENV_FILENAME = ".env"


def find_env_file(start: Optional[Path] = None) -> Optional[Path]:
    """Return the nearest .env in ``start`` (default cwd) or its parents."""
    current = (start or Path.cwd()).resolve()
    for parent in [current] + list(current.parents):
        candidate = parent / ENV_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_env(start: Optional[Path] = None) -> Dict[str, str]:
    """
    Export the LEAKSCAN_* entries of the nearest .env file.

    Variables already present in the environment are left alone, and keys
    without the prefix are ignored so unrelated secrets in the file never
    reach the process environment.

    Returns:
        The variables that were exported
    """
    env_file = find_env_file(start)
    if env_file is None:
        return {}

    exported = {}
    for key, value in dotenv_values(env_file).items():
        if not key.startswith(ENV_PREFIX) or value is None or key in os.environ:
            continue
        os.environ[key] = value
        exported[key] = value
    return exported
