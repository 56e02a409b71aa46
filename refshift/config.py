"""Runtime configuration for refshift - defaults, project file, environment."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from refshift.utils.logging import logger

CONFIG_FILE = ".refshift.json"

DEFAULTS = {
    "transform": {
        "factory": "React.createRef",
        "dialect": "auto",
    },
    "files": {
        "encoding": "utf-8",
        "max_file_size": 2 * 1024 * 1024,
    },
}


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .refshift.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (REFSHIFT_<SECTION>_<KEY>)
    2. <root>/.refshift.json
    3. Built-in defaults

    Unknown keys and values of the wrong type are ignored.
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {}: {}", path, e)

    for section in cfg:
        for key in cfg[section]:
            env_var = f"REFSHIFT_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    if isinstance(cfg[section][key], int):
                        cfg[section][key] = int(value)
                    else:
                        cfg[section][key] = value
                except ValueError as e:
                    logger.warning(
                        "Invalid value for environment variable {}: '{}' - {}", env_var, value, e
                    )

    return cfg
