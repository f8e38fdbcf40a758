"""Configuration loading for the dashboard."""

import json
from pathlib import Path

import appdirs

from .state import VARIANTS

SOLARDASH_CONFIG_NAME = "solardash.json"
SOLARDASH_CONFIG_DIR = appdirs.user_config_dir("solardash")
SOLARDASH_CONFIG_PATH = Path(SOLARDASH_CONFIG_DIR, SOLARDASH_CONFIG_NAME)

DEFAULT_CONFIG = {
    "base_url": "https://7yakqpu4vl.execute-api.ap-south-1.amazonaws.com/alpha",
    "consumption_start": 1692316800,
    "consumption_end": 1692403200,
    "consumption_variant": "multi",
    "timeout": None,
    "host": "127.0.0.1",
    "port": 8050,
}


def find_config(path=None):
    """Locate the config file.

    Args:
        path: Explicit path from the command line, if any

    Returns:
        Path: First existing candidate, or None
    """
    if path:
        return Path(path)
    for candidate in (Path(SOLARDASH_CONFIG_NAME), SOLARDASH_CONFIG_PATH):
        if candidate.exists():
            return candidate
    return None


def load_config(path=None, overrides=None):
    """Load configuration from solardash.json merged over the defaults.

    Args:
        path: Optional explicit config path; it must exist
        overrides: Optional dict of values that win over the file

    Returns:
        dict: Complete configuration
    """
    config = dict(DEFAULT_CONFIG)

    config_path = find_config(path)
    if config_path is not None:
        with open(config_path) as fd:
            file_config = json.load(fd)
        config.update({key: value for key, value in file_config.items() if key in DEFAULT_CONFIG})

    if overrides:
        config.update({key: value for key, value in overrides.items() if value is not None})

    if config["consumption_variant"] not in VARIANTS:
        raise ValueError(f"consumption_variant must be one of {VARIANTS}, got {config['consumption_variant']!r}")
    return config
