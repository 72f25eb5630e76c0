"""
Configuration loader for YAML-based game configurations.

Example file::

    num_mafia: 2
    additional_roles: [Doctor, Lawyer, Grandma with a Shotgun]
    player_names: [Alice, Bob, Carol, Dave, Erin, Frank, Grace]
    use_judge_announcements: false
"""

import yaml
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

from .game_config import GameConfig

# Keys whose YAML value must be a list of strings
_NAME_LISTS = ("additional_roles", "player_names")


def _check_value(key: str, value: Any, config_path: str) -> None:
    if key in _NAME_LISTS and value is not None:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"{key} must be a list of names in {config_path}")
    elif key in ("num_mafia", "total_players", "max_rounds") and not isinstance(value, int):
        raise ValueError(f"{key} must be an integer in {config_path}, got {value!r}")


def config_from_dict(values: Dict[str, Any], source: str = "<dict>") -> GameConfig:
    """
    Build a GameConfig over the defaults. Unknown keys are reported and skipped.
    When player_names is given, total_players follows its length.
    """
    config = GameConfig()
    known = {f.name for f in fields(GameConfig)}

    for key, value in values.items():
        if key not in known:
            print(f"Warning: Unknown config key '{key}' in {source}")
            continue
        if key == "additional_roles" and value is None:
            # A blank key means no additional roles
            value = []
        _check_value(key, value, source)
        setattr(config, key, value)

    if config.player_names and len(config.player_names) != config.total_players:
        config.total_players = len(config.player_names)
        print(f"Warning: total_players set to {config.total_players} to match player_names")

    return config


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the file is not a mapping or a value has the wrong type
        yaml.YAMLError: If the YAML file is invalid
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        values = yaml.safe_load(f) or {}

    if not isinstance(values, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return config_from_dict(values, source=config_path)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """A fresh GameConfig from the YAML file, or the defaults if no path is given."""
    if config_path is None:
        return GameConfig()
    return load_config_from_yaml(config_path)
