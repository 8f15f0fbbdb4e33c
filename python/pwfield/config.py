"""
Site-wide defaults for password generator fields.

A config file is plain JSON:

    {
        "options": {"passwordLength": 20, "symbolsToggled": false},
        "hash_iterations": 200000
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from .exceptions import ConfigError
from .hashing import PasswordHasher, get_password_hasher
from .options import OPTION_TYPES, OptionValue, check_option_key

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PWFIELD_CONFIG"


@dataclass
class FieldDefaults:
    # Option overrides applied to every field built from these defaults.
    options: Dict[str, OptionValue] = field(default_factory=dict)

    # None means the hasher's own default.
    hash_iterations: Optional[int] = None

    def build_hasher(self) -> PasswordHasher:
        return get_password_hasher(iterations=self.hash_iterations)


def _check_options(raw: object) -> Dict[str, OptionValue]:
    if not isinstance(raw, dict):
        raise ConfigError("'options' must be a JSON object")

    checked: Dict[str, OptionValue] = {}
    for key, value in raw.items():
        check_option_key(key)
        expected = OPTION_TYPES[key]
        # bool is an int subclass; keep the two apart
        if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
            raise ConfigError(
                f"Option '{key}' expects {expected.__name__}, got {type(value).__name__}"
            )
        checked[key] = value
    return checked


def load_defaults(path: Optional[Union[str, Path]] = None) -> FieldDefaults:
    """
    Load field defaults from a JSON file.

    Args:
        path: Config file path; falls back to $PWFIELD_CONFIG

    Returns:
        FieldDefaults (empty when no file is configured)

    Raises:
        ConfigError: If the file cannot be read or is invalid
        UnknownOptionError: If the file names an unknown option
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        logger.debug("No config file configured, using built-in defaults")
        return FieldDefaults()

    config_path = Path(path)
    try:
        with open(config_path, "r") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object")

    iterations = data.get("hash_iterations")
    if iterations is not None and (isinstance(iterations, bool) or not isinstance(iterations, int)
                                   or not 1 <= iterations <= PasswordHasher.MAX_ITERATIONS):
        raise ConfigError(
            f"'hash_iterations' must be an integer from 1 to {PasswordHasher.MAX_ITERATIONS}"
        )

    defaults = FieldDefaults(
        options=_check_options(data.get("options", {})),
        hash_iterations=iterations,
    )
    logger.debug(f"Loaded {len(defaults.options)} option defaults from {config_path}")
    return defaults
