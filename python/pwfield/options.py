"""
Option keys and the options mapping handed to the field renderer.
"""

import json
import logging
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from .exceptions import UnknownOptionError

logger = logging.getLogger(__name__)

OptionValue = Union[bool, int, str]

# Keys understood by the password-generator component
FILL_ON_CREATE = "fillOnCreate"
FILL_ON_UPDATE = "fillOnUpdate"
PASSWORD_LENGTH = "passwordLength"
PASSWORD_MIN = "passwordMin"
PASSWORD_MAX = "passwordMax"
PASSWORD_TOTAL_LENGTH = "passwordTotalLength"
PASSWORD_INCREMENT_STEPS = "passwordIncrementSteps"
EXCLUDE_SIMILAR = "excludeSimilar"
EXCLUDE_AMBIGUOUS = "excludeAmbiguous"
SHOW_PASSWORD = "showPassword"
REGENERATE_ON_TOGGLE = "regenerateOnToggle"
PASSWORD_PREFIX = "passwordPrefix"
PASSWORD_SUFFIX = "passwordSuffix"
LOWERCASE_TOGGLED = "lowercaseToggled"
UPPERCASE_TOGGLED = "uppercaseToggled"
NUMBERS_TOGGLED = "numbersToggled"
SYMBOLS_TOGGLED = "symbolsToggled"
HIDE_SHOW_PASSWORD_TOGGLE = "hideShowPasswordToggle"
HIDE_OPTIONS_TOGGLES = "hideOptionsToggles"
HIDE_PASSWORD_LENGTH_INPUT = "hidePasswordLengthInput"
HIDE_COPY_PASSWORD_BUTTON = "hideCopyPasswordButton"
HIDE_REGENERATE_BUTTON = "hideRegenerateButton"

# Key -> expected value type
OPTION_TYPES: Dict[str, type] = {
    FILL_ON_CREATE: bool,
    FILL_ON_UPDATE: bool,
    PASSWORD_LENGTH: int,
    PASSWORD_MIN: int,
    PASSWORD_MAX: int,
    PASSWORD_TOTAL_LENGTH: int,
    PASSWORD_INCREMENT_STEPS: int,
    EXCLUDE_SIMILAR: bool,
    EXCLUDE_AMBIGUOUS: bool,
    SHOW_PASSWORD: bool,
    REGENERATE_ON_TOGGLE: bool,
    PASSWORD_PREFIX: str,
    PASSWORD_SUFFIX: str,
    LOWERCASE_TOGGLED: bool,
    UPPERCASE_TOGGLED: bool,
    NUMBERS_TOGGLED: bool,
    SYMBOLS_TOGGLED: bool,
    HIDE_SHOW_PASSWORD_TOGGLE: bool,
    HIDE_OPTIONS_TOGGLES: bool,
    HIDE_PASSWORD_LENGTH_INPUT: bool,
    HIDE_COPY_PASSWORD_BUTTON: bool,
    HIDE_REGENERATE_BUTTON: bool,
}

OPTION_KEYS = frozenset(OPTION_TYPES)

# Everything set_hide_all_extras() touches
HIDE_EXTRAS_KEYS = (
    HIDE_SHOW_PASSWORD_TOGGLE,
    HIDE_OPTIONS_TOGGLES,
    HIDE_PASSWORD_LENGTH_INPUT,
    HIDE_COPY_PASSWORD_BUTTON,
    HIDE_REGENERATE_BUTTON,
)


def check_option_key(key: str) -> str:
    """
    Make sure a key belongs to the renderer's option set.

    Args:
        key: Option key to check

    Returns:
        The key unchanged

    Raises:
        UnknownOptionError: If the key is not a known option
    """
    if key not in OPTION_KEYS:
        raise UnknownOptionError(f"Unknown field option: {key!r}")
    return key


class FieldOptions:
    """Options accumulated by a field declaration, last write wins."""

    def __init__(self, initial: Optional[Mapping[str, OptionValue]] = None):
        self._values: Dict[str, OptionValue] = {}
        if initial:
            self.merge(initial)

    def set(self, key: str, value: OptionValue) -> None:
        self._values[key] = value

    def merge(self, values: Mapping[str, OptionValue]) -> None:
        """Write several options at once; existing keys are overwritten."""
        for key, value in values.items():
            self._values[key] = value
        logger.debug(f"Options updated: {', '.join(values)}")

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def __getitem__(self, key: str) -> OptionValue:
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldOptions):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FieldOptions({self._values!r})"

    def to_dict(self) -> Dict[str, OptionValue]:
        """Return a copy of the options."""
        return dict(self._values)

    def to_json(self) -> str:
        """Serialize the options for the renderer."""
        return json.dumps(self._values)
