"""
Password generator field declaration.

The field holds the options the browser component uses to generate
passwords and hashes whatever password is submitted back.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from . import options as opt
from .config import FieldDefaults
from .hashing import make_hash
from .options import FieldOptions, OptionValue
from .request import FormRequest

logger = logging.getLogger(__name__)

Hasher = Callable[[str], str]


class PasswordGeneratorField:
    """Fluent builder for a password field with in-browser generation."""

    component = "password-generator"

    def __init__(self, name: str, attribute: Optional[str] = None,
                 hasher: Optional[Hasher] = None):
        """
        Declare a password generator field.

        Args:
            name: Display name of the field
            attribute: Model attribute to fill (derived from name if omitted)
            hasher: One-way hash applied to submitted values
        """
        self.name = name
        self.attribute = attribute or name.strip().lower().replace(" ", "_")
        self.hasher: Hasher = hasher or make_hash
        self._options = FieldOptions()

    @classmethod
    def make(cls, name: str, attribute: Optional[str] = None,
             hasher: Optional[Hasher] = None) -> "PasswordGeneratorField":
        return cls(name, attribute=attribute, hasher=hasher)

    @classmethod
    def from_defaults(cls, name: str, defaults: FieldDefaults,
                      attribute: Optional[str] = None,
                      hasher: Optional[Hasher] = None) -> "PasswordGeneratorField":
        """
        Declare a field with option overrides loaded from configuration.

        Args:
            name: Display name of the field
            defaults: Loaded field defaults
            attribute: Model attribute to fill
            hasher: Explicit hasher; otherwise one built from the defaults

        Returns:
            Configured field
        """
        if hasher is None:
            hasher = defaults.build_hasher().make
        field = cls(name, attribute=attribute, hasher=hasher)
        return field.with_meta(defaults.options)

    @property
    def options(self) -> FieldOptions:
        return self._options

    def with_meta(self, meta: Mapping[str, OptionValue]) -> "PasswordGeneratorField":
        """Merge options into the field and return it for chaining."""
        self._options.merge(meta)
        return self

    def set_fill_on_create(self, enabled: bool = True) -> "PasswordGeneratorField":
        """Fill the input with a generated password when creating a resource."""
        return self.with_meta({opt.FILL_ON_CREATE: enabled})

    def set_fill_on_update(self, enabled: bool = True) -> "PasswordGeneratorField":
        """Fill the input with a generated password when updating a resource."""
        return self.with_meta({opt.FILL_ON_UPDATE: enabled})

    def set_length(self, length: int = 16) -> "PasswordGeneratorField":
        return self.with_meta({opt.PASSWORD_LENGTH: length})

    def set_min_length(self, min_length: int = 8) -> "PasswordGeneratorField":
        return self.with_meta({opt.PASSWORD_MIN: min_length})

    def set_max_length(self, max_length: int = 128) -> "PasswordGeneratorField":
        return self.with_meta({opt.PASSWORD_MAX: max_length})

    def set_total_length(self, length: int = 24) -> "PasswordGeneratorField":
        """Total generated length, prefix and suffix included."""
        return self.with_meta({opt.PASSWORD_TOTAL_LENGTH: length})

    def set_length_increment_steps(self, steps: int = 4) -> "PasswordGeneratorField":
        return self.with_meta({opt.PASSWORD_INCREMENT_STEPS: steps})

    def set_exclude_similar(self, exclude: bool = True) -> "PasswordGeneratorField":
        """Leave look-alike characters (i, l, 1, L, o, 0, O) out of the charlist."""
        return self.with_meta({opt.EXCLUDE_SIMILAR: exclude})

    def set_include_similar(self, include: bool = True) -> "PasswordGeneratorField":
        return self.set_exclude_similar(not include)

    def set_exclude_ambiguous(self, exclude: bool = True) -> "PasswordGeneratorField":
        """Leave ambiguous symbols ({ } [ ] ( ) / \\ ' " ` ~ , ; : . < >) out."""
        return self.with_meta({opt.EXCLUDE_AMBIGUOUS: exclude})

    def set_include_ambiguous(self, include: bool = True) -> "PasswordGeneratorField":
        return self.set_exclude_ambiguous(not include)

    def set_show_password(self, show: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.SHOW_PASSWORD: show})

    def set_hide_password(self, hide: bool = True) -> "PasswordGeneratorField":
        return self.set_show_password(not hide)

    def set_regenerate_on_toggle(self, enabled: bool = True) -> "PasswordGeneratorField":
        """Regenerate the password whenever a character option is toggled."""
        return self.with_meta({opt.REGENERATE_ON_TOGGLE: enabled})

    def set_prefix(self, prefix: str = "") -> "PasswordGeneratorField":
        return self.with_meta({opt.PASSWORD_PREFIX: prefix})

    def set_suffix(self, suffix: str = "") -> "PasswordGeneratorField":
        return self.with_meta({opt.PASSWORD_SUFFIX: suffix})

    def set_postfix(self, postfix: str = "") -> "PasswordGeneratorField":
        return self.set_suffix(postfix)

    def set_lowercase(self, enabled: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.LOWERCASE_TOGGLED: enabled})

    def set_uppercase(self, enabled: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.UPPERCASE_TOGGLED: enabled})

    def set_numbers(self, enabled: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.NUMBERS_TOGGLED: enabled})

    def set_symbols(self, enabled: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.SYMBOLS_TOGGLED: enabled})

    def set_hide_show_password_toggle(self, hide: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.HIDE_SHOW_PASSWORD_TOGGLE: hide})

    def set_hide_options_toggles(self, hide: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.HIDE_OPTIONS_TOGGLES: hide})

    def set_hide_length_input(self, hide: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.HIDE_PASSWORD_LENGTH_INPUT: hide})

    def set_hide_copy_password_button(self, hide: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.HIDE_COPY_PASSWORD_BUTTON: hide})

    def set_hide_regenerate_button(self, hide: bool = True) -> "PasswordGeneratorField":
        return self.with_meta({opt.HIDE_REGENERATE_BUTTON: hide})

    def set_hide_all_extras(self, hide: bool = True) -> "PasswordGeneratorField":
        """Hide every extra control around the input in one call."""
        return self.with_meta({key: hide for key in opt.HIDE_EXTRAS_KEYS})

    def fill_attribute_from_request(self, request: FormRequest, request_attribute: str,
                                    model: Any, attribute: str) -> None:
        """
        Hydrate a model attribute from the submitted form.

        The model is only touched when the key was submitted; an absent key
        keeps whatever credential the model already holds.

        Args:
            request: Submitted form data
            request_attribute: Key to read from the submission
            model: Object receiving the hashed value
            attribute: Attribute name on the model
        """
        if not request.has(request_attribute):
            logger.debug(f"'{request_attribute}' not submitted, keeping stored value")
            return

        setattr(model, attribute, self.hasher(request.get(request_attribute)))
        logger.debug(f"Filled '{attribute}' from submitted '{request_attribute}'")

    def fill(self, request: FormRequest, model: Any) -> None:
        """Fill the field's own attribute from the matching request key."""
        self.fill_attribute_from_request(request, self.attribute, model, self.attribute)

    def json_serialize(self) -> Dict[str, Any]:
        """
        Build the payload handed to the renderer.

        Returns:
            Component, attribute and name merged with the field options
        """
        payload: Dict[str, Any] = {
            "component": self.component,
            "attribute": self.attribute,
            "name": self.name,
        }
        payload.update(self._options.to_dict())
        return payload

    def __repr__(self) -> str:
        return f"PasswordGeneratorField(name={self.name!r}, attribute={self.attribute!r})"
