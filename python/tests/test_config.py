"""
Unit tests for field defaults configuration.
"""

import json

import pytest

from pwfield import options as opt
from pwfield.config import CONFIG_ENV_VAR, FieldDefaults, load_defaults
from pwfield.exceptions import ConfigError, UnknownOptionError
from pwfield.field import PasswordGeneratorField


class TestLoadDefaults:
    """Test loading defaults from JSON."""

    @pytest.fixture
    def config_file(self, tmp_path):
        """Write a config file and return its path."""
        def write(data):
            path = tmp_path / "pwfield.json"
            path.write_text(json.dumps(data) if not isinstance(data, str) else data)
            return path
        return write

    def test_no_config(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        defaults = load_defaults()

        assert defaults.options == {}
        assert defaults.hash_iterations is None

    def test_load_file(self, config_file):
        path = config_file({
            "options": {"passwordLength": 20, "symbolsToggled": False},
            "hash_iterations": 5000,
        })

        defaults = load_defaults(path)

        assert defaults.options == {"passwordLength": 20, "symbolsToggled": False}
        assert defaults.hash_iterations == 5000
        assert defaults.build_hasher().iterations == 5000

    def test_env_var(self, config_file, monkeypatch):
        path = config_file({"options": {"passwordPrefix": "tmp-"}})
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_defaults().options == {"passwordPrefix": "tmp-"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_defaults(tmp_path / "nope.json")

    def test_invalid_json(self, config_file):
        with pytest.raises(ConfigError):
            load_defaults(config_file("{not json"))

    def test_not_an_object(self, config_file):
        with pytest.raises(ConfigError):
            load_defaults(config_file([1, 2, 3]))

    def test_unknown_option(self, config_file):
        with pytest.raises(UnknownOptionError):
            load_defaults(config_file({"options": {"passwordColour": "red"}}))

    @pytest.mark.parametrize("key,value", [
        ("passwordLength", "16"),
        ("passwordLength", True),
        ("symbolsToggled", 1),
        ("passwordPrefix", 5),
    ])
    def test_wrong_option_type(self, config_file, key, value):
        with pytest.raises(ConfigError, match=key):
            load_defaults(config_file({"options": {key: value}}))

    @pytest.mark.parametrize("iterations", [0, -5, "many", True, 2 ** 31])
    def test_bad_iterations(self, config_file, iterations):
        with pytest.raises(ConfigError):
            load_defaults(config_file({"hash_iterations": iterations}))


class TestFieldFromDefaults:
    """Test building fields from defaults."""

    def test_applies_options(self):
        defaults = FieldDefaults(options={opt.PASSWORD_LENGTH: 32, opt.NUMBERS_TOGGLED: False})
        field = PasswordGeneratorField.from_defaults("Password", defaults)

        assert field.options == {opt.PASSWORD_LENGTH: 32, opt.NUMBERS_TOGGLED: False}

    def test_setters_override_defaults(self):
        defaults = FieldDefaults(options={opt.PASSWORD_LENGTH: 32})
        field = PasswordGeneratorField.from_defaults("Password", defaults).set_length(12)

        assert field.options[opt.PASSWORD_LENGTH] == 12

    def test_defaults_not_shared(self):
        defaults = FieldDefaults(options={opt.PASSWORD_LENGTH: 32})
        PasswordGeneratorField.from_defaults("Password", defaults).set_length(12)

        assert defaults.options[opt.PASSWORD_LENGTH] == 32

    def test_hasher_uses_configured_iterations(self):
        from types import SimpleNamespace
        from pwfield.request import MappingRequest

        field = PasswordGeneratorField.from_defaults("Password", FieldDefaults(hash_iterations=1234))
        model = SimpleNamespace()
        field.fill(MappingRequest({"password": "abc"}), model)

        assert model.password.split("$")[1] == "1234"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
