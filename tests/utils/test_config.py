"""Tests for utils.config module."""

import pytest
import yaml

from propatlas import refute
from propatlas.utils.config import Config, DEFAULTS, get_config, reset_config


@pytest.fixture
def config_file(tmp_path):
    def write(data):
        path = tmp_path / "config.yaml"
        with open(path, 'w') as f:
            yaml.dump(data, f)
        return str(path)
    return write


class TestConfig:
    """Test Config class."""

    def test_defaults_fill_missing_keys(self, config_file):
        config = Config(config_file({"prover": {"timeout": 5}}))

        assert config.get("prover.timeout") == 5
        assert config.get("prover.strict") is False
        assert config.get("cnf.max_variables") == 20

    def test_defaults_not_shared(self, config_file):
        config = Config(config_file({}))
        config.update({"prover": {"timeout": 1}})

        assert DEFAULTS["prover"]["timeout"] == 100

    def test_environment_variable(self, config_file, monkeypatch):
        monkeypatch.setenv("PROPATLAS_TIMEOUT", "2.5")
        config = Config(config_file({"prover": {"timeout": "${PROPATLAS_TIMEOUT:100}"}}))

        assert config.get("prover.timeout") == 2.5

    def test_environment_default(self, config_file, monkeypatch):
        monkeypatch.delenv("PROPATLAS_STRICT", raising=False)
        config = Config(config_file({"prover": {"strict": "${PROPATLAS_STRICT:true}"}}))

        assert config.get("prover.strict") is True

    def test_get_missing_key(self, config_file):
        config = Config(config_file({}))

        assert config.get("prover.unknown") is None
        assert config.get("prover.unknown", 7) == 7
        assert config["cnf.max_variables"] == 20

    def test_update_merges(self, config_file):
        config = Config(config_file({}))
        config.update({"prover": {"strict": True}})

        assert config.get("prover.strict") is True
        assert config.get("prover.timeout") == 100

    def test_empty_environment_variable_uses_default(self, config_file, monkeypatch):
        """Test that a variable set to an empty string counts as unset."""
        monkeypatch.setenv("PROPATLAS_TIMEOUT", "")
        config = Config(config_file({"prover": {"timeout": "${PROPATLAS_TIMEOUT:100}"}}))

        assert config.get("prover.timeout") == 100

    def test_get_number(self, config_file):
        config = Config(config_file({"prover": {"timeout": "7", "max_clauses": None}}))

        assert config.get_number("prover.timeout") == 7.0
        assert config.get_number("prover.max_clauses", kind=int) is None
        assert config.get_number("prover.missing", 3) == 3
        assert config.get_number("cnf.max_variables", kind=int) == 20

    def test_get_number_rejects_text(self, config_file, monkeypatch):
        monkeypatch.setenv("PROPATLAS_TIMEOUT", "ten")
        config = Config(config_file({"prover": {"timeout": "${PROPATLAS_TIMEOUT:100}"}}))

        with pytest.raises(ValueError, match="prover.timeout"):
            config.get_number("prover.timeout")

    def test_get_number_rejects_booleans(self, config_file):
        config = Config(config_file({"prover": {"timeout": True}}))

        with pytest.raises(ValueError):
            config.get_number("prover.timeout")

    def test_refute_rejects_invalid_timeout(self, config_file, monkeypatch):
        """Test that a bad timeout fails before the search instead of inside it."""
        monkeypatch.setenv("PROPATLAS_TIMEOUT", "ten")
        config = Config(config_file({"prover": {"timeout": "${PROPATLAS_TIMEOUT:100}"}}))

        with pytest.raises(ValueError):
            refute("A&-A", config=config)

    def test_refute_uses_default_for_empty_timeout(self, config_file, monkeypatch):
        monkeypatch.setenv("PROPATLAS_TIMEOUT", "")
        config = Config(config_file({"prover": {"timeout": None}}))

        assert refute("A&-A", config=config).is_complete

    def test_shipped_default_file(self, monkeypatch):
        """Test that configs/default.yaml resolves to the built-in values."""
        monkeypatch.delenv("PROPATLAS_TIMEOUT", raising=False)
        monkeypatch.delenv("PROPATLAS_STRICT", raising=False)
        config = Config()

        assert config.get("prover.timeout") == 100
        assert config.get("prover.strict") is False
        assert config.get("prover.max_clauses") is None


class TestGlobalConfig:

    def test_get_config_is_cached(self):
        reset_config()
        try:
            assert get_config() is get_config()
        finally:
            reset_config()
