"""
tests/test_config.py — Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from config import Settings, get_settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
        monkeypatch.delenv("PASSWORD_CREATE_PATTERN", raising=False)
        settings = Settings(_env_file=None)
        assert settings.BCRYPT_ROUNDS == 10
        assert settings.PASSWORD_CREATE_PATTERN is True
        assert settings.DATE_FORMAT == "%d-%m-%Y"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "6")
        monkeypatch.setenv("PASSWORD_CREATE_PATTERN", "false")
        settings = Settings(_env_file=None)
        assert settings.BCRYPT_ROUNDS == 6
        assert settings.PASSWORD_CREATE_PATTERN is False

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_rounds_out_of_range(self, rounds):
        with pytest.raises(ValidationError):
            Settings(BCRYPT_ROUNDS=rounds, _env_file=None)

    def test_cached(self):
        assert get_settings() is get_settings()
