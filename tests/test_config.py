"""Tests for application configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from scum_bot.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_default_database_url(self):
        """Default database URL should be a local SQLite file."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.database_url == "sqlite:///scum_bot.db"

    def test_default_command_prefix(self):
        """Default shorthand prefix should be '!'."""
        with patch.dict(os.environ, {}, clear=True):
            assert Settings(_env_file=None).command_prefix == "!"

    def test_default_bot_id_unset(self):
        """Bot ID should be unknown until configured."""
        with patch.dict(os.environ, {}, clear=True):
            assert Settings(_env_file=None).bot_id is None

    def test_default_spelling(self):
        """Spelling correction should use the English dictionary and distance 2."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.spelling_dictionary_path is None
            assert settings.spelling_use_english_dictionary is True
            assert settings.spelling_max_edit_distance == 2

    def test_default_logging(self):
        """Debug should be off and log level INFO."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.debug is False
            assert settings.log_level == "INFO"


class TestSettingsFromEnvironment:
    """Tests for environment variable overrides."""

    def test_prefix_from_env(self):
        """COMMAND_PREFIX should override the prefix."""
        with patch.dict(os.environ, {"COMMAND_PREFIX": "?"}):
            assert Settings(_env_file=None).command_prefix == "?"

    def test_env_is_case_insensitive(self):
        """Lowercase variable names should work too."""
        with patch.dict(os.environ, {"bot_id": "1234"}):
            assert Settings(_env_file=None).bot_id == "1234"

    def test_boolean_from_env(self):
        """Booleans should parse from strings."""
        with patch.dict(os.environ, {"SPELLING_USE_ENGLISH_DICTIONARY": "false"}):
            assert Settings(_env_file=None).spelling_use_english_dictionary is False

    def test_invalid_log_level(self):
        """Unknown log levels should be rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "CHATTY"}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance."""
        assert get_settings() is get_settings()
