"""Test configuration loading and error handling."""

import os
from unittest.mock import patch

import pytest

from sqlcup.core.config import Config
from sqlcup.core.exceptions import ConfigurationError


def test_defaults_without_environment():
    """Test that Config falls back to built-in defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = Config(_env_file=None)
        assert config.id_column == "id"
        assert config.order_by == ""
        assert config.no_exists_clause is False
        assert config.no_returning_clause is False
        assert config.log_level == "WARNING"
        assert config.exit_codes.success == 0
        assert config.exit_codes.error_bad_argument == 2
        assert config.exit_codes.error_unexpected == 1


def test_config_from_environment():
    """Test that SQLCUP_ variables provide option defaults."""
    env = {
        "SQLCUP_ID_COLUMN": "pk",
        "SQLCUP_ORDER_BY": "name",
        "SQLCUP_NO_RETURNING_CLAUSE": "true",
        "SQLCUP_LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, env, clear=True):
        config = Config(_env_file=None)
        assert config.id_column == "pk"
        assert config.order_by == "name"
        assert config.no_returning_clause is True
        assert config.log_level == "DEBUG"


def test_empty_id_column_raises_configuration_error():
    """Test that an empty id column is reported with its variable name."""
    with patch.dict(os.environ, {"SQLCUP_ID_COLUMN": ""}, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            Config(_env_file=None)

        error = exc_info.value
        assert error.variable_name == "SQLCUP_ID_COLUMN"
        assert "Invalid configuration variable 'SQLCUP_ID_COLUMN'" in str(error)


def test_unknown_log_level_raises_configuration_error():
    """Test that an unknown log level is rejected."""
    with patch.dict(os.environ, {"SQLCUP_LOG_LEVEL": "loud"}, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            Config(_env_file=None)

        assert exc_info.value.variable_name == "SQLCUP_LOG_LEVEL"
