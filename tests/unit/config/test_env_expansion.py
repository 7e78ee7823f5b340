"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from solid_examples.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_default_used_when_unset(self):
        """Test that the default applies only when the variable is unset."""
        assert expand_env_vars("${LOG_LEVEL:WARNING}") == "WARNING"
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            assert expand_env_vars("${LOG_LEVEL:WARNING}") == "DEBUG"

    def test_empty_default(self):
        assert expand_env_vars("prefix${UNSET_VAR_FOR_TEST:}") == "prefix"

    def test_set_but_empty_variable_wins_over_default(self):
        with patch.dict(os.environ, {"TEST_VAR": ""}):
            assert expand_env_vars("${TEST_VAR:fallback}") == ""

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"
        assert expand_env_vars("${NONEXISTENT_VAR}") == "${NONEXISTENT_VAR}"

    def test_expand_nested_dict_and_list_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "srp": {"output_dir": "$TEST_VAR/out"},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "srp": {"output_dir": "/test/path/out"},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_config_env_vars(config) == config
