"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.library_api.runtime.config.config_data import ConfigData
from src.library_api.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            text = "Server running at http://${HOST}:${PORT}/books"
            result = substitute_env_vars(text)
            assert result == "Server running at http://localhost:8080/books"

    def test_substitute_env_var_with_default(self):
        """Test substitution with default value when env var is not set."""
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_default_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_substitute_env_var_with_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_substitute_required_env_var_missing(self):
        """Test substitution fails when required env var is missing."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_substitute_required_env_var_custom_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="database url is required"):
                substitute_env_vars("${DB_URL:?database url is required}")

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("plain: value") == "plain: value"


class TestApplyEnvironmentOverrides:
    def test_prefixed_variables_are_promoted(self):
        with patch.dict(
            os.environ, {"TEST_DATABASE_URL": "sqlite:///./test.db"}, clear=True
        ):
            applied = apply_environment_overrides("test")

            assert applied == ["DATABASE_URL"]
            assert os.environ["DATABASE_URL"] == "sqlite:///./test.db"

    def test_other_environments_are_ignored(self):
        with patch.dict(
            os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://db/x"}, clear=True
        ):
            assert apply_environment_overrides("test") == []
            assert "DATABASE_URL" not in os.environ


class TestLoadTemplatedYaml:
    """Test cases for load_templated_yaml function."""

    def _write(self, tmp_path: Path, content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    def test_load_full_config(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            """
config:
  app:
    environment: test
    port: ${APP_PORT:-9000}
  database:
    url: "${DATABASE_URL:-sqlite:///:memory:}"
  pagination:
    default_size: 5
    max_size: 50
""",
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path, env_mode="test")

        assert isinstance(config, ConfigData)
        assert config.app.environment == "test"
        assert config.app.port == 9000
        assert config.database.is_sqlite is True
        assert config.pagination.default_size == 5
        assert config.pagination.max_size == 50

    def test_missing_sections_use_defaults(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  app:\n    title: Shelf\n")

        config = load_templated_yaml(path)

        assert config.app.title == "Shelf"
        assert config.pagination.default_size == 10
        assert config.pagination.max_size == 100

    def test_environment_override_applied(self, tmp_path: Path):
        path = self._write(
            tmp_path, "config:\n  database:\n    url: ${DATABASE_URL:-sqlite:///x.db}\n"
        )

        with patch.dict(
            os.environ, {"TEST_DATABASE_URL": "sqlite:///override.db"}, clear=True
        ):
            config = load_templated_yaml(path, env_mode="test")

        assert config.database.url == "sqlite:///override.db"

    def test_invalid_yaml(self, tmp_path: Path):
        path = self._write(tmp_path, "config: [unclosed")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_empty_file(self, tmp_path: Path):
        path = self._write(tmp_path, "")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path)

    def test_invalid_values(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            "config:\n  pagination:\n    default_size: 500\n    max_size: 100\n",
        )

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")

    def test_project_config_loads(self):
        """The shipped config.yaml is valid with no variables set."""
        project_root = Path(__file__).resolve().parents[5]

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(project_root / "config.yaml")

        assert config.app.environment == "development"
        assert config.logging.file is None
        assert config.pagination.max_size == 100

    def test_project_config_accepts_memory_database_url(self):
        project_root = Path(__file__).resolve().parents[5]

        with patch.dict(os.environ, {"DATABASE_URL": "sqlite:///:memory:"}, clear=True):
            config = load_templated_yaml(project_root / "config.yaml")

        assert config.database.url == "sqlite:///:memory:"
