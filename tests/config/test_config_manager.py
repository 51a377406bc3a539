"""
Unit tests for Configuration Manager.

Tests configuration loading, precedence, validation, and environment
variable integration.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from readme_check.config.manager import ConfigurationManager
from readme_check.config.schema import LogLevel, RunConfig
from readme_check.errors import ConfigurationError


class TestConfigurationManager:
    """Test suite for ConfigurationManager."""

    def setup_method(self):
        self.config_manager = ConfigurationManager()

    def test_load_default_configuration(self):
        config = self.config_manager.load_configuration()

        assert config.document_path == "README.md"
        assert config.max_workers == 8
        assert config.request_timeout == 10.0
        assert config.table_search_window == 50
        assert config.log_level == LogLevel.INFO.value
        assert config.user_agent.startswith("readme-check/")

    def test_load_configuration_with_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "document_path: docs/README.md\n"
            "max_workers: 3\n"
            "request_timeout: 2.5\n"
            "log_level: debug\n"
        )

        config = self.config_manager.load_configuration(config_file=str(config_file))

        assert config.document_path == "docs/README.md"
        assert config.max_workers == 3
        assert config.request_timeout == 2.5
        assert config.log_level == "debug"

    def test_project_configuration_is_picked_up(self, tmp_path):
        project_config = tmp_path / ".readme-check" / "config.yaml"
        project_config.parent.mkdir()
        project_config.write_text("table_search_window: 5\n")

        config = ConfigurationManager(project_dir=tmp_path).load_configuration()

        assert config.table_search_window == 5

    def test_explicit_file_overrides_project_file(self, tmp_path):
        project_config = tmp_path / ".readme-check" / "config.yaml"
        project_config.parent.mkdir()
        project_config.write_text("max_workers: 2\n")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("max_workers: 6\n")

        config = ConfigurationManager(project_dir=tmp_path).load_configuration(config_file=str(explicit))

        assert config.max_workers == 6

    @patch.dict(os.environ, {
        'README_PATH': 'from-env.md',
        'README_CHECK_MAX_WORKERS': '12',
        'README_CHECK_REQUEST_TIMEOUT': '3',
        'README_CHECK_LOG_LEVEL': 'WARNING',
    })
    def test_environment_overrides_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("document_path: from-yaml.md\nmax_workers: 3\n")

        config = self.config_manager.load_configuration(config_file=str(config_file))

        assert config.document_path == "from-env.md"
        assert config.max_workers == 12
        assert config.request_timeout == 3.0
        assert config.log_level == "warning"

    @patch.dict(os.environ, {'README_PATH': 'from-env.md'})
    def test_cli_overrides_take_precedence(self):
        config = self.config_manager.load_configuration(cli_overrides={
            'document_path': 'from-cli.md',
            'max_workers': None,
        })

        assert config.document_path == "from-cli.md"
        assert config.max_workers == 8

    def test_invalid_values_are_all_reported(self):
        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration(cli_overrides={
                'max_workers': 0,
                'request_timeout': -1,
                'log_level': 'loud',
            })

        assert len(exc_info.value.errors) == 3

    @patch.dict(os.environ, {'README_CHECK_MAX_WORKERS': 'many'})
    def test_non_numeric_environment_value(self):
        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration()

        assert any("max_workers" in e for e in exc_info.value.errors)

    def test_unknown_yaml_key(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("document_path: README.md\nretries: 3\n")

        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration(config_file=str(config_file))

        assert "retries" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("document_path: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration(config_file=str(config_file))

        assert "YAML parsing error" in str(exc_info.value)

    def test_yaml_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- README.md\n")

        with pytest.raises(ConfigurationError):
            self.config_manager.load_configuration(config_file=str(config_file))

    def test_null_value_is_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("document_path:\n")

        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration(config_file=str(config_file))

        assert "document_path must be set" in exc_info.value.errors

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            self.config_manager.load_configuration(config_file=str(tmp_path / "absent.yaml"))

    @patch.dict(os.environ, {'MODULE_DIR': 'modules/vpc'})
    def test_environment_substitution_in_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "document_path: ${MODULE_DIR}/README.md\n"
            "user_agent: ${CUSTOM_AGENT:-docs-bot/1.0}\n"
        )

        config = self.config_manager.load_configuration(config_file=str(config_file))

        assert config.document_path == "modules/vpc/README.md"
        assert config.user_agent == "docs-bot/1.0"

    def test_missing_substitution_variable(self):
        with pytest.raises(ConfigurationError):
            self.config_manager.substitute_environment_variables({'document_path': '${NOT_SET_ANYWHERE}'})


class TestRunConfig:
    def test_defaults_are_valid(self):
        assert RunConfig().validate() == []

    def test_empty_document_path(self):
        assert RunConfig(document_path="").validate() == ["document_path must not be empty"]

    def test_bad_window(self):
        errors = RunConfig(table_search_window=0).validate()
        assert len(errors) == 1
        assert "table_search_window" in errors[0]
