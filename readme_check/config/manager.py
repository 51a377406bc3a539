"""
Configuration Manager for readme-check.

Loads and merges configuration from multiple sources:
- System defaults
- Project configuration (./.readme-check/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from readme_check.config.environment import EnvironmentVariables
from readme_check.config.schema import RunConfig
from readme_check.errors import ConfigurationError


logger = logging.getLogger(__name__)

_COERCE = {"document_path": str, "user_agent": str, "log_level": str,
           "max_workers": int, "table_search_window": int, "request_timeout": float}


class ConfigurationManager:
    """Builds a validated RunConfig from every configuration source."""

    def __init__(self, project_dir: Optional[Path] = None):
        base = project_dir or Path.cwd()
        self.project_config_path = base / ".readme-check" / "config.yaml"

    def load_configuration(
        self,
        config_file: Optional[str] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
    ) -> RunConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides, None values ignored)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.readme-check/config.yaml)
        5. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides

        Returns:
            RunConfig: Merged and validated configuration

        Raises:
            ConfigurationError: If a file is invalid or a value fails validation
        """
        config_dict = asdict(RunConfig())

        if self.project_config_path.exists():
            config_dict.update(self._load_yaml_file(self.project_config_path))

        if config_file:
            config_dict.update(self._load_yaml_file(Path(config_file)))

        config_dict.update(EnvironmentVariables.read())

        if cli_overrides:
            config_dict.update({k: v for k, v in cli_overrides.items() if v is not None})

        config = self._dict_to_config(config_dict)

        errors = config.validate()
        if errors:
            raise ConfigurationError(
                "Invalid configuration:\n" + "\n".join(f"  - {e}" for e in errors),
                errors=errors,
            )

        logger.debug(f"Configuration loaded: {asdict(config)}")
        return config

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.

        Raises:
            ConfigurationError: If a referenced variable without default is not set
        """
        pattern = r'\$\{([^}]+)\}'

        def replace_var(match):
            var_expr = match.group(1)
            if ':-' in var_expr:
                var_name, default_value = var_expr.split(':-', 1)
                return os.environ.get(var_name, default_value)
            if var_expr not in os.environ:
                raise ConfigurationError(f"Required environment variable '{var_expr}' is not set")
            return os.environ[var_expr]

        return {
            key: re.sub(pattern, replace_var, value) if isinstance(value, str) else value
            for key, value in config_dict.items()
        }

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load a YAML configuration file into a flat dictionary."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            location = ""
            mark = getattr(e, 'problem_mark', None)
            if mark is not None:
                location = f" (line {mark.line + 1}, column {mark.column + 1})"
            raise ConfigurationError(f"YAML parsing error in {file_path}{location}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration file {file_path}: {e}")

        if not isinstance(content, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

        unknown = sorted(set(content) - set(_COERCE))
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys in {file_path}: {', '.join(unknown)}",
                errors=[f"Unknown key '{k}'" for k in unknown],
            )

        logger.debug(f"Loaded configuration file {file_path}")
        return self.substitute_environment_variables(content)

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> RunConfig:
        """Convert configuration dictionary to RunConfig, coercing value types."""
        values: Dict[str, Any] = {}
        errors: List[str] = []

        for key, value in config_dict.items():
            convert = _COERCE[key]
            if value is None:
                errors.append(f"{key} must be set")
                continue
            if isinstance(value, bool) and convert is not str:
                errors.append(f"{key} must be a number, got {value!r}")
                continue
            try:
                values[key] = convert(value)
            except (TypeError, ValueError):
                errors.append(f"{key} must be of type {convert.__name__}, got {value!r}")

        if errors:
            raise ConfigurationError(
                "Invalid configuration:\n" + "\n".join(f"  - {e}" for e in errors),
                errors=errors,
            )

        if "log_level" in values:
            values["log_level"] = values["log_level"].lower()

        return RunConfig(**values)
