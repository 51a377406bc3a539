"""
Configuration for readme-check runs.
"""

from readme_check.config.environment import EnvironmentVariables
from readme_check.config.manager import ConfigurationManager
from readme_check.config.schema import LogLevel, RunConfig

__all__ = ["EnvironmentVariables", "ConfigurationManager", "LogLevel", "RunConfig"]
