"""
Environment variable integration for readme-check.

Centralizes the environment variable names read by the configuration
manager, with documentation for each.
"""

import os
from typing import Dict, List


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    README_PATH = "README_PATH"
    MAX_WORKERS = "README_CHECK_MAX_WORKERS"
    REQUEST_TIMEOUT = "README_CHECK_REQUEST_TIMEOUT"
    TABLE_WINDOW = "README_CHECK_TABLE_WINDOW"
    USER_AGENT = "README_CHECK_USER_AGENT"
    LOG_LEVEL = "README_CHECK_LOG_LEVEL"

    # Environment variable -> config key
    MAPPING = {
        README_PATH: "document_path",
        MAX_WORKERS: "max_workers",
        REQUEST_TIMEOUT: "request_timeout",
        TABLE_WINDOW: "table_search_window",
        USER_AGENT: "user_agent",
        LOG_LEVEL: "log_level",
    }

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return list(cls.MAPPING)

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.README_PATH: "Path of the README document to validate",
            cls.MAX_WORKERS: "Maximum number of URLs verified concurrently (default: 8)",
            cls.REQUEST_TIMEOUT: "Per-request timeout in seconds for link verification (default: 10)",
            cls.TABLE_WINDOW: "Lines after a section heading searched for its table (default: 50)",
            cls.USER_AGENT: "User-Agent header sent when verifying links",
            cls.LOG_LEVEL: "Logging level (debug, info, warning, error)",
        }

    @classmethod
    def read(cls) -> Dict[str, str]:
        """Return the raw values of every set variable, keyed by config key."""
        values = {}
        for var, key in cls.MAPPING.items():
            if var in os.environ:
                values[key] = os.environ[var]
        return values
