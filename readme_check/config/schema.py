"""
Configuration schema for readme-check.

RunConfig carries everything a validation run needs; it is built by the
ConfigurationManager and passed to the runner explicitly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from readme_check.links.verifier import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from readme_check.rules.constants import DEFAULT_TABLE_SEARCH_WINDOW


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class RunConfig:
    """Settings for one validation run.

    Attributes:
        document_path: Path of the README to validate
        max_workers: Maximum number of URLs verified concurrently
        request_timeout: Per-request timeout in seconds
        table_search_window: Lines after a heading searched for its table
        user_agent: User-Agent header for link verification
        log_level: Logging level (debug, info, warning, error)
    """
    document_path: str = "README.md"
    max_workers: int = DEFAULT_MAX_WORKERS
    request_timeout: float = DEFAULT_TIMEOUT
    table_search_window: int = DEFAULT_TABLE_SEARCH_WINDOW
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = LogLevel.INFO.value

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.document_path:
            errors.append("document_path must not be empty")

        if not isinstance(self.max_workers, int) or self.max_workers < 1:
            errors.append(f"max_workers must be a positive integer, got {self.max_workers!r}")

        if not isinstance(self.request_timeout, (int, float)) or self.request_timeout <= 0:
            errors.append(f"request_timeout must be positive, got {self.request_timeout!r}")

        if not isinstance(self.table_search_window, int) or self.table_search_window < 1:
            errors.append(
                f"table_search_window must be a positive integer, got {self.table_search_window!r}"
            )

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        return errors
