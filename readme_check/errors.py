"""
readme-check Error Hierarchy

Defines the exceptions raised by the validation engine.

Error Categories:
- Setup Errors: README cannot be read
- Registry Errors: registry response body is not a decodable error envelope
- Configuration Errors: invalid settings, config files, or check names
"""

from typing import List, Optional


class ReadmeCheckError(Exception):
    """Base exception for all readme-check errors."""
    pass


class DocumentLoadError(ReadmeCheckError):
    """Error loading the README document.

    Raised when:
    - The path does not exist or is not a file
    - The file cannot be read
    - The file is not valid UTF-8

    Attributes:
        path: The document path that failed to load
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RegistryResponseError(ReadmeCheckError):
    """Registry response body could not be decoded as an error payload.

    Attributes:
        url: The registry URL that was fetched
        original_error: The underlying decoding error
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.url = url
        self.original_error = original_error


class ConfigurationError(ReadmeCheckError):
    """Invalid configuration.

    Attributes:
        errors: Every problem found, one message per entry
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []
