"""
README document loading.
"""

import logging
import os

from readme_check.errors import DocumentLoadError


logger = logging.getLogger(__name__)


def load_document(path: str) -> str:
    """Read a README as UTF-8 text.

    Args:
        path: Path of the README file.

    Returns:
        The document contents.

    Raises:
        DocumentLoadError: If the file is missing, not a file, unreadable,
            or not valid UTF-8.
    """
    if not path:
        raise DocumentLoadError("No document path configured", path=path)

    if not os.path.exists(path):
        raise DocumentLoadError(f"File not found: {path}", path=path)

    if not os.path.isfile(path):
        raise DocumentLoadError(f"Path is not a file: {path}", path=path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise DocumentLoadError(f"File is not valid UTF-8: {path} ({e})", path=path) from e
    except OSError as e:
        raise DocumentLoadError(f"Cannot read file: {e}", path=path) from e

    logger.debug(f"Loaded {path} ({len(text)} characters)")
    return text
