"""
Structural rules for README documents.

Required headers and required tables are declared in ``constants``;
``headers`` and ``tables`` evaluate them against document text.
"""

from readme_check.rules.constants import (
    REQUIRED_HEADERS,
    REQUIRED_TABLES,
    RequiredHeader,
    RequiredTable,
)
from readme_check.rules.headers import check_headers
from readme_check.rules.tables import check_table

__all__ = [
    "REQUIRED_HEADERS",
    "REQUIRED_TABLES",
    "RequiredHeader",
    "RequiredTable",
    "check_headers",
    "check_table",
]
