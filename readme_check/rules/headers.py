"""
Header presence rule.

Counts line-anchored, case-sensitive occurrences of each required heading.
Every header is evaluated; a missing header never hides the others.
"""

import logging
import re
from typing import Iterable, List

from readme_check.rules.constants import REQUIRED_HEADERS, RequiredHeader
from readme_check.report import ValidationIssue


logger = logging.getLogger(__name__)


def count_header(text: str, header: RequiredHeader) -> int:
    """Count lines of ``text`` starting with the header's markdown heading."""
    pattern = re.compile(r"^" + re.escape(header.markdown), re.MULTILINE)
    return len(pattern.findall(text))


def check_headers(
    text: str,
    headers: Iterable[RequiredHeader] = REQUIRED_HEADERS,
) -> List[ValidationIssue]:
    """Check that every required header appears at least its minimum count.

    Args:
        text: README contents.
        headers: Required headers to check.

    Returns:
        One issue per header: error when missing, info when present.
    """
    issues: List[ValidationIssue] = []

    for header in headers:
        found = count_header(text, header)
        if found < header.min_count:
            message = (
                f"README.md does not contain required header '{header.markdown}' "
                f"at least {header.min_count} times (found {found})"
            )
            logger.warning(message)
            issues.append(ValidationIssue(
                level="error",
                subject=header.markdown,
                message=message,
                suggestion=f"Add a '{header.markdown}' section.",
            ))
        else:
            message = (
                f"README.md contains required header '{header.markdown}' "
                f"at least {header.min_count} times"
            )
            logger.info(message)
            issues.append(ValidationIssue(
                level="info",
                subject=header.markdown,
                message=message,
            ))

    return issues
