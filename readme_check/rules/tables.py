"""
Table adjacency and column rules.

A designated section must be immediately followed by a markdown table whose
header row matches the required columns exactly. Three sub-checks are
reported per section (heading, table, columns), and each one runs even when
an earlier one failed.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from readme_check.rules.constants import DEFAULT_TABLE_SEARCH_WINDOW, RequiredTable
from readme_check.report import ValidationIssue


logger = logging.getLogger(__name__)

TABLE_ROW_PATTERN = re.compile(r"^\s*\|.*\|\s*$")


@dataclass
class TableLocation:
    """Where a section heading and its table were found.

    Attributes:
        heading_line: Zero-based line index of the heading, None if absent
        rows: Table rows following the heading, empty if no table
    """
    heading_line: Optional[int] = None
    rows: List[str] = field(default_factory=list)

    @property
    def has_heading(self) -> bool:
        return self.heading_line is not None

    @property
    def has_table(self) -> bool:
        return bool(self.rows)


def find_heading(lines: List[str], table: RequiredTable) -> Optional[int]:
    """Return the index of the first line that is exactly the section heading."""
    pattern = re.compile(r"^" + re.escape(table.heading) + r"\s*$")
    for index, line in enumerate(lines):
        if pattern.match(line):
            return index
    return None


def find_table_rows(
    lines: List[str],
    heading_line: int,
    window: int = DEFAULT_TABLE_SEARCH_WINDOW,
) -> List[str]:
    """Collect the table rows that directly follow a heading.

    Blank lines before and between rows are skipped. Any other line ends the
    block; if it comes before the first row there is no table. Only the
    ``window`` lines after the heading are searched.
    """
    rows: List[str] = []
    end = min(len(lines), heading_line + 1 + window)

    for line in lines[heading_line + 1:end]:
        if TABLE_ROW_PATTERN.match(line):
            rows.append(line)
        elif not line.strip():
            continue
        else:
            break

    return rows


def locate_table(
    text: str,
    table: RequiredTable,
    window: int = DEFAULT_TABLE_SEARCH_WINDOW,
) -> TableLocation:
    lines = text.splitlines()
    heading_line = find_heading(lines, table)
    if heading_line is None:
        return TableLocation()
    return TableLocation(
        heading_line=heading_line,
        rows=find_table_rows(lines, heading_line, window),
    )


def has_header_row(rows: List[str], table: RequiredTable) -> bool:
    """True when one of ``rows`` is exactly the required header row."""
    pattern = re.compile(r"^\s*" + re.escape(table.header_row) + r"\s*$")
    return any(pattern.match(row) for row in rows)


def check_table(
    text: str,
    table: RequiredTable,
    window: int = DEFAULT_TABLE_SEARCH_WINDOW,
) -> List[ValidationIssue]:
    """Run the heading, table and column sub-checks for one section.

    Args:
        text: README contents.
        table: The required table definition.
        window: Number of lines after the heading searched for the table.

    Returns:
        Exactly three issues, one per sub-check.
    """
    location = locate_table(text, table, window)
    heading = table.heading
    issues: List[ValidationIssue] = []

    if location.has_heading:
        issues.append(_passed(heading, f"README.md contains required header '{heading}'"))
    else:
        issues.append(_failed(
            heading,
            f"README.md does not contain required header '{heading}'",
            suggestion=f"Add a '{heading}' line on its own.",
        ))

    if location.has_table:
        issues.append(_passed(
            f"{heading} table",
            f"README.md contains a table immediately after the header '{heading}'",
        ))
    else:
        issues.append(_failed(
            f"{heading} table",
            f"README.md does not contain a table immediately after the header '{heading}'",
            suggestion="Place the table directly below the heading with no text in between.",
        ))

    subject = f"{heading} columns"
    if not location.has_table:
        issues.append(_failed(
            subject,
            f"README.md column names cannot be checked: no table found after '{heading}'",
        ))
    elif has_header_row(location.rows, table):
        issues.append(_passed(
            subject,
            f"README.md contains the correct column names in the '{heading}' table",
        ))
    else:
        issues.append(_failed(
            subject,
            f"README.md does not contain the correct column names in the '{heading}' table",
            suggestion=f"Use the header row: {table.header_row}",
        ))

    return issues


def _passed(subject: str, message: str) -> ValidationIssue:
    logger.info(message)
    return ValidationIssue(level="info", subject=subject, message=message)


def _failed(subject: str, message: str, suggestion: Optional[str] = None) -> ValidationIssue:
    logger.warning(message)
    return ValidationIssue(level="error", subject=subject, message=message, suggestion=suggestion)
