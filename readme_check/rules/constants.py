"""
README contract definitions.

Required section headers and required tables are declared here as data;
the rule functions in this package iterate over them.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RequiredHeader:
    """A section heading that must appear in the README.

    Attributes:
        text: Heading text without the leading hashes
        min_count: Minimum number of occurrences
        level: Markdown heading level
    """
    text: str
    min_count: int = 1
    level: int = 2

    @property
    def markdown(self) -> str:
        return "#" * self.level + " " + self.text


@dataclass(frozen=True)
class RequiredTable:
    """A section that must be immediately followed by a table.

    Attributes:
        section: Heading text of the governing section
        columns: Exact header row cells, in order
        check_name: Name of the check that validates this table
    """
    section: str
    columns: Tuple[str, ...]
    check_name: str
    level: int = 2

    @property
    def heading(self) -> str:
        return "#" * self.level + " " + self.section

    @property
    def header_row(self) -> str:
        return "| " + " | ".join(self.columns) + " |"


REQUIRED_HEADERS: Tuple[RequiredHeader, ...] = (
    RequiredHeader("Goals"),
    RequiredHeader("Resources"),
    RequiredHeader("Inputs"),
    RequiredHeader("Outputs"),
    RequiredHeader("Features"),
    RequiredHeader("Testing"),
    RequiredHeader("Authors"),
    RequiredHeader("License"),
    RequiredHeader("Usage"),
)

REQUIRED_TABLES: Tuple[RequiredTable, ...] = (
    RequiredTable("Resources", ("Name", "Type"), "resources_table"),
    RequiredTable("Inputs", ("Name", "Description", "Type", "Required"), "inputs_table"),
    RequiredTable("Outputs", ("Name", "Description"), "outputs_table"),
)

# Lines after a heading searched for its table
DEFAULT_TABLE_SEARCH_WINDOW = 50
