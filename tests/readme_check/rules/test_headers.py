"""
Tests for readme_check.rules.headers
"""

from readme_check.rules.constants import REQUIRED_HEADERS, RequiredHeader
from readme_check.rules.headers import check_headers, count_header


class TestCountHeader:
    def test_counts_line_anchored_occurrences(self):
        text = "## Usage\ntext\n## Usage\n"
        assert count_header(text, RequiredHeader("Usage")) == 2

    def test_ignores_mid_line_occurrence(self):
        assert count_header("See ## Usage below", RequiredHeader("Usage")) == 0

    def test_is_case_sensitive(self):
        assert count_header("## usage\n", RequiredHeader("Usage")) == 0

    def test_deeper_heading_does_not_count(self):
        assert count_header("### Usage\n", RequiredHeader("Usage")) == 0

    def test_level_one_heading(self):
        assert count_header("# Usage\n", RequiredHeader("Usage", level=1)) == 1


class TestCheckHeaders:
    def test_all_headers_present(self, valid_readme):
        issues = check_headers(valid_readme)
        assert len(issues) == len(REQUIRED_HEADERS)
        assert all(i.level == "info" for i in issues)

    def test_missing_header_is_named(self, valid_readme):
        text = valid_readme.replace("## Goals\n", "## Objectives\n")
        errors = [i for i in check_headers(text) if i.level == "error"]
        assert len(errors) == 1
        assert errors[0].subject == "## Goals"
        assert "## Goals" in errors[0].message

    def test_all_missing_headers_reported(self, valid_readme):
        text = valid_readme.replace("## Testing\n", "").replace("## Authors\n", "")
        errors = [i for i in check_headers(text) if i.level == "error"]
        assert [e.subject for e in errors] == ["## Testing", "## Authors"]

    def test_empty_document_fails_every_header(self):
        issues = check_headers("")
        assert all(i.level == "error" for i in issues)
        assert len(issues) == len(REQUIRED_HEADERS)

    def test_minimum_count(self):
        header = RequiredHeader("Example", min_count=2)
        assert check_headers("## Example\n", [header])[0].level == "error"
        assert check_headers("## Example\n## Example\n", [header])[0].level == "info"
