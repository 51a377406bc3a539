"""
Validation Module for readme-check

Loads a README and runs the named checks (urls, headers, not_empty and the
three table checks), aggregating outcomes into a ValidationReport.
"""

from readme_check.report import CheckResult, ValidationIssue, ValidationReport
from readme_check.validation.document import load_document
from readme_check.validation.runner import CHECK_NAMES, ValidationRunner

__all__ = [
    "CHECK_NAMES",
    "CheckResult",
    "ValidationIssue",
    "ValidationReport",
    "ValidationRunner",
    "load_document",
]
