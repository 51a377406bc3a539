"""
Validation Report Data Models

Defines ValidationIssue, CheckResult and ValidationReport dataclasses used
across readme-check for structured pass/fail reporting.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional


@dataclass
class ValidationIssue:
    """A single assertion outcome recorded by a check.

    Attributes:
        level: "error" for a failed assertion, "info" for a passed one
        subject: The URL, header or table the assertion is about
        message: Human-readable description of the outcome
        suggestion: Optional suggestion for fixing the issue
    """
    level: Literal["error", "info"]
    subject: str
    message: str
    suggestion: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.level != "error"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {"level": self.level, "subject": self.subject, "message": self.message}
        if self.suggestion:
            d["suggestion"] = self.suggestion
        return d


@dataclass
class CheckResult:
    """Outcome of one named check.

    Attributes:
        name: Check name (urls, headers, not_empty, ...)
        issues: Every assertion recorded by the check, in order
        aborted: True when the check stopped early on a setup error
        duration_ms: How long the check took in milliseconds
    """
    name: str
    issues: List[ValidationIssue] = field(default_factory=list)
    aborted: bool = False
    duration_ms: int = 0

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def infos(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == "info"]

    @property
    def passed(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "passed": self.passed,
            "aborted": self.aborted,
            "duration_ms": self.duration_ms,
            "issues": [i.to_dict() for i in self.issues],
        }


@dataclass
class ValidationReport:
    """Structured report from a validation run.

    Attributes:
        document_path: Path of the validated README ("<memory>" for text input)
        results: One CheckResult per executed check, in check order
        timestamp: When validation was performed (UTC)
        duration_ms: How long the whole run took in milliseconds
    """
    document_path: str
    results: List[CheckResult] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @property
    def is_valid(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failed_checks(self) -> List[CheckResult]:
        return [r for r in self.results if not r.passed]

    @property
    def exit_code(self) -> int:
        return 0 if self.is_valid else 1

    def get(self, name: str) -> Optional[CheckResult]:
        """Return the result of the named check, if it ran."""
        for result in self.results:
            if result.name == name:
                return result
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "document_path": self.document_path,
            "is_valid": self.is_valid,
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
            "checks": [r.to_dict() for r in self.results],
            "summary": {
                "checks": len(self.results),
                "passed": sum(1 for r in self.results if r.passed),
                "failed": len(self.failed_checks),
                "errors": sum(len(r.errors) for r in self.results),
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def format_human(self, verbose: bool = False) -> str:
        """Format report for human-readable console output.

        Failed assertions are always listed; passed ones only when
        ``verbose`` is set.
        """
        if self.is_valid:
            lines = [f"✅ {self.document_path}: Valid"]
        else:
            lines = [f"❌ {self.document_path}: Failed "
                     f"({len(self.failed_checks)} of {len(self.results)} checks)"]

        for result in self.results:
            icon = "✅" if result.passed else "❌"
            note = " (aborted)" if result.aborted else ""
            lines.append(f"  {icon} {result.name}{note}")

            for issue in result.issues:
                if issue.level == "error":
                    lines.append(f"      ❌ [{issue.subject}] Failed: {issue.message}")
                    if issue.suggestion:
                        lines.append(f"          → {issue.suggestion}")
                elif verbose:
                    lines.append(f"      ℹ [{issue.subject}] Success: {issue.message}")

        return "\n".join(lines)
