"""
Validation Runner

Central orchestrator that runs the named README checks concurrently and
aggregates their outcomes into a ValidationReport. Each check records every
assertion it makes; failures never abort sibling checks or sibling
assertions, and an exception inside one check is reported against that check
only.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence

from readme_check.config.schema import RunConfig
from readme_check.errors import ConfigurationError, DocumentLoadError
from readme_check.links.extractor import extract_urls
from readme_check.links.verifier import LinkVerifier
from readme_check.report import CheckResult, ValidationIssue, ValidationReport
from readme_check.rules.constants import REQUIRED_HEADERS, REQUIRED_TABLES, RequiredTable
from readme_check.rules.headers import check_headers
from readme_check.rules.tables import check_table
from readme_check.utils.logging_config import logging_config
from readme_check.validation.document import load_document


logger = logging.getLogger(__name__)

CHECK_NAMES = (
    "urls",
    "headers",
    "not_empty",
    *(table.check_name for table in REQUIRED_TABLES),
)

MEMORY_DOCUMENT = "<memory>"


class ValidationRunner:
    """Runs the README checks described by a RunConfig.

    Example:
        >>> runner = ValidationRunner(RunConfig(document_path="README.md"))
        >>> report = runner.run()
        >>> report.is_valid
    """

    def __init__(self, config: RunConfig, verifier: Optional[LinkVerifier] = None):
        """Initialize the runner.

        Args:
            config: Settings for the run.
            verifier: Link verifier to use; built from ``config`` when omitted.
        """
        self.config = config
        self.verifier = verifier or LinkVerifier(
            max_workers=config.max_workers,
            timeout=config.request_timeout,
            user_agent=config.user_agent,
        )
        self._checks: Dict[str, Callable[[str], List[ValidationIssue]]] = {
            "urls": self.check_urls,
            "headers": self.check_headers,
            "not_empty": self.check_not_empty,
        }
        for table in REQUIRED_TABLES:
            self._checks[table.check_name] = partial(self.check_table, table)

    def run(self, checks: Optional[Sequence[str]] = None) -> ValidationReport:
        """Load the configured document and run the selected checks.

        A load failure does not raise: every selected check fails with the
        load error and is marked aborted.

        Args:
            checks: Check names to run; all checks when None or empty.

        Raises:
            ConfigurationError: If an unknown check name is requested.
        """
        names = self._select(checks)
        path = self.config.document_path

        try:
            text = load_document(path)
        except DocumentLoadError as e:
            logger.error(f"Failed to load markdown file: {e}")
            return self._execute(names, path, None, load_error=e)

        return self._execute(names, path, text, from_file=True)

    def run_text(
        self,
        text: str,
        checks: Optional[Sequence[str]] = None,
        document_path: str = MEMORY_DOCUMENT,
    ) -> ValidationReport:
        """Run the selected checks against an in-memory document."""
        return self._execute(self._select(checks), document_path, text)

    def cancel(self) -> None:
        """Stop link verifications of the current (or next) URL batch."""
        self.verifier.cancel()

    def check_urls(self, text: str) -> List[ValidationIssue]:
        urls = extract_urls(text)
        if not urls:
            logger.info("No URLs found in README.md")
            return [ValidationIssue(level="info", subject="urls", message="No URLs found in README.md")]

        logger.info(f"Verifying {len(urls)} URL(s)")
        return [result.to_issue() for result in self.verifier.verify_all(urls)]

    def check_headers(self, text: str) -> List[ValidationIssue]:
        return check_headers(text, REQUIRED_HEADERS)

    def check_not_empty(
        self,
        text: str,
        document_path: str = MEMORY_DOCUMENT,
        from_file: bool = False,
    ) -> List[ValidationIssue]:
        """Check that the document has content.

        The "file exists" assertion is only recorded for documents read
        from disk.
        """
        issues = []
        if from_file:
            issues.append(ValidationIssue(level="info", subject=document_path, message="README.md file exists."))

        if text:
            logger.info("README.md is not empty.")
            issues.append(ValidationIssue(level="info", subject=document_path, message="README.md is not empty."))
        else:
            logger.warning("README.md is empty.")
            issues.append(ValidationIssue(
                level="error",
                subject=document_path,
                message="README.md is empty.",
                suggestion="Write the README before publishing.",
            ))
        return issues

    def check_table(self, table: RequiredTable, text: str) -> List[ValidationIssue]:
        return check_table(text, table, window=self.config.table_search_window)

    def _select(self, checks: Optional[Sequence[str]]) -> List[str]:
        if not checks:
            return list(CHECK_NAMES)

        unknown = [name for name in checks if name not in self._checks]
        if unknown:
            raise ConfigurationError(
                f"Unknown check(s): {', '.join(unknown)}. Valid options: {', '.join(CHECK_NAMES)}",
                errors=[f"Unknown check '{name}'" for name in unknown],
            )

        # Keep the canonical order and drop duplicates
        return [name for name in CHECK_NAMES if name in checks]

    def _execute(
        self,
        names: List[str],
        document_path: str,
        text: Optional[str],
        load_error: Optional[DocumentLoadError] = None,
        from_file: bool = False,
    ) -> ValidationReport:
        start = time.time()

        with ThreadPoolExecutor(max_workers=len(names), thread_name_prefix="readme-check") as executor:
            futures = [
                executor.submit(self._run_check, name, document_path, text, load_error, from_file)
                for name in names
            ]
        results = [future.result() for future in futures]

        report = ValidationReport(
            document_path=document_path,
            results=results,
            duration_ms=int((time.time() - start) * 1000),
        )

        failed = [r.name for r in report.failed_checks]
        if failed:
            logger.warning(f"{len(failed)} of {len(results)} checks failed: {', '.join(failed)}")
        else:
            logger.info(f"All {len(results)} checks passed")
        return report

    def _run_check(
        self,
        name: str,
        document_path: str,
        text: Optional[str],
        load_error: Optional[DocumentLoadError],
        from_file: bool = False,
    ) -> CheckResult:
        start = time.time()

        if load_error is not None or text is None:
            result = CheckResult(
                name=name,
                issues=[ValidationIssue(
                    level="error",
                    subject=document_path,
                    message=f"Failed to load markdown file: {load_error}",
                )],
                aborted=True,
            )
        else:
            check = self._checks[name]
            if name == "not_empty":
                check = partial(self.check_not_empty, document_path=document_path, from_file=from_file)
            try:
                issues = check(text)
            except Exception as e:
                logger.exception(f"Check '{name}' raised an unexpected error")
                issues = [ValidationIssue(
                    level="error",
                    subject=name,
                    message=f"Check raised an unexpected error: {e}",
                )]
            result = CheckResult(name=name, issues=issues)

        elapsed = time.time() - start
        result.duration_ms = int(elapsed * 1000)
        logging_config.log_operation_timing(f"Check '{name}'", elapsed)
        return result
