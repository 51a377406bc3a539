"""
Validate Subcommand Module

Runs the README contract checks (links, required headers, non-empty
document, and the Resources/Inputs/Outputs tables) and prints a report.
Exits non-zero when any check fails.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from readme_check.config.manager import ConfigurationManager
from readme_check.errors import ConfigurationError
from readme_check.utils.logging_config import configure_logging
from readme_check.validation.runner import CHECK_NAMES, ValidationRunner

from .help_texts import (
    CHECK_HELP,
    CONFIG_HELP,
    FORMAT_HELP,
    LOG_FILE_HELP,
    LOG_LEVEL_HELP,
    MAX_WORKERS_HELP,
    README_HELP,
    REPORT_HELP,
    TABLE_WINDOW_HELP,
    TIMEOUT_HELP,
    VALIDATE_HELP,
    VERBOSE_HELP,
    ExitCodes,
    environment_epilog,
)
from .shared_options import config_option, log_level_option, readme_option


logger = logging.getLogger(__name__)


@click.command(help=VALIDATE_HELP, epilog=environment_epilog())
@readme_option(help=README_HELP)
@config_option(help=CONFIG_HELP)
@click.option(
    "--check",
    "checks",
    multiple=True,
    type=click.Choice(CHECK_NAMES),
    help=CHECK_HELP,
)
@click.option("--max-workers", type=click.IntRange(min=1), default=None, help=MAX_WORKERS_HELP)
@click.option("--timeout", "request_timeout", type=float, default=None, help=TIMEOUT_HELP)
@click.option(
    "--table-window",
    "table_search_window",
    type=click.IntRange(min=1),
    default=None,
    help=TABLE_WINDOW_HELP,
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["human", "json"], case_sensitive=False),
    default="human",
    help=FORMAT_HELP,
)
@click.option("--report", "-r", "report_path", type=click.Path(), help=REPORT_HELP)
@click.option("--verbose", "-v", is_flag=True, help=VERBOSE_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
@click.option("--log-file", type=click.Path(), default=None, help=LOG_FILE_HELP)
def validate(
    readme_path: Optional[str],
    config_file: Optional[str],
    checks: Tuple[str, ...],
    max_workers: Optional[int],
    request_timeout: Optional[float],
    table_search_window: Optional[int],
    output_format: str,
    report_path: Optional[str],
    verbose: bool,
    log_level: Optional[str],
    log_file: Optional[str],
):
    """Validate a README against the publication contract.

    Examples:
        # Validate ./README.md (or the file named by README_PATH)
        readme-check validate

        # Validate a specific file, links only
        readme-check validate --readme modules/vpc/README.md --check urls

        # JSON output plus a saved report
        readme-check validate --format json --report report.json
    """
    try:
        config = ConfigurationManager().load_configuration(
            config_file=config_file,
            cli_overrides={
                "document_path": readme_path,
                "max_workers": max_workers,
                "request_timeout": request_timeout,
                "table_search_window": table_search_window,
                "log_level": log_level,
            },
        )
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    configure_logging(level=config.log_level, log_file=log_file, force=True)
    logger.debug(f"Validating {config.document_path}")

    report = ValidationRunner(config).run(checks=list(checks))

    if output_format.lower() == "json":
        click.echo(report.to_json())
    else:
        click.echo(report.format_human(verbose=verbose))

    if report_path:
        _write_report(report_path, report.to_dict())
        if output_format.lower() != "json":
            click.echo(f"\nReport saved: {report_path}")

    if not report.is_valid:
        sys.exit(ExitCodes.CHECKS_FAILED)


def _write_report(path: str, data: dict):
    """Write a JSON report to disk."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
