"""
Links Subcommand Module

Prints the URLs extracted from a README, one per line, in document order.
Nothing is fetched.
"""

import sys
from typing import Optional

import click

from readme_check.config.manager import ConfigurationManager
from readme_check.errors import ConfigurationError, DocumentLoadError
from readme_check.links.extractor import extract_urls
from readme_check.links.registry import is_registry_url
from readme_check.validation.document import load_document

from .help_texts import CONFIG_HELP, LINKS_HELP, README_HELP, REGISTRY_ONLY_HELP, ExitCodes
from .shared_options import config_option, readme_option


@click.command(help=LINKS_HELP)
@readme_option(help=README_HELP)
@config_option(help=CONFIG_HELP)
@click.option("--registry-only", is_flag=True, help=REGISTRY_ONLY_HELP)
def links(readme_path: Optional[str], config_file: Optional[str], registry_only: bool):
    try:
        config = ConfigurationManager().load_configuration(
            config_file=config_file,
            cli_overrides={"document_path": readme_path},
        )
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    try:
        text = load_document(config.document_path)
    except DocumentLoadError as e:
        click.echo(f"Error: Failed to load markdown file: {e}", err=True)
        sys.exit(ExitCodes.CHECKS_FAILED)

    for url in extract_urls(text):
        if registry_only and not is_registry_url(url):
            continue
        click.echo(url)
