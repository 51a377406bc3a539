"""
CLI Package for readme-check

Click group with one module per subcommand. The cli() function is the
console script entry point declared in setup.py.
"""

import os
import click
from dotenv import load_dotenv

from readme_check import __version__
from readme_check.utils.logging_config import configure_logging

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .validate import validate
from .links import links

# Configure logging when CLI package is imported
configure_logging()

@click.group()
@click.version_option(version=__version__, prog_name='readme-check')
def main():
    """readme-check - validate module READMEs before publication.

    Checks required section headers, the Resources/Inputs/Outputs tables,
    and that every link in the document resolves.
    """
    pass

# Register subcommands
main.add_command(validate)
main.add_command(links)

# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()
