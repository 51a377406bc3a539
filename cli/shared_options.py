"""
Shared CLI Option Decorators

Reusable Click decorators for options common to several subcommands.
"""

import click


def readme_option(help=None):
    """Decorator for the README path option."""
    def decorator(f):
        return click.option(
            '--readme', '-i',
            'readme_path',
            type=click.Path(dir_okay=False),
            default=None,
            help=help or 'Path to the README'
        )(f)
    return decorator


def config_option(help=None):
    """Decorator for configuration file option."""
    def decorator(f):
        return click.option(
            '--config', '-c',
            'config_file',
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help=help or 'Configuration file path'
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level control."""
    def decorator(f):
        return click.option(
            '--log-level',
            type=click.Choice(['debug', 'info', 'warning', 'error'], case_sensitive=False),
            default=None,
            help=help or 'Logging level'
        )(f)
    return decorator
