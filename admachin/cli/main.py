"""
Main CLI entry point for AdMachin
"""

import logging

import click

from .combos import combos_group
from ..core.observability import setup_logfire


@click.group()
@click.version_option(version='1.0.0')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool):
    """
    AdMachin - Facebook/Instagram ad combination builder

    Combine creatives, headlines, primary texts and descriptions into ads.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level)
    setup_logfire(level=level)


# Register command groups
cli.add_command(combos_group)


if __name__ == '__main__':
    cli()
