"""tablescope command line entry point."""
import click

from tablescope.cli.inspect_table import inspect_command
from tablescope.cli.list_views import views_command
from tablescope.config import load_settings
from tablescope.logs import setup_logging


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose: bool):
    """tablescope - column type inference for tabular data"""
    setup_logging('DEBUG' if verbose else load_settings().log_level)


cli.add_command(inspect_command)
cli.add_command(views_command)


if __name__ == '__main__':
    cli()
