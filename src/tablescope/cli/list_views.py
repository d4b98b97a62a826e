"""
Views command - list registered view types.
"""
import click

from tablescope.cli.console import console
from tablescope.views import VIEW_REGISTRY, view_types


@click.command('views')
def views_command():
    """List available view types."""
    for kind in view_types():
        attributes = ', '.join(VIEW_REGISTRY[kind].ATTRIBUTES)
        console.print(f"[highlight]{kind}[/]  [muted]{attributes}[/]")
