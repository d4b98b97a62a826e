"""
tablescope CLI module - shared console and commands.
"""
from tablescope.cli.console import console, custom_theme
from tablescope.cli.inspect_table import inspect_command
from tablescope.cli.list_views import views_command

__all__ = [
    'console',
    'custom_theme',
    'inspect_command',
    'views_command',
]
