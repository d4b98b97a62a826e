"""
Inspect command - load a file and show inferred column types and relations.
"""
import sys
from typing import Optional

import click
from rich.table import Table as RichTable

from tablescope.cli.console import console
from tablescope.config import load_settings
from tablescope.errors import LoaderError, TablescopeError
from tablescope.session import ViewSession
from tablescope.table import Table, TreeNode


@click.command('inspect')
@click.argument('path', type=click.Path(dir_okay=False))
@click.option('--delimiter', help='Field delimiter (default: tab for .tsv/.tab, comma otherwise)')
@click.option('--view', 'view_type', help='Configure this view and show its attributes')
def inspect_command(path: str, delimiter: Optional[str], view_type: Optional[str]):
    """Infer column types for a data file and list shared-domain columns."""
    session = ViewSession(load_settings())
    try:
        if view_type:
            session.set_view_type(view_type.upper())
        data = session.load(path, delimiter)
    except LoaderError as e:
        console.print(f"[error]{e}[/]")
        sys.exit(1)
    except TablescopeError as e:
        console.print(f"[error]{e}[/]")
        sys.exit(2)

    if isinstance(data, TreeNode):
        _show_tree(data)
    else:
        _show_table(session, data)

    if view_type:
        _show_view(session)


def _show_tree(tree: TreeNode):
    console.print(f"\n[info]Tree:[/] {tree.num_nodes} nodes, {len(tree.leaves())} leaves")


def _show_table(session: ViewSession, table: Table):
    profile = session.profile
    console.print(f"\n[info]Table:[/] {table.num_rows} rows, {table.num_columns} columns\n")

    rich_table = RichTable(title="Columns")
    rich_table.add_column("#", justify="right")
    rich_table.add_column("Name", style="bold")
    rich_table.add_column("Type")
    rich_table.add_column("Basic")
    rich_table.add_column("Distinct", justify="right")

    for col, (semantic_type, basic) in enumerate(zip(profile.types, profile.basic_types)):
        rich_table.add_row(
            str(col),
            table.column_name(col),
            semantic_type.name,
            basic.name,
            str(len(profile.domains[col])),
        )
    console.print(rich_table)

    shared = list(profile.relations.shared_pairs())
    if not shared:
        console.print("[muted]No shared-domain columns[/]")
        return
    console.print("\n[highlight]Shared domains:[/]")
    for col1, col2 in shared:
        common = len(profile.domains[col1] & profile.domains[col2])
        console.print(f"  {table.column_name(col1)} <-> {table.column_name(col2)} ({common} common values)")


def _show_view(session: ViewSession):
    console.print(f"\n[highlight]View {session.view_type}:[/]")
    for attribute in session.attributes():
        value = session.get_attribute(attribute) or '-'
        console.print(f"  {attribute}: {value}")
