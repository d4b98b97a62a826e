"""Column domains - the distinct text values of each column."""
from typing import List, Set

from ..table import Table


def column_domain(texts: List[str]) -> Set[str]:
    return set(texts)


def column_domains(table: Table) -> List[Set[str]]:
    """
    Collect the distinct cell texts of every column.

    Returns:
        One set per column, in column order. The table is not modified.
    """
    return [column_domain(table.column_texts(col)) for col in range(table.num_columns)]
