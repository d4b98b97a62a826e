"""Column conversion - rewrite column storage to match inferred types.

CONTINUOUS columns become float64, INTEGER_* columns become pandas nullable
Int64, string columns are passed through untouched. Every numeric cell is
re-parsed from its text rendering.

Cells that do not parse become missing values (NaN / pd.NA) instead of
aborting the conversion.
"""
import logging
from typing import List, Optional

import pandas as pd

from ..table import Table, cell_text, parse_number
from .inference import SemanticType

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_integer(text: str) -> Optional[int]:
    """
    Parse cell text as an integer, truncating toward zero. None if it doesn't fit Int64.

    Plain integer text is parsed exactly. Only text like '2.7' or '1e3' goes
    through a float, so large identifiers keep every digit.
    """
    if not text or '_' in text:
        return None
    try:
        result = int(text.strip())
    except ValueError:
        value = parse_number(text)
        if value is None:
            return None
        result = int(value)
    if result < INT64_MIN or result > INT64_MAX:
        return None
    return result


def _to_float(series: pd.Series) -> pd.Series:
    values = [parse_number(cell_text(v)) for v in series]
    return pd.Series(values, index=series.index, name=series.name, dtype='float64')


def _to_integer(series: pd.Series) -> pd.Series:
    values = [parse_integer(cell_text(v)) for v in series]
    return pd.Series(pd.array(values, dtype='Int64'), index=series.index, name=series.name)


def _count_coerced(original: pd.Series, converted: pd.Series) -> int:
    """Cells that had text but ended up missing after conversion."""
    had_text = original.map(lambda v: cell_text(v) != "")
    return int((had_text & converted.isna()).sum())


def convert_column(series: pd.Series, semantic_type: SemanticType) -> pd.Series:
    """Return the typed storage for one column. String columns are returned as-is."""
    if semantic_type == SemanticType.CONTINUOUS:
        return _to_float(series)
    if semantic_type in (SemanticType.INTEGER_DATA, SemanticType.INTEGER_CATEGORY):
        return _to_integer(series)
    return series


def convert_table_columns(table: Table, types: List[SemanticType]) -> Table:
    """
    Convert every column of a table to the storage its type calls for.

    The converted columns replace the table's storage in one step, so callers
    holding the Table see the new columns. Column count, order, names and row
    order are preserved.

    Args:
        table: Table to convert (modified in place)
        types: Output of column_types() for the same table

    Returns:
        The same Table object.
    """
    converted = {}
    for col in range(table.num_columns):
        original = table.column(col)
        series = convert_column(original, types[col])
        if series is not original:
            coerced = _count_coerced(original, series)
            if coerced:
                logger.warning(
                    f"Column {table.column_name(col)!r}: {coerced} cell(s) could not be parsed as "
                    f"{types[col].name} and were set to missing"
                )
        converted[col] = series

    frame = pd.DataFrame(converted, index=table.frame.index)
    frame.columns = table.frame.columns
    table.replace_columns(frame)
    return table
