"""Delimited text loading (CSV/TSV) with header detection.

Every cell is read as text; type inference happens later in the metadata
package, so pandas must not guess dtypes or turn empty cells into NaN here.
"""
import logging
import os
from typing import Optional

import pandas as pd

from ..errors import LoaderError
from ..table import Table

logger = logging.getLogger(__name__)

TAB_EXTENSIONS = ('.tab', '.tsv')


def default_delimiter(file_path: str) -> str:
    """Tab for .tab/.tsv files, comma for everything else."""
    ext = os.path.splitext(file_path)[1].lower()
    return '\t' if ext in TAB_EXTENSIONS else ','


def _read(file_path: str, delimiter: str, has_header: bool) -> pd.DataFrame:
    try:
        return pd.read_csv(
            file_path,
            sep=delimiter,
            header=0 if has_header else None,
            dtype=str,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError as e:
        raise LoaderError(f"File appears empty: {file_path}") from e
    except pd.errors.ParserError as e:
        raise LoaderError(f"Could not parse {file_path}: {e}") from e


def header_in_data(df: pd.DataFrame) -> bool:
    """True if any column's name appears among that column's own values."""
    for col in range(len(df.columns)):
        name = str(df.columns[col])
        if (df.iloc[:, col] == name).any():
            return True
    return False


def load_delimited(file_path: str, delimiter: Optional[str] = None) -> Table:
    """
    Load a delimited text file as a table of strings.

    The first line is treated as a header unless a header name shows up as a
    value in its own column, in which case the file is re-read without a
    header and columns are named 'Field 0', 'Field 1', ...

    Raises:
        LoaderError: If the file is missing, empty or unparseable
    """
    if not os.path.isfile(file_path):
        raise LoaderError(f"File not found: {file_path}")

    delimiter = delimiter or default_delimiter(file_path)
    df = _read(file_path, delimiter, has_header=True)

    if header_in_data(df):
        logger.debug(f"Header names found in data, re-reading {os.path.basename(file_path)} without header")
        df = _read(file_path, delimiter, has_header=False)
        df.columns = [f"Field {i}" for i in range(len(df.columns))]

    logger.info(f"Loaded {os.path.basename(file_path)}: {len(df)} rows, {len(df.columns)} columns")
    return Table(df)
