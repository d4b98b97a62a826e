"""Excel sheet loading via pandas/openpyxl, every cell kept as text."""
import logging
import os
from typing import Optional, Union

import pandas as pd

from ..errors import LoaderError
from ..table import Table
from .delimited import header_in_data

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = ('.xlsx', '.xlsm')


def _read(file_path: str, sheet_name: Union[str, int], has_header: bool) -> pd.DataFrame:
    try:
        return pd.read_excel(
            file_path,
            sheet_name=sheet_name,
            header=0 if has_header else None,
            dtype=str,
            keep_default_na=False,
            engine='openpyxl',
        )
    except ValueError as e:
        if "not found" in str(e):
            raise LoaderError(f"Sheet '{sheet_name}' not found in {file_path}") from e
        raise


def load_sheet(file_path: str, sheet_name: Optional[Union[str, int]] = None) -> Table:
    """
    Load one sheet (the first by default) as a table of strings.

    Uses the same header detection as delimited files.
    """
    if not os.path.isfile(file_path):
        raise LoaderError(f"File not found: {file_path}")

    sheet = sheet_name if sheet_name is not None else 0
    df = _read(file_path, sheet, has_header=True)
    if header_in_data(df):
        df = _read(file_path, sheet, has_header=False)
        df.columns = [f"Field {i}" for i in range(len(df.columns))]

    logger.info(f"Loaded {os.path.basename(file_path)} [{sheet}]: {len(df)} rows, {len(df.columns)} columns")
    return Table(df)
