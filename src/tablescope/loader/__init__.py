"""Data file loading - delimited text, Excel sheets and Newick trees"""
import os
from typing import Optional, Union

from ..errors import LoaderError
from ..table import Table, TreeNode
from .delimited import load_delimited, default_delimiter, header_in_data
from .excel import load_sheet, EXCEL_EXTENSIONS
from .newick import load_newick, parse_newick

TREE_EXTENSIONS = ('.tre',)
UNSUPPORTED_EXTENSIONS = ('.vtk', '.xls')


def load_data(file_path: str, delimiter: Optional[str] = None) -> Union[Table, TreeNode]:
    """
    Load a file by extension: .tre -> tree, .xlsx -> first sheet,
    anything else -> delimited text.

    Raises:
        LoaderError: For missing files and unsupported formats
    """
    ext = os.path.splitext(file_path)[1].lower()
    if ext in UNSUPPORTED_EXTENSIONS:
        raise LoaderError(f"Unsupported file type: {ext}")
    if ext in TREE_EXTENSIONS:
        return load_newick(file_path)
    if ext in EXCEL_EXTENSIONS:
        return load_sheet(file_path)
    return load_delimited(file_path, delimiter)
