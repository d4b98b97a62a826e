"""Table and tree containers handed to the inference pipeline.

A Table wraps a pandas DataFrame. Columns are always addressed by position,
so duplicate column names survive every step. The DataFrame itself can be
swapped out (see replace_columns) while the Table object stays the same for
anyone holding a reference to it.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional

import pandas as pd


def cell_text(value: Any) -> str:
    """Render a cell value as text. Missing values render as an empty string."""
    if value is None:
        return ""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value)


def parse_number(text: str) -> Optional[float]:
    """
    Parse cell text as a real number.

    Only finite values count: 'nan', 'inf' and friends do not parse, and
    neither do Python's underscore digit separators ('1_000').

    Returns:
        The parsed float, or None if the text is not a number.
    """
    if not text or '_' in text:
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


class Table:
    """Ordered, named columns of equal length backed by a DataFrame."""

    def __init__(self, frame: Optional[pd.DataFrame] = None):
        self.frame = frame if frame is not None else pd.DataFrame()

    @classmethod
    def from_columns(cls, columns: dict) -> 'Table':
        """Build a table from {name: values}. Values are stored as given."""
        return cls(pd.DataFrame({name: list(values) for name, values in columns.items()}))

    @classmethod
    def from_rows(cls, header: List[str], rows: List[List[Any]]) -> 'Table':
        frame = pd.DataFrame(rows, columns=range(len(header)), dtype=object)
        frame.columns = list(header)
        return cls(frame)

    @property
    def num_rows(self) -> int:
        return len(self.frame.index)

    @property
    def num_columns(self) -> int:
        return len(self.frame.columns)

    def column_name(self, col: int) -> str:
        return str(self.frame.columns[col])

    def column_names(self) -> List[str]:
        return [str(c) for c in self.frame.columns]

    def column(self, col: int) -> pd.Series:
        return self.frame.iloc[:, col]

    def value(self, row: int, col: int) -> Any:
        return self.frame.iat[row, col]

    def text(self, row: int, col: int) -> str:
        return cell_text(self.value(row, col))

    def column_texts(self, col: int) -> List[str]:
        """Text rendering of every cell in a column, in row order."""
        return [cell_text(v) for v in self.column(col)]

    def replace_columns(self, frame: pd.DataFrame) -> None:
        """Swap in new column storage. Shape and column order must match."""
        if frame.shape != self.frame.shape:
            raise ValueError(
                f"Replacement frame shape {frame.shape} does not match table shape {self.frame.shape}"
            )
        self.frame = frame

    def add_column(self, name: str, values: Iterable[Any], dtype: Optional[str] = None) -> None:
        """Append a column. Its length must match the current row count."""
        values = list(values)
        if self.num_columns and len(values) != self.num_rows:
            raise ValueError(f"Column '{name}' has {len(values)} values, table has {self.num_rows} rows")
        series = pd.Series(values, dtype=dtype, index=self.frame.index if self.num_columns else None)
        frame = self.frame.copy() if self.num_columns else pd.DataFrame(index=series.index)
        names = list(frame.columns) + [name]
        frame.columns = range(len(names) - 1)
        frame[len(names) - 1] = series
        frame.columns = names
        self.frame = frame

    def __repr__(self):
        return f"Table(columns={self.column_names()}, rows={self.num_rows})"


@dataclass
class TreeNode:
    """A node in a rooted tree (e.g. a phylogeny read from a Newick file)."""
    name: str = ""
    length: Optional[float] = None
    children: List['TreeNode'] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator['TreeNode']:
        """Pre-order traversal."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> List['TreeNode']:
        return [n for n in self.walk() if n.is_leaf]

    @property
    def num_nodes(self) -> int:
        return sum(1 for _ in self.walk())
