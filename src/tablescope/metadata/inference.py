"""Semantic type inference for table columns.

Each column is classified on its own, from two numbers:
1. How many cells parse as numbers (and how many of those are fractional)
2. How many distinct values the column holds

Mostly-numeric columns become CONTINUOUS, INTEGER_CATEGORY or INTEGER_DATA.
Everything else becomes STRING_CATEGORY or STRING_DATA.
"""
import logging
import math
from enum import Enum
from typing import List, Set

from ..table import Table, parse_number

logger = logging.getLogger(__name__)

# Thresholds (fractions of the row count)
NUMERIC_RATIO = 0.95      # more than this many cells parse -> numeric column
FRACTIONAL_RATIO = 0.01   # more than this many fractional cells -> continuous
CATEGORY_RATIO = 0.9      # fewer distinct values than this -> category


class SemanticType(Enum):
    CONTINUOUS = 'continuous'
    INTEGER_DATA = 'integer_data'
    INTEGER_CATEGORY = 'integer_category'
    STRING_DATA = 'string_data'
    STRING_CATEGORY = 'string_category'


class BasicType(Enum):
    NUMERIC = 'numeric'
    STRING = 'string'
    OTHER = 'other'


def basic_type(semantic_type: SemanticType) -> BasicType:
    """Coarse grouping used to decide which columns may be related."""
    if semantic_type in (SemanticType.INTEGER_DATA, SemanticType.INTEGER_CATEGORY):
        return BasicType.NUMERIC
    if semantic_type in (SemanticType.STRING_DATA, SemanticType.STRING_CATEGORY):
        return BasicType.STRING
    return BasicType.OTHER


def _count_numeric(texts: List[str]):
    """Return (numeric, fractional) cell counts."""
    num_numeric = 0
    num_fractional = 0
    for text in texts:
        value = parse_number(text)
        if value is None:
            continue
        num_numeric += 1
        if math.modf(value)[0] != 0.0:
            num_fractional += 1
    return num_numeric, num_fractional


def classify_column(texts: List[str], num_distinct: int) -> SemanticType:
    """
    Classify one column from its cell texts and domain size.

    Args:
        texts: Text rendering of every cell, one per row
        num_distinct: Number of distinct cell texts in the column

    Returns:
        SemanticType for the column. Zero-row columns are STRING_DATA.
    """
    num_rows = len(texts)
    if num_rows == 0:
        return SemanticType.STRING_DATA

    num_numeric, num_fractional = _count_numeric(texts)
    is_category = num_distinct < CATEGORY_RATIO * num_rows

    if num_numeric > NUMERIC_RATIO * num_rows:
        if num_fractional > FRACTIONAL_RATIO * num_rows:
            return SemanticType.CONTINUOUS
        if is_category:
            return SemanticType.INTEGER_CATEGORY
        return SemanticType.INTEGER_DATA

    if is_category:
        return SemanticType.STRING_CATEGORY
    return SemanticType.STRING_DATA


def column_types(table: Table, domains: List[Set[str]]) -> List[SemanticType]:
    """
    Classify every column of a table.

    Args:
        table: Table to inspect
        domains: Output of column_domains() for the same table

    Returns:
        One SemanticType per column, in column order.
    """
    types = []
    for col in range(table.num_columns):
        semantic_type = classify_column(table.column_texts(col), len(domains[col]))
        logger.debug(f"Column {table.column_name(col)!r}: {semantic_type.name} ({len(domains[col])} distinct)")
        types.append(semantic_type)
    return types
