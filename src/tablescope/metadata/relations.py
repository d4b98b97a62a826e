"""Relation detection between pairs of columns.

Two columns share a domain when they have the same basic type (both
numeric-integer or both string) and enough of their distinct values overlap.
Views use this to suggest linked columns, e.g. graph edge endpoints.
"""
import logging
from enum import Enum
from typing import Dict, Iterator, List, Set, Tuple

from ..table import Table
from .inference import BasicType, SemanticType, basic_type

logger = logging.getLogger(__name__)

SHARED_RATIO = 0.01  # shared distinct values must exceed this fraction of rows


class Relation(Enum):
    UNRELATED = 'unrelated'
    SHARED_DOMAIN = 'shared_domain'


class ColumnRelations:
    """Relation for every unordered pair of columns. Only i < j is stored."""

    def __init__(self, num_columns: int):
        self.num_columns = num_columns
        self._pairs: Dict[Tuple[int, int], Relation] = {}

    @staticmethod
    def _key(col1: int, col2: int) -> Tuple[int, int]:
        return (col1, col2) if col1 < col2 else (col2, col1)

    def set(self, col1: int, col2: int, relation: Relation) -> None:
        if col1 == col2:
            raise ValueError("A column cannot be related to itself")
        self._pairs[self._key(col1, col2)] = relation

    def get(self, col1: int, col2: int) -> Relation:
        """Symmetric lookup. The diagonal and unset pairs are UNRELATED."""
        return self._pairs.get(self._key(col1, col2), Relation.UNRELATED)

    def shared_pairs(self) -> Iterator[Tuple[int, int]]:
        """Column pairs (i < j) with a shared domain, in scan order."""
        for key in sorted(self._pairs):
            if self._pairs[key] == Relation.SHARED_DOMAIN:
                yield key

    def related_to(self, col: int) -> List[int]:
        return [other for other in range(self.num_columns)
                if other != col and self.get(col, other) == Relation.SHARED_DOMAIN]

    def __len__(self):
        return len(self._pairs)


def pair_relation(
    domain1: Set[str],
    domain2: Set[str],
    type1: SemanticType,
    type2: SemanticType,
    num_rows: int,
) -> Relation:
    """Relation between two columns given their domains and types."""
    basic1 = basic_type(type1)
    basic2 = basic_type(type2)
    if basic1 != basic2 or basic1 == BasicType.OTHER:
        return Relation.UNRELATED

    num_shared = len(domain1 & domain2)
    if num_shared > SHARED_RATIO * num_rows:
        return Relation.SHARED_DOMAIN
    return Relation.UNRELATED


def column_relations(
    table: Table,
    domains: List[Set[str]],
    types: List[SemanticType],
) -> ColumnRelations:
    """
    Evaluate every pair of distinct columns.

    Args:
        table: Table the domains and types were computed from
        domains: Output of column_domains()
        types: Output of column_types()

    Returns:
        ColumnRelations with an entry for every pair i < j.
    """
    num_rows = table.num_rows
    num_cols = table.num_columns
    relations = ColumnRelations(num_cols)
    for col1 in range(num_cols):
        for col2 in range(col1 + 1, num_cols):
            relation = pair_relation(domains[col1], domains[col2], types[col1], types[col2], num_rows)
            relations.set(col1, col2, relation)
            if relation == Relation.SHARED_DOMAIN:
                logger.debug(
                    f"Shared domain: {table.column_name(col1)!r} <-> {table.column_name(col2)!r}"
                )
    return relations
