"""Full table profiling: domains -> types -> conversion -> relations."""
import logging
from dataclasses import dataclass, field
from typing import List, Set

from ..table import Table
from .convert import convert_table_columns
from .domains import column_domains
from .inference import BasicType, SemanticType, basic_type, column_types
from .relations import ColumnRelations, column_relations

logger = logging.getLogger(__name__)


@dataclass
class TableProfile:
    """Everything inferred about a table during one load."""
    domains: List[Set[str]] = field(default_factory=list)
    types: List[SemanticType] = field(default_factory=list)
    relations: ColumnRelations = field(default_factory=lambda: ColumnRelations(0))

    @property
    def basic_types(self) -> List[BasicType]:
        return [basic_type(t) for t in self.types]

    def columns_of_type(self, *semantic_types: SemanticType) -> List[int]:
        return [col for col, t in enumerate(self.types) if t in semantic_types]


def profile_table(table: Table) -> TableProfile:
    """
    Infer column types, convert the table in place and detect relations.

    Domains are collected before conversion, so relations compare the
    original text values.
    """
    domains = column_domains(table)
    types = column_types(table, domains)
    convert_table_columns(table, types)
    relations = column_relations(table, domains, types)

    shared = list(relations.shared_pairs())
    logger.info(
        f"Profiled table: {table.num_rows} rows, {table.num_columns} columns, "
        f"{len(shared)} shared-domain pair(s)"
    )
    return TableProfile(domains=domains, types=types, relations=relations)
