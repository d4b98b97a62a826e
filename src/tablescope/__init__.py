"""tablescope - column type inference and relation detection for tabular data"""
from .table import Table, TreeNode, cell_text, parse_number
from .metadata import (
    SemanticType,
    BasicType,
    Relation,
    ColumnRelations,
    TableProfile,
    basic_type,
    column_domains,
    column_types,
    convert_table_columns,
    column_relations,
    profile_table,
)
from .session import ViewSession

__version__ = '0.1.0'
