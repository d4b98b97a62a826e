"""Column type inference, conversion and relation detection"""
from .domains import column_domains
from .inference import SemanticType, BasicType, basic_type, classify_column, column_types
from .convert import convert_table_columns, convert_column, parse_integer
from .relations import Relation, ColumnRelations, column_relations
from .profile import TableProfile, profile_table
