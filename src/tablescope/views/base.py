"""View interface shared by every view kind.

A view is configured with the active table (plus its profile) or tree,
exposes named attributes the UI can list and change, and describes what it
would draw through prepare_for_render(). Drawing itself happens elsewhere.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..errors import UnknownAttributeError
from ..metadata import SemanticType, TableProfile
from ..table import Table, TreeNode


class View(ABC):
    """Base class for views. Subclasses declare ATTRIBUTES and fill options."""

    kind: str = ''
    ATTRIBUTES: List[str] = []

    def __init__(self):
        self.table: Optional[Table] = None
        self.profile: Optional[TableProfile] = None
        self.tree: Optional[TreeNode] = None
        self._values: Dict[str, str] = {}
        self._options: Dict[str, List[str]] = {}
        # column position behind each column-valued attribute
        self._columns: Dict[str, int] = {}

    # -- configuration -------------------------------------------------

    def configure(self, table: Table, profile: TableProfile) -> None:
        """Attach a profiled table and pick default attribute values."""
        self.table, self.profile, self.tree = table, profile, None
        self._options = self.table_options()
        self._values = self.default_values()
        self._columns = {name: self.column_index(value) for name, value in self._values.items()}

    def configure_tree(self, tree: TreeNode) -> None:
        self.table, self.profile, self.tree = None, None, tree
        self._options = self.tree_options()
        self._values = {name: (opts[0] if opts else '') for name, opts in self._options.items()}
        self._columns = {}

    def clear(self) -> None:
        self.table = self.profile = self.tree = None
        self._values = {}
        self._options = {}
        self._columns = {}

    @abstractmethod
    def table_options(self) -> Dict[str, List[str]]:
        """Allowed values per attribute for the current table."""

    def tree_options(self) -> Dict[str, List[str]]:
        return {name: [] for name in self.ATTRIBUTES}

    def default_values(self) -> Dict[str, str]:
        return {name: (opts[0] if opts else '') for name, opts in self._options.items()}

    @abstractmethod
    def prepare_for_render(self) -> dict:
        """Describe the current configuration for the renderer."""

    # -- attributes ----------------------------------------------------

    def attributes(self) -> List[str]:
        return list(self.ATTRIBUTES)

    def _check(self, attribute: str) -> None:
        if attribute not in self.ATTRIBUTES:
            raise UnknownAttributeError(f"View '{self.kind}' has no attribute '{attribute}'")

    def attribute_options(self, attribute: str) -> List[str]:
        self._check(attribute)
        return list(self._options.get(attribute, []))

    def get_attribute(self, attribute: str) -> str:
        self._check(attribute)
        return self._values.get(attribute, '')

    def set_attribute(self, attribute: str, value: str) -> None:
        self._check(attribute)
        options = self._options.get(attribute, [])
        if value not in options:
            raise ValueError(f"'{value}' is not a valid option for '{attribute}': {options}")
        self._values[attribute] = value
        if self.table is not None:
            current = self._columns.get(attribute, -1)
            if current < 0 or self.table.column_name(current) != value:
                self._columns[attribute] = self.column_index(value)

    # -- helpers for subclasses ----------------------------------------

    def column_names_where(self, *semantic_types: SemanticType) -> List[str]:
        if self.table is None or self.profile is None:
            return []
        return [self.table.column_name(col) for col in self.profile.columns_of_type(*semantic_types)]

    def column_positions_where(self, *semantic_types: SemanticType) -> List[int]:
        if self.table is None or self.profile is None:
            return []
        return self.profile.columns_of_type(*semantic_types)

    def select_column(self, attribute: str, col: int) -> None:
        """Point an attribute at a column by position."""
        self._values[attribute] = self.table.column_name(col)
        self._columns[attribute] = col

    def selected_column(self, attribute: str) -> int:
        """Position of the column chosen for an attribute, -1 if none."""
        self._check(attribute)
        return self._columns.get(attribute, -1)

    def column_index(self, name: str) -> int:
        """
        Position of the first column with this name, -1 if absent.

        Setting an attribute by a duplicated name picks the first such column;
        use select_column() to reach the others.
        """
        if self.table is None or not name:
            return -1
        names = self.table.column_names()
        return names.index(name) if name in names else -1


NUMERIC_TYPES = (SemanticType.CONTINUOUS, SemanticType.INTEGER_DATA, SemanticType.INTEGER_CATEGORY)
CATEGORY_TYPES = (SemanticType.INTEGER_CATEGORY, SemanticType.STRING_CATEGORY)
LINKABLE_TYPES = (
    SemanticType.INTEGER_DATA, SemanticType.INTEGER_CATEGORY,
    SemanticType.STRING_DATA, SemanticType.STRING_CATEGORY,
)
