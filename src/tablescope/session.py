"""
View session - the active dataset and view, guarded by one lock.

Loading a table (reset, read, profile, install) and every read accessor run
under the same lock, so readers never see a half-loaded table.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Generator, List, Optional, Union

from .config import Settings, load_settings
from .errors import UnknownViewError
from .loader import load_data
from .metadata import TableProfile, profile_table
from .table import Table, TreeNode
from .views import View, create_views, view_types

logger = logging.getLogger(__name__)


class ViewSession:
    """Holds the active table or tree, its profile and the current view."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        self._lock = threading.RLock()
        self._views: Dict[str, View] = create_views()
        if self.settings.default_view not in self._views:
            raise UnknownViewError(
                f"Unknown default view '{self.settings.default_view}'. Available: {view_types()}"
            )
        self._view_type = self.settings.default_view
        self._source: Optional[str] = None
        self.table: Optional[Table] = None
        self.tree: Optional[TreeNode] = None
        self.profile: Optional[TableProfile] = None

    @contextmanager
    def locked(self) -> Generator['ViewSession', None, None]:
        """
        Hold the session lock for the duration of the block.

        Usage:
            with session.locked():
                rows = session.table.num_rows
        """
        self._lock.acquire()
        try:
            yield self
        finally:
            self._lock.release()

    # -- loading -------------------------------------------------------

    @property
    def source(self) -> Optional[str]:
        return self._source

    def _reset(self) -> None:
        self._source = None
        self.table = None
        self.tree = None
        self.profile = None

    def load(self, file_path: str, delimiter: Optional[str] = None) -> Union[Table, TreeNode]:
        """
        Load a file and make it the active dataset. Loading the path that is
        already active does nothing.
        """
        with self.locked():
            if file_path == self._source:
                return self.table if self.table is not None else self.tree
            self._reset()
            data = load_data(file_path, delimiter or self.settings.delimiter)
            self.set_data(data)
            self._source = file_path
            return data

    def set_data(self, data: Union[Table, TreeNode]) -> None:
        if isinstance(data, Table):
            self.set_table(data)
        elif isinstance(data, TreeNode):
            self.set_tree(data)
        else:
            raise TypeError(f"Expected Table or TreeNode, got {type(data).__name__}")

    def set_table(self, table: Table) -> TableProfile:
        """Profile the table (converting its columns in place) and make it active."""
        with self.locked():
            self._reset()
            self.profile = profile_table(table)
            self.table = table
            self._setup_view()
            return self.profile

    def set_tree(self, tree: TreeNode) -> None:
        with self.locked():
            self._reset()
            self.tree = tree
            self._setup_view()

    # -- view selection ------------------------------------------------

    def view_types(self) -> List[str]:
        return view_types()

    @property
    def view_type(self) -> str:
        with self.locked():
            return self._view_type

    def set_view_type(self, view_type: str) -> None:
        with self.locked():
            if view_type not in self._views:
                raise UnknownViewError(f"Unknown view type '{view_type}'. Available: {view_types()}")
            if view_type != self._view_type:
                self._view_type = view_type
                self._setup_view()

    @property
    def view(self) -> View:
        with self.locked():
            return self._views[self._view_type]

    def _setup_view(self) -> None:
        view = self.view
        if self.tree is not None:
            view.configure_tree(self.tree)
        elif self.table is not None:
            view.configure(self.table, self.profile)
        else:
            view.clear()
        logger.debug(f"View {self._view_type} configured")

    # -- tabular accessors ---------------------------------------------

    def table_rows(self) -> int:
        with self.locked():
            return self.table.num_rows if self.table is not None else 0

    def table_columns(self) -> int:
        with self.locked():
            return self.table.num_columns if self.table is not None else 0

    def table_column_name(self, col: int) -> str:
        with self.locked():
            if self.table is not None and 0 <= col < self.table.num_columns:
                return self.table.column_name(col)
            return ''

    def table_data(self, row: int, col: int) -> str:
        with self.locked():
            if (self.table is not None and 0 <= row < self.table.num_rows
                    and 0 <= col < self.table.num_columns):
                return self.table.text(row, col)
            return ''

    # -- view attributes -----------------------------------------------

    def attributes(self) -> List[str]:
        with self.locked():
            return self.view.attributes()

    def attribute_options(self, attribute: str) -> List[str]:
        with self.locked():
            return self.view.attribute_options(attribute)

    def get_attribute(self, attribute: str) -> str:
        with self.locked():
            return self.view.get_attribute(attribute)

    def set_attribute(self, attribute: str, value: str) -> None:
        with self.locked():
            self.view.set_attribute(attribute, value)

    def prepare_for_render(self) -> dict:
        with self.locked():
            return self.view.prepare_for_render()
