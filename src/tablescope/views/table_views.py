"""Views over tabular data: graph, 2D scatter, 3D scatter."""
from typing import Dict, List

from ..metadata import TableProfile
from ..table import Table
from .base import CATEGORY_TYPES, LINKABLE_TYPES, NUMERIC_TYPES, View


class GraphView(View):
    """Edges from pairs of linked columns (one edge per row)."""

    kind = 'GRAPH'
    ATTRIBUTES = ['source', 'target']

    def table_options(self) -> Dict[str, List[str]]:
        linkable = self.column_names_where(*LINKABLE_TYPES)
        return {'source': linkable, 'target': list(linkable)}

    def configure(self, table: Table, profile: TableProfile) -> None:
        super().configure(table, profile)
        # Prefer the first pair of columns sharing a domain
        pairs = profile.relations.shared_pairs()
        if pairs:
            col1, col2 = pairs[0]
        else:
            linkable = self.column_positions_where(*LINKABLE_TYPES)
            if not linkable:
                return
            col1, col2 = linkable[0], linkable[min(1, len(linkable) - 1)]
        self.select_column('source', col1)
        self.select_column('target', col2)

    def prepare_for_render(self) -> dict:
        source = self.selected_column('source')
        target = self.selected_column('target')
        if source < 0 or target < 0:
            return {'kind': self.kind, 'vertices': 0, 'edges': 0}
        vertices = set(self.table.column_texts(source)) | set(self.table.column_texts(target))
        vertices.discard('')
        return {
            'kind': self.kind,
            'source': self.get_attribute('source'),
            'target': self.get_attribute('target'),
            'vertices': len(vertices),
            'edges': self.table.num_rows,
        }


class ScatterPlotView(View):
    kind = 'SCATTER'
    ATTRIBUTES = ['x', 'y', 'color']
    AXES = ['x', 'y']

    def table_options(self) -> Dict[str, List[str]]:
        numeric = self.column_names_where(*NUMERIC_TYPES)
        options = {axis: list(numeric) for axis in self.AXES}
        if 'color' in self.ATTRIBUTES:
            options['color'] = [''] + self.column_names_where(*CATEGORY_TYPES)
        return options

    def configure(self, table: Table, profile: TableProfile) -> None:
        super().configure(table, profile)
        numeric = self.column_positions_where(*NUMERIC_TYPES)
        if numeric:
            for i, axis in enumerate(self.AXES):
                self.select_column(axis, numeric[min(i, len(numeric) - 1)])

    def prepare_for_render(self) -> dict:
        render = {'kind': self.kind, 'points': self.table.num_rows if self.table is not None else 0}
        for name in self.ATTRIBUTES:
            render[name] = self.get_attribute(name)
        return render


class ScatterPlot3DView(ScatterPlotView):
    kind = '3D SCATTER'
    ATTRIBUTES = ['x', 'y', 'z']
    AXES = ['x', 'y', 'z']
