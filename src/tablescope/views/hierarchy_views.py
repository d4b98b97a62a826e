"""Hierarchical views: treemap, tree ring and phylogenetic tree."""
from typing import Dict, List

from ..table import TreeNode
from .base import CATEGORY_TYPES, NUMERIC_TYPES, View


def tree_summary(tree: TreeNode) -> dict:
    return {'nodes': tree.num_nodes, 'leaves': len(tree.leaves())}


class TreemapView(View):
    """Nested rectangles: a tree as-is, or a table grouped by a category column."""

    kind = 'TREEMAP'
    ATTRIBUTES = ['hierarchy', 'size']

    def table_options(self) -> Dict[str, List[str]]:
        return {
            'hierarchy': self.column_names_where(*CATEGORY_TYPES),
            'size': [''] + self.column_names_where(*NUMERIC_TYPES),
        }

    def prepare_for_render(self) -> dict:
        if self.tree is not None:
            return {'kind': self.kind, **tree_summary(self.tree)}
        render = {'kind': self.kind, 'hierarchy': self.get_attribute('hierarchy'),
                  'size': self.get_attribute('size'), 'groups': 0}
        col = self.selected_column('hierarchy')
        if col >= 0:
            render['groups'] = len(self.profile.domains[col])
        return render


class TreeringView(TreemapView):
    kind = 'TREERING'


class PhyloTreeView(View):
    """Phylogenetic tree layout. Trees only; a table leaves it empty."""

    kind = 'PHYLOTREE'
    ATTRIBUTES = ['label_size']
    LABEL_SIZES = ['small', 'medium', 'large']

    def table_options(self) -> Dict[str, List[str]]:
        return {'label_size': []}

    def tree_options(self) -> Dict[str, List[str]]:
        return {'label_size': list(self.LABEL_SIZES)}

    def configure_tree(self, tree: TreeNode) -> None:
        super().configure_tree(tree)
        self._values['label_size'] = 'medium'

    def prepare_for_render(self) -> dict:
        if self.tree is None:
            return {'kind': self.kind, 'nodes': 0, 'leaves': 0}
        return {'kind': self.kind, 'label_size': self.get_attribute('label_size'), **tree_summary(self.tree)}
