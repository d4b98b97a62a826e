"""Tests for the view registry and the individual views."""

import pytest

from tablescope.errors import UnknownAttributeError, UnknownViewError
from tablescope.metadata import profile_table
from tablescope.table import Table, TreeNode
from tablescope.views import VIEW_REGISTRY, create_view, view_types


@pytest.fixture
def tree():
    return TreeNode('root', children=[
        TreeNode('ab', children=[TreeNode('a'), TreeNode('b')]),
        TreeNode('c'),
    ])


def configured(kind, table):
    view = create_view(kind)
    view.configure(table, profile_table(table))
    return view


class TestRegistry:

    def test_all_views_registered(self):
        assert view_types() == ['3D SCATTER', 'GRAPH', 'PHYLOTREE', 'SCATTER', 'TREEMAP', 'TREERING']

    def test_registry_keys_match_kind(self):
        for kind, cls in VIEW_REGISTRY.items():
            assert cls.kind == kind

    def test_unknown_view(self):
        with pytest.raises(UnknownViewError):
            create_view('PIE')
        with pytest.raises(KeyError):
            create_view('PIE')


class TestGraphView:

    def test_defaults_to_shared_pair(self, edge_table):
        view = configured('GRAPH', edge_table)
        assert view.get_attribute('source') == 'src'
        assert view.get_attribute('target') == 'dst'
        assert 'weight' not in view.attribute_options('source')

    def test_prepare_for_render(self, edge_table):
        render = configured('GRAPH', edge_table).prepare_for_render()
        assert render == {'kind': 'GRAPH', 'source': 'src', 'target': 'dst', 'vertices': 3, 'edges': 4}

    def test_without_shared_pair(self, scenario_table):
        view = configured('GRAPH', scenario_table)
        assert view.attribute_options('source') == ['id', 'label']
        assert view.get_attribute('source') == 'id'
        assert view.get_attribute('target') == 'label'

    def test_tree_leaves_graph_empty(self, tree):
        view = create_view('GRAPH')
        view.configure_tree(tree)
        assert view.prepare_for_render()['edges'] == 0


class TestDuplicateColumnNames:

    def test_graph_uses_both_shared_columns(self):
        table = Table.from_rows(['node', 'node'], [['a', 'b'], ['b', 'c'], ['c', 'd'], ['a', 'd']])
        view = configured('GRAPH', table)
        assert (view.selected_column('source'), view.selected_column('target')) == (0, 1)
        assert view.prepare_for_render()['vertices'] == 4

    def test_scatter_axes_on_separate_columns(self):
        table = Table.from_rows(['v', 'v'], [['0.5', '1.5'], ['2.5', '3.5'], ['4.5', '5.5']])
        view = configured('SCATTER', table)
        assert view.selected_column('x') == 0
        assert view.selected_column('y') == 1

    def test_set_attribute_keeps_selected_duplicate(self):
        table = Table.from_rows(['v', 'v'], [['0.5', '1.5'], ['2.5', '3.5'], ['4.5', '5.5']])
        view = configured('SCATTER', table)
        view.set_attribute('y', 'v')
        assert view.selected_column('y') == 1

    def test_set_attribute_by_name_picks_first_match(self, scenario_table):
        view = configured('SCATTER', scenario_table)
        view.set_attribute('x', 'score')
        assert view.selected_column('x') == 1
        view.set_attribute('color', 'label')
        assert view.selected_column('color') == 2


class TestScatterViews:

    def test_numeric_axes_and_category_color(self, edge_table):
        view = configured('SCATTER', edge_table)
        assert view.attribute_options('x') == ['weight']
        assert view.attribute_options('color') == ['', 'src', 'dst']
        assert view.get_attribute('x') == 'weight'
        assert view.get_attribute('y') == 'weight'

    def test_set_attribute_validates(self, scenario_table):
        view = configured('SCATTER', scenario_table)
        view.set_attribute('color', 'label')
        assert view.get_attribute('color') == 'label'
        with pytest.raises(ValueError):
            view.set_attribute('x', 'label')
        with pytest.raises(UnknownAttributeError):
            view.get_attribute('size')

    def test_3d_scatter(self, scenario_table):
        view = configured('3D SCATTER', scenario_table)
        assert view.attributes() == ['x', 'y', 'z']
        render = view.prepare_for_render()
        assert (render['x'], render['y'], render['z']) == ('id', 'score', 'score')
        assert render['points'] == 5


class TestHierarchyViews:

    def test_treemap_from_table(self, scenario_table):
        view = configured('TREEMAP', scenario_table)
        assert view.attribute_options('hierarchy') == ['label']
        assert view.attribute_options('size') == ['', 'id', 'score']
        render = view.prepare_for_render()
        assert render['hierarchy'] == 'label'
        assert render['groups'] == 2

    @pytest.mark.parametrize('kind', ['TREEMAP', 'TREERING'])
    def test_from_tree(self, kind, tree):
        view = create_view(kind)
        view.configure_tree(tree)
        render = view.prepare_for_render()
        assert render['nodes'] == 5
        assert render['leaves'] == 3

    def test_phylotree(self, tree, scenario_table):
        view = create_view('PHYLOTREE')
        view.configure_tree(tree)
        assert view.get_attribute('label_size') == 'medium'
        view.set_attribute('label_size', 'large')
        assert view.prepare_for_render()['label_size'] == 'large'

        view.configure(scenario_table, profile_table(scenario_table))
        assert view.prepare_for_render() == {'kind': 'PHYLOTREE', 'nodes': 0, 'leaves': 0}
