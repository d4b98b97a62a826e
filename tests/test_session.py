"""Tests for ViewSession: loading, accessors, view selection and locking."""

import threading

import pytest

from tablescope.config import Settings
from tablescope.errors import LoaderError, UnknownViewError
from tablescope.metadata import SemanticType
from tablescope.session import ViewSession
from tablescope.table import Table, TreeNode


@pytest.fixture
def session(settings):
    return ViewSession(settings)


class TestAccessors:

    def test_no_table(self, session):
        assert session.table_rows() == 0
        assert session.table_columns() == 0
        assert session.table_column_name(0) == ''
        assert session.table_data(0, 0) == ''

    def test_after_set_table(self, session, scenario_table):
        profile = session.set_table(scenario_table)
        assert profile.types[1] == SemanticType.CONTINUOUS
        assert session.table_rows() == 5
        assert session.table_columns() == 3
        assert session.table_column_name(2) == 'label'
        assert session.table_data(0, 1) == '1.5'
        assert session.table_data(4, 0) == '5'

    def test_out_of_range(self, session, scenario_table):
        session.set_table(scenario_table)
        assert session.table_column_name(-1) == ''
        assert session.table_column_name(3) == ''
        assert session.table_data(5, 0) == ''
        assert session.table_data(0, -1) == ''

    def test_table_converted_in_place(self, session):
        table = Table.from_columns({'n': ['1', '2', '3']})
        session.set_table(table)
        assert session.table is table
        assert str(table.frame.dtypes.iloc[0]) == 'Int64'


class TestLoading:

    def test_load_csv(self, session, write_file):
        path = write_file('data.csv', 'id,score\n1,0.5\n2,1.5\n3,2.5\n')
        table = session.load(path)
        assert session.source == path
        assert session.table is table
        assert session.profile.types == [SemanticType.INTEGER_DATA, SemanticType.CONTINUOUS]

    def test_same_path_is_noop(self, session, write_file):
        path = write_file('data.csv', 'a\nx\n')
        first = session.load(path)
        assert session.load(path) is first

    def test_tree_replaces_table(self, session, write_file):
        session.load(write_file('data.csv', 'a\nx\n'))
        tree = session.load(write_file('tree.tre', '(A,B);'))
        assert isinstance(tree, TreeNode)
        assert session.table is None
        assert session.profile is None
        assert session.table_rows() == 0

    def test_failed_load_clears_state(self, session, scenario_table, tmp_path):
        session.set_table(scenario_table)
        with pytest.raises(LoaderError):
            session.load(str(tmp_path / 'missing.csv'))
        assert session.table is None
        assert session.source is None

    def test_set_data_dispatch(self, session, scenario_table):
        session.set_data(TreeNode('root'))
        assert session.tree is not None
        session.set_data(scenario_table)
        assert session.tree is None
        assert session.table is scenario_table
        with pytest.raises(TypeError):
            session.set_data({'not': 'a table'})

    def test_delimiter_from_settings(self, write_file):
        session = ViewSession(Settings(delimiter=';'))
        table = session.load(write_file('data.txt', 'x;y\n1;2\n'))
        assert table.column_names() == ['x', 'y']


class TestViewSelection:

    def test_default_view(self, session):
        assert session.view_type == 'GRAPH'
        assert session.attributes() == ['source', 'target']

    def test_switch_view(self, session, scenario_table):
        session.set_table(scenario_table)
        session.set_view_type('SCATTER')
        assert session.attributes() == ['x', 'y', 'color']
        assert session.get_attribute('x') == 'id'
        session.set_attribute('x', 'score')
        assert session.get_attribute('x') == 'score'
        assert session.prepare_for_render()['x'] == 'score'

    def test_unknown_view(self, session):
        with pytest.raises(UnknownViewError):
            session.set_view_type('PIE')

    def test_unknown_default_view(self):
        with pytest.raises(UnknownViewError):
            ViewSession(Settings(default_view='PIE'))

    def test_view_types(self, session):
        assert 'TREEMAP' in session.view_types()


class TestLocking:

    def test_reader_waits_for_lock(self, session, scenario_table):
        session.set_table(scenario_table)
        result = {}

        def read():
            result['rows'] = session.table_rows()

        with session.locked():
            reader = threading.Thread(target=read)
            reader.start()
            reader.join(timeout=0.2)
            assert reader.is_alive()
            assert 'rows' not in result

        reader.join(timeout=5)
        assert result['rows'] == 5

    def test_view_property_waits_for_lock(self, session):
        result = {}

        def read():
            result['kind'] = session.view.kind

        with session.locked():
            reader = threading.Thread(target=read)
            reader.start()
            reader.join(timeout=0.2)
            assert reader.is_alive()

        reader.join(timeout=5)
        assert result['kind'] == 'GRAPH'

    def test_lock_released_on_error(self, session):
        with pytest.raises(RuntimeError):
            with session.locked():
                raise RuntimeError('boom')

        done = threading.Event()
        thread = threading.Thread(target=lambda: (session.table_rows(), done.set()))
        thread.start()
        thread.join(timeout=5)
        assert done.is_set()
