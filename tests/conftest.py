"""Pytest configuration and shared fixtures for the tablescope test suite."""

import pytest

from tablescope.config import Settings
from tablescope.table import Table


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that read or write files on disk"
    )


@pytest.fixture
def scenario_table():
    """id / score / label table: integer ids, fractional scores, two labels."""
    return Table.from_columns({
        'id': [1, 2, 3, 4, 5],
        'score': [1.5, 2.5, 3.5, 4.5, 5.5],
        'label': ['a', 'b', 'a', 'b', 'a'],
    })


@pytest.fixture
def edge_table():
    """Edge list as text: two string columns sharing node names, one weight column."""
    return Table.from_columns({
        'src': ['a', 'b', 'c', 'a'],
        'dst': ['b', 'c', 'a', 'c'],
        'weight': ['1.5', '2.5', '0.5', '3.5'],
    })


@pytest.fixture
def settings():
    """Settings that ignore the caller's environment."""
    return Settings(log_level='WARNING', default_view='GRAPH', delimiter=None)


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path as a string."""
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return str(path)
    return _write
