"""View registry - maps a view tag to its View class"""
from typing import Dict, List, Type

from ..errors import UnknownViewError
from .base import View
from .table_views import GraphView, ScatterPlotView, ScatterPlot3DView
from .hierarchy_views import TreemapView, TreeringView, PhyloTreeView

VIEW_REGISTRY: Dict[str, Type[View]] = {
    cls.kind: cls
    for cls in (GraphView, ScatterPlotView, ScatterPlot3DView, TreemapView, TreeringView, PhyloTreeView)
}


def view_types() -> List[str]:
    """Registered view tags, sorted."""
    return sorted(VIEW_REGISTRY)


def create_view(kind: str) -> View:
    try:
        return VIEW_REGISTRY[kind]()
    except KeyError:
        raise UnknownViewError(f"Unknown view type '{kind}'. Available: {view_types()}") from None


def create_views() -> Dict[str, View]:
    """One instance of every registered view."""
    return {kind: cls() for kind, cls in VIEW_REGISTRY.items()}
