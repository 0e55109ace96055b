"""
gridpath - shortest-path search on weighted 2-D grid maps

Uniform-cost search (Dijkstra) and A* share one best-first engine; they
differ only in the priority a cell is queued with.

Quick Start:
    from gridpath import Grid, AStar

    grid = Grid.from_rows(["...", ".T.", "..."])
    engine = AStar(grid)
    steps = engine.search((0, 0), (2, 2))
    route = engine.get_route()
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .domain.models import Grid, Node, Path, Route
from .algorithms import (
    BestFirstSearch, NO_PATH, BoundedPriorityQueue, Frontier,
    SearchStrategy, UniformCostStrategy, AStarStrategy,
    PathfindingAlgorithm, UniformCostSearch, AStar, create_search
)
from .application import Scenario, SearchResult, PerformanceTester
from .shared.exceptions import (
    GridPathException, ConfigurationError, ValidationError, SearchError,
    GridError, InvalidPositionError, MapLoadError, SearchStateError
)

__all__ = [
    '__version__',
    'Grid', 'Node', 'Path', 'Route',
    'BestFirstSearch', 'NO_PATH', 'BoundedPriorityQueue', 'Frontier',
    'SearchStrategy', 'UniformCostStrategy', 'AStarStrategy',
    'PathfindingAlgorithm', 'UniformCostSearch', 'AStar', 'create_search',
    'Scenario', 'SearchResult', 'PerformanceTester',
    'GridPathException', 'ConfigurationError', 'ValidationError', 'SearchError',
    'GridError', 'InvalidPositionError', 'MapLoadError', 'SearchStateError'
]
