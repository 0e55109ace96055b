"""Concrete algorithms: uniform-cost search (Dijkstra) and A*."""
from enum import Enum
from typing import Optional, Union

from .best_first import BestFirstSearch
from .frontier import AStarStrategy, UniformCostStrategy
from .heuristics import HeuristicFunction
from ..domain.models.grid import Grid
from ..shared.exceptions import ValidationError


class PathfindingAlgorithm(Enum):
    """Available pathfinding algorithms."""
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @property
    def display_name(self) -> str:
        return "Dijkstra" if self is PathfindingAlgorithm.DIJKSTRA else "A*"

    @classmethod
    def parse(cls, value: Union[str, 'PathfindingAlgorithm']) -> 'PathfindingAlgorithm':
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("*", "star").replace("-", "")
        aliases = {"ucs": "dijkstra", "uniformcost": "dijkstra", "a": "astar"}
        try:
            return cls(aliases.get(normalized, normalized))
        except ValueError:
            raise ValidationError(
                f"Unknown pathfinding algorithm: {value}", field="algorithm", value=value
            ) from None


def UniformCostSearch(grid: Grid, max_expansions: Optional[int] = None) -> BestFirstSearch:
    """Dijkstra: cells are expanded in order of accumulated cost."""
    return BestFirstSearch(grid, UniformCostStrategy(), max_expansions=max_expansions)


def AStar(grid: Grid, heuristic: Optional[HeuristicFunction] = None,
          max_expansions: Optional[int] = None) -> BestFirstSearch:
    """A*: cells are expanded in order of accumulated cost plus heuristic."""
    return BestFirstSearch(grid, AStarStrategy(heuristic), max_expansions=max_expansions)


def create_search(algorithm: Union[str, PathfindingAlgorithm], grid: Grid,
                  max_expansions: Optional[int] = None) -> BestFirstSearch:
    """Fresh single-use engine for the named algorithm."""
    algorithm = PathfindingAlgorithm.parse(algorithm)
    if algorithm is PathfindingAlgorithm.ASTAR:
        return AStar(grid, max_expansions=max_expansions)
    return UniformCostSearch(grid, max_expansions=max_expansions)
