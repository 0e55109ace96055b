"""Distance estimates for A* on 4- and 8-connected grids."""
import math
from abc import ABC, abstractmethod

from ..domain.models.node import Node

SQRT2_MINUS_2 = math.sqrt(2.0) - 2.0


class HeuristicFunction(ABC):
    """Abstract base class for heuristic functions."""
    
    @abstractmethod
    def calculate(self, start: Node, end: Node) -> float:
        """Estimate the remaining cost between two cells."""
        pass
    
    def __call__(self, start: Node, end: Node) -> float:
        return self.calculate(start, end)


class ManhattanHeuristic(HeuristicFunction):
    """Manhattan distance; exact lower bound for orthogonal unit moves."""
    
    def calculate(self, start: Node, end: Node) -> float:
        return float(abs(start.row - end.row) + abs(start.col - end.col))


class OctileHeuristic(HeuristicFunction):
    """Octile distance; exact lower bound when diagonal moves cost sqrt(2)."""
    
    def calculate(self, start: Node, end: Node) -> float:
        d_row = abs(start.row - end.row)
        d_col = abs(start.col - end.col)
        return (d_row + d_col) + SQRT2_MINUS_2 * min(d_row, d_col)


class EuclideanHeuristic(HeuristicFunction):
    """Straight-line distance."""
    
    def calculate(self, start: Node, end: Node) -> float:
        return math.hypot(start.row - end.row, start.col - end.col)


class ZeroHeuristic(HeuristicFunction):
    """Zero heuristic; turns A* into uniform-cost search."""
    
    def calculate(self, start: Node, end: Node) -> float:
        return 0.0


def default_heuristic(direction_count: int) -> HeuristicFunction:
    """Tightest admissible heuristic for the given directionality.
    
    Terrain weights are never below 1, so both estimates stay admissible
    and consistent on weighted grids.
    """
    if direction_count == 8:
        return OctileHeuristic()
    return ManhattanHeuristic()
