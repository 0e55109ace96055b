"""Search algorithms over a Grid."""
from .best_first import BestFirstSearch, NO_PATH
from .frontier import Frontier, SearchStrategy, UniformCostStrategy, AStarStrategy
from .heuristics import (
    HeuristicFunction, ManhattanHeuristic, OctileHeuristic,
    EuclideanHeuristic, ZeroHeuristic, default_heuristic
)
from .priority_queue import BoundedPriorityQueue
from .variants import PathfindingAlgorithm, UniformCostSearch, AStar, create_search

__all__ = [
    'BestFirstSearch', 'NO_PATH',
    'Frontier', 'SearchStrategy', 'UniformCostStrategy', 'AStarStrategy',
    'HeuristicFunction', 'ManhattanHeuristic', 'OctileHeuristic',
    'EuclideanHeuristic', 'ZeroHeuristic', 'default_heuristic',
    'BoundedPriorityQueue',
    'PathfindingAlgorithm', 'UniformCostSearch', 'AStar', 'create_search'
]
