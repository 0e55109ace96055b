"""Frontier: priority queue plus per-cell bookkeeping, and ordering strategies."""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from .heuristics import HeuristicFunction, default_heuristic
from .priority_queue import BoundedPriorityQueue
from ..domain.models.node import Node


class SearchStrategy(ABC):
    """Decides the queue priority of a cell reached with a given cost."""

    name = "best-first"

    @abstractmethod
    def compute_priority(self, accumulated_cost: float, cell: Node, goal: Node,
                         direction_count: int) -> float:
        pass


class UniformCostStrategy(SearchStrategy):
    """Priority is the accumulated path cost (Dijkstra)."""

    name = "Dijkstra"

    def compute_priority(self, accumulated_cost: float, cell: Node, goal: Node,
                         direction_count: int) -> float:
        return accumulated_cost


class AStarStrategy(SearchStrategy):
    """Priority is accumulated cost plus a heuristic estimate to the goal.

    Without an explicit heuristic the estimate matches the directionality:
    Manhattan for 4 directions, octile for 8. A custom heuristic must never
    overestimate, or the returned path is not guaranteed to be shortest.
    """

    name = "A*"

    def __init__(self, heuristic: Optional[HeuristicFunction] = None):
        self.heuristic = heuristic

    def heuristic_for(self, direction_count: int) -> HeuristicFunction:
        return self.heuristic or default_heuristic(direction_count)

    def compute_priority(self, accumulated_cost: float, cell: Node, goal: Node,
                         direction_count: int) -> float:
        return accumulated_cost + self.heuristic_for(direction_count).calculate(cell, goal)


class Frontier:
    """Discovered-but-unfinalized cells ordered by strategy priority.

    Alongside the queue the frontier keeps two grid-shaped arrays: whether a
    cell has been finalized and the best cost seen for it. A finalized cell
    is never offered again, and a cell sits in the queue at most once.
    """

    def __init__(self, shape: Tuple[int, int], strategy: SearchStrategy, goal: Node,
                 direction_count: int = 4, capacity: Optional[int] = None):
        rows, cols = shape
        self.strategy = strategy
        self.goal = goal
        self.direction_count = direction_count
        self.queue = BoundedPriorityQueue(rows * cols if capacity is None else capacity)
        self.finalized = np.zeros(shape, dtype=bool)
        self.best_cost = np.full(shape, np.inf, dtype=np.float64)

    def offer(self, cell: Node, tentative_cost: float) -> bool:
        """Queue a cell if it is unfinalized and the cost beats its best so far.

        Returns:
            True if the cell's best cost was improved
        """
        if self.finalized[cell.row, cell.col]:
            return False
        if tentative_cost >= self.best_cost[cell.row, cell.col]:
            return False

        self.best_cost[cell.row, cell.col] = tentative_cost
        priority = self.strategy.compute_priority(
            tentative_cost, cell, self.goal, self.direction_count
        )
        self.queue.insert(cell, priority)
        return True

    def pop_best(self) -> Optional[Node]:
        """Remove and return the lowest-priority cell, or None when exhausted."""
        return self.queue.delete_min()

    def finalize(self, cell: Node):
        self.finalized[cell.row, cell.col] = True

    def has_been_finalized(self, cell: Node) -> bool:
        return bool(self.finalized[cell.row, cell.col])

    def best_known_cost(self, cell: Node) -> float:
        """Best cost recorded for the cell, or infinity if never reached."""
        return float(self.best_cost[cell.row, cell.col])

    def finalized_count(self) -> int:
        return int(self.finalized.sum())

    def is_empty(self) -> bool:
        return self.queue.is_empty()

    def __len__(self) -> int:
        return len(self.queue)
