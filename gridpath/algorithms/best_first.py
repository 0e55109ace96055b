"""Generic best-first search over a Grid."""
import logging
import math
import time
from typing import List, Optional

import numpy as np

from .frontier import Frontier, SearchStrategy
from ..domain.models.grid import Grid
from ..domain.models.node import Node
from ..domain.models.path import Path, Route, UNSET
from ..shared.exceptions import InvalidPositionError, SearchStateError
from ..shared.utils.validation_utils import validate_cell, validate_direction_count

logger = logging.getLogger(__name__)

NO_PATH = -1


class BestFirstSearch:
    """Shortest-path search whose expansion order is set by a SearchStrategy.

    An instance runs exactly one search. Its frontier, cost table and
    came-from map stay available afterwards for path reconstruction and
    for showing explored cells; a second call to search() raises
    SearchStateError.
    """

    def __init__(self, grid: Grid, strategy: SearchStrategy, name: Optional[str] = None,
                 max_expansions: Optional[int] = None):
        """Initialize search engine.

        Args:
            grid: Map to search; never modified
            strategy: Priority policy (uniform-cost or A*)
            name: Display name, defaults to the strategy's name
            max_expansions: Optional bound on finalized cells; the run reports
                            NO_PATH when it is reached
        """
        self.grid = grid
        self.strategy = strategy
        self.name = name or strategy.name
        self.max_expansions = max_expansions

        shape = grid.shape
        self.cost = np.full(shape, np.inf, dtype=np.float64)
        self.steps = np.full(shape, NO_PATH, dtype=np.int64)
        self.came_from_row = np.full(shape, UNSET, dtype=np.int64)
        self.came_from_col = np.full(shape, UNSET, dtype=np.int64)

        self.frontier: Optional[Frontier] = None
        self.start: Optional[Node] = None
        self.goal: Optional[Node] = None
        self.direction_count: Optional[int] = None
        self.step_count = NO_PATH
        self.expanded_count = 0
        self.elapsed_seconds = 0.0
        self.used = False

    def _validate(self, start: Node, goal: Node, direction_count: int):
        validate_direction_count(direction_count)
        for label, cell in (("start", start), ("goal", goal)):
            validate_cell(cell, self.grid.shape, label)
            if not self.grid.is_passable_cell(cell):
                raise InvalidPositionError(
                    f"{label} {cell.as_tuple()} is on impassable terrain "
                    f"'{self.grid.symbol_at(cell)}'",
                    field=label, position=cell.as_tuple()
                )

    def search(self, start, goal, direction_count: int = 4) -> int:
        """Run the search from start to goal.

        Args:
            start: Start cell (Node or (row, col))
            goal: Goal cell (Node or (row, col))
            direction_count: 4 or 8

        Returns:
            Number of edges on the shortest path, or NO_PATH if the goal
            cannot be reached

        Raises:
            SearchStateError: If this engine already ran a search
            InvalidPositionError: If start or goal is outside the grid or impassable
            ValidationError: If direction_count is not 4 or 8
        """
        if self.used:
            raise SearchStateError(
                f"{self.name} engine has already run a search; create a new instance",
                algorithm_name=self.name
            )

        start, goal = Node.of(start), Node.of(goal)
        self._validate(start, goal, direction_count)
        self.used = True
        self.start, self.goal, self.direction_count = start, goal, direction_count

        began = time.perf_counter()
        self.step_count = self._run(start, goal, direction_count)
        self.elapsed_seconds = time.perf_counter() - began

        if self.step_count == NO_PATH:
            logger.debug(f"{self.name}: no path {start.as_tuple()} -> {goal.as_tuple()} "
                         f"after {self.expanded_count} expansions")
        else:
            logger.debug(f"{self.name}: {self.step_count} steps, cost {self.get_cost(goal):.3f}, "
                         f"{self.expanded_count} expansions in {self.elapsed_seconds:.4f}s")
        return self.step_count

    def _run(self, start: Node, goal: Node, direction_count: int) -> int:
        frontier = Frontier(self.grid.shape, self.strategy, goal, direction_count)
        self.frontier = frontier
        grid = self.grid
        cost, steps = self.cost, self.steps

        cost[start.row, start.col] = 0.0
        steps[start.row, start.col] = 0
        frontier.offer(start, 0.0)

        while not frontier.is_empty():
            current = frontier.pop_best()
            if current == goal:
                frontier.finalize(current)
                self.expanded_count += 1
                return int(steps[goal.row, goal.col])

            frontier.finalize(current)
            self.expanded_count += 1
            if self.max_expansions is not None and self.expanded_count >= self.max_expansions:
                logger.warning(f"{self.name}: stopped after {self.expanded_count} expansions")
                return NO_PATH

            current_cost = cost[current.row, current.col]
            for neighbor, base_cost in grid.neighbors(current, direction_count):
                if frontier.has_been_finalized(neighbor):
                    continue
                candidate = current_cost + grid.step_cost(neighbor, base_cost)
                if candidate < cost[neighbor.row, neighbor.col]:
                    cost[neighbor.row, neighbor.col] = candidate
                    steps[neighbor.row, neighbor.col] = steps[current.row, current.col] + 1
                    self.came_from_row[neighbor.row, neighbor.col] = current.row
                    self.came_from_col[neighbor.row, neighbor.col] = current.col
                    frontier.offer(neighbor, candidate)

        return NO_PATH

    def get_cost(self, goal=None) -> float:
        """Finalized cost of the goal; infinity if it was not reached."""
        goal = Node.of(goal) if goal is not None else self.goal
        if goal is None or self.frontier is None or not self.grid.in_bounds(goal):
            return math.inf
        if not self.frontier.has_been_finalized(goal):
            return math.inf
        return float(self.cost[goal.row, goal.col])

    def get_path(self) -> Path:
        """Reconstruction view over this run's came-from map."""
        return Path(self.came_from_row, self.came_from_col, self.cost, self.grid)

    def get_route(self) -> Route:
        """Shortest path of the finished run; empty if none was found."""
        if self.goal is None or self.step_count == NO_PATH:
            return Route()
        return self.get_path().route(self.goal, self.start, self.step_count)

    def explored_cells(self) -> List[Node]:
        return self.get_path().explored_cells()

    def __repr__(self) -> str:
        return (f"BestFirstSearch(name={self.name!r}, used={self.used}, "
                f"expanded={self.expanded_count})")
