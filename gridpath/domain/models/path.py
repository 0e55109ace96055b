"""Path reconstruction from a finished search's predecessor map."""
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .grid import Grid, ORTHOGONAL_COST, DIAGONAL_COST
from .node import Node

UNSET = -1


@dataclass(frozen=True)
class Route:
    """Materialised shortest path: nodes from start to goal and total cost."""
    nodes: Tuple[Node, ...] = ()
    cost: float = math.inf

    @property
    def is_empty(self) -> bool:
        return len(self.nodes) == 0

    @property
    def steps(self) -> int:
        """Number of edges, or -1 for an empty route."""
        return len(self.nodes) - 1

    @property
    def start(self) -> Optional[Node]:
        return self.nodes[0] if self.nodes else None

    @property
    def goal(self) -> Optional[Node]:
        return self.nodes[-1] if self.nodes else None

    def as_tuples(self) -> List[Tuple[int, int]]:
        return [node.as_tuple() for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)


class Path:
    """Read-only view over a search's came-from map.

    The predecessor arrays hold the row and column of the cell each visited
    cell was reached from, UNSET for the start and for unreached cells.
    """

    def __init__(self, came_from_row: np.ndarray, came_from_col: np.ndarray,
                 cost: np.ndarray, grid: Grid):
        self.came_from_row = came_from_row
        self.came_from_col = came_from_col
        self.cost = cost
        self.grid = grid

    def predecessor(self, cell: Node) -> Optional[Node]:
        row = self.came_from_row[cell.row, cell.col]
        if row == UNSET:
            return None
        return Node(row, self.came_from_col[cell.row, cell.col])

    def shortest_path(self, goal, start, step_count: Optional[int] = None) -> List[Node]:
        """Walk back from goal to start and return the cells in start-to-goal order.

        Args:
            goal: Goal cell
            start: Start cell
            step_count: Edges on the path as reported by the search; when None
                        the walk continues until start is reached

        Returns:
            Ordered list of Nodes, or an empty list if the goal was never reached
        """
        goal, start = Node.of(goal), Node.of(start)
        if goal == start:
            return [start] if step_count in (None, 0) else []
        if step_count is not None and step_count < 0:
            return []

        limit = self.grid.cell_count if step_count is None else step_count
        nodes = [goal]
        current = goal
        for _ in range(limit):
            previous = self.predecessor(current)
            if previous is None:
                return []
            nodes.append(previous)
            current = previous
            if step_count is None and current == start:
                break

        if current != start:
            return []
        nodes.reverse()
        return nodes

    def route(self, goal, start, step_count: Optional[int] = None) -> Route:
        """Shortest path as an immutable Route; empty with infinite cost on failure."""
        nodes = self.shortest_path(goal, start, step_count)
        if not nodes:
            return Route()
        goal = Node.of(goal)
        return Route(tuple(nodes), float(self.cost[goal.row, goal.col]))

    def path_cost(self, nodes: List[Node]) -> float:
        """Recompute the cost of a node sequence from the grid's terrain weights."""
        total = 0.0
        for current, following in zip(nodes, nodes[1:]):
            diagonal = current.row != following.row and current.col != following.col
            base = DIAGONAL_COST if diagonal else ORTHOGONAL_COST
            total += self.grid.step_cost(following, base)
        return total

    def explored_cells(self) -> List[Node]:
        """Every cell that was given a predecessor during the search."""
        return [Node(row, col) for row, col in np.argwhere(self.came_from_row != UNSET)]
