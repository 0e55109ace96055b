"""Plain-text rendering of a grid with path and explored-cell overlays."""
from typing import Iterable, Optional, Sequence

import numpy as np

from ..domain.models.grid import Grid
from ..domain.models.node import Node
from ..domain.models.path import Route

EXPLORED_MARK = '+'
PATH_MARKS = ('*', 'o', 'x', '#')
START_MARK = 'A'
GOAL_MARK = 'B'


def render(grid: Grid, routes: Optional[Sequence[Route]] = None,
           explored: Optional[Iterable[Node]] = None,
           start: Optional[Node] = None, goal: Optional[Node] = None,
           path_marks: Sequence[str] = PATH_MARKS) -> str:
    """Draw the map as text.

    Layers are painted in order: explored cells, then each route with its
    own mark (later routes over earlier ones), then start and goal.
    """
    canvas = np.array(grid.cells, copy=True)

    for cell in explored or ():
        canvas[cell.row, cell.col] = EXPLORED_MARK

    for index, route in enumerate(routes or ()):
        mark = path_marks[index % len(path_marks)]
        for cell in route.nodes:
            canvas[cell.row, cell.col] = mark

    if start is not None:
        canvas[start.row, start.col] = START_MARK
    if goal is not None:
        canvas[goal.row, goal.col] = GOAL_MARK

    return "\n".join("".join(row) for row in canvas)


def legend(names: Sequence[str], path_marks: Sequence[str] = PATH_MARKS) -> str:
    entries = [f"{path_marks[i % len(path_marks)]} {name}" for i, name in enumerate(names)]
    entries += [f"{EXPLORED_MARK} explored", f"{START_MARK} start", f"{GOAL_MARK} goal"]
    return "  ".join(entries)
