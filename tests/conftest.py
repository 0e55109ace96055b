"""Test configuration and fixtures for gridpath."""
import logging
import logging.handlers
import os
import sys
import pytest
import numpy as np

# Add parent directory to path so main.py and gridpath import without installing
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(parent_dir)

from gridpath.domain.models.grid import Grid


@pytest.fixture
def open_grid():
    """3x3 grid with no obstacles and unit weights."""
    return Grid.from_rows(["...", "...", "..."])


@pytest.fixture
def column_wall_grid():
    """3x3 grid whose middle column is impassable except in row 0."""
    return Grid.from_rows(["...", ".T.", ".T."])


@pytest.fixture
def walled_goal_grid():
    """5x5 grid whose centre cell (2, 2) is enclosed by trees."""
    return Grid.from_rows([
        ".....",
        "..T..",
        ".T.T.",
        "..T..",
        ".....",
    ])


@pytest.fixture
def swamp_grid():
    """Shallow water at (0, 1) between start and goal, with a dry detour below."""
    return Grid.from_rows([".S.", "..."])


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def random_grid(rng, rows=20, cols=20, blocked=0.25, swamp=0.0):
    """Random map of '.', 'T' and 'S' cells."""
    draw = rng.random((rows, cols))
    cells = np.full((rows, cols), '.', dtype='<U1')
    cells[draw < blocked] = 'T'
    cells[(draw >= blocked) & (draw < blocked + swamp)] = 'S'
    return Grid(cells)


def random_endpoints(rng, grid):
    """Two distinct passable cells, or None if the grid has fewer than two."""
    cells = grid.passable_cells()
    if len(cells) < 2:
        return None
    first, second = rng.choice(len(cells), size=2, replace=False)
    return tuple(cells[first]), tuple(cells[second])


@pytest.fixture
def map_text():
    return "\n".join([
        "type octile",
        "height 4",
        "width 6",
        "map",
        "......",
        ".TT.S.",
        "...@S.",
        "W.....",
    ]) + "\n"


@pytest.fixture
def map_file(tmp_path, map_text):
    path = tmp_path / "small.map"
    path.write_text(map_text, encoding="utf-8")
    return path


@pytest.fixture
def make_random_grid():
    return random_grid


@pytest.fixture
def pick_endpoints():
    return random_endpoints


@pytest.fixture
def restore_root_logger():
    """Undo the handlers and levels setup_logging installs."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("gridpath"):
            logging.getLogger(name).setLevel(logging.NOTSET)
