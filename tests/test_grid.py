"""Tests for the grid model and node value object."""
import math

import pytest
import numpy as np

from gridpath.domain.models.grid import Grid, DIAGONAL_COST, ORTHOGONAL_COST
from gridpath.domain.models.node import Node
from gridpath.shared.exceptions import (
    GridError, ValidationError, ConfigurationError, InvalidPositionError
)


class TestNode:
    """Node identity and helpers"""
    
    def test_equality_by_coordinates(self):
        assert Node(1, 2) == Node(1, 2)
        assert Node(1, 2) != Node(2, 1)
        assert len({Node(1, 2), Node(1, 2), Node(0, 0)}) == 2
    
    def test_numpy_integers_are_normalised(self):
        node = Node(np.int64(3), np.int32(4))
        assert type(node.row) is int
        assert node == Node(3, 4)
        assert hash(node) == hash(Node(3, 4))
    
    @pytest.mark.parametrize("row, col", [(0.5, 1), (1, 2.0), ("1", 1), (True, 0)])
    def test_non_integer_coordinates_rejected(self, row, col):
        with pytest.raises(InvalidPositionError):
            Node(row, col)
    
    def test_of_accepts_tuples_and_nodes(self):
        node = Node(2, 5)
        assert Node.of(node) is node
        assert Node.of((2, 5)) == node
        assert tuple(node) == (2, 5)
    
    def test_is_adjacent(self):
        assert Node(1, 1).is_adjacent(Node(1, 2), 4)
        assert not Node(1, 1).is_adjacent(Node(2, 2), 4)
        assert Node(1, 1).is_adjacent(Node(2, 2), 8)
        assert not Node(1, 1).is_adjacent(Node(1, 1), 8)
        assert not Node(1, 1).is_adjacent(Node(3, 1), 8)


class TestGridConstruction:
    """Validation of the symbol array"""
    
    def test_extents(self, open_grid):
        assert open_grid.shape == (3, 3)
        assert open_grid.cell_count == 9
    
    def test_accepts_numpy_array(self):
        grid = Grid(np.array([['.', 'T'], ['.', '.']]))
        assert grid.shape == (2, 2)
        assert not grid.is_passable_cell((0, 1))
    
    def test_empty_grid_rejected(self):
        with pytest.raises(GridError):
            Grid([])
        with pytest.raises(GridError):
            Grid.from_rows(["", ""])
    
    def test_ragged_rows_rejected(self):
        with pytest.raises(GridError) as exc_info:
            Grid.from_rows(["...", ".."])
        assert isinstance(exc_info.value, ConfigurationError)
    
    def test_multi_character_symbols_rejected(self):
        with pytest.raises(GridError):
            Grid([["..", "."], [".", "."]])
        with pytest.raises(GridError):
            Grid(np.array([["T", "TW"], [".", "."]]))
    
    def test_edge_weight_below_one_rejected(self):
        with pytest.raises(GridError):
            Grid.from_rows(["..."], edge_weight=0.5)
    
    def test_arrays_are_read_only(self, open_grid):
        with pytest.raises(ValueError):
            open_grid.cells[0, 0] = 'T'
        with pytest.raises(ValueError):
            open_grid.passable[0, 0] = False


class TestPassabilityAndWeights:
    """Symbol interpretation"""
    
    def test_default_impassable_symbols(self):
        grid = Grid.from_rows([".TW@S"])
        assert grid.is_passable('.')
        assert grid.is_passable('S')
        for symbol in "TW@":
            assert not grid.is_passable(symbol)
        assert [grid.is_passable_cell((0, c)) for c in range(5)] == [True, False, False, False, True]
    
    def test_custom_impassable_symbols(self):
        grid = Grid.from_rows(["#.T"], impassable={'#'})
        assert not grid.is_passable_cell((0, 0))
        assert grid.is_passable_cell((0, 2))
    
    def test_edge_weight(self, swamp_grid):
        assert swamp_grid.edge_weight((0, 1)) == 2.0
        assert swamp_grid.edge_weight((0, 0)) == 1.0
    
    def test_custom_edge_weight(self):
        grid = Grid.from_rows([".S"], edge_weight=3.5)
        assert grid.step_cost(Node(0, 1), ORTHOGONAL_COST) == 3.5
        assert grid.step_cost(Node(0, 1), DIAGONAL_COST) == pytest.approx(3.5 * math.sqrt(2))
    
    def test_out_of_bounds_cell_is_not_passable(self, open_grid):
        assert not open_grid.is_passable_cell((3, 0))
        assert not open_grid.is_passable_cell((0, -1))
    
    def test_find_symbol(self):
        grid = Grid.from_rows(["..", ".S"])
        assert grid.find_symbol('S') == Node(1, 1)
        assert grid.find_symbol('@') is None


class TestNeighbors:
    """Neighbour generation for 4 and 8 directions"""
    
    def test_corner_has_two_orthogonal_neighbors(self, open_grid):
        neighbors = open_grid.neighbors(Node(0, 0), 4)
        assert {n for n, _ in neighbors} == {Node(1, 0), Node(0, 1)}
        assert all(cost == ORTHOGONAL_COST for _, cost in neighbors)
    
    def test_centre_has_eight_neighbors(self, open_grid):
        neighbors = dict(open_grid.neighbors(Node(1, 1), 8))
        assert len(neighbors) == 8
        assert neighbors[Node(0, 0)] == pytest.approx(math.sqrt(2))
        assert neighbors[Node(0, 1)] == 1.0
    
    def test_impassable_neighbors_excluded(self, column_wall_grid):
        neighbors = {n for n, _ in column_wall_grid.neighbors(Node(1, 0), 4)}
        assert neighbors == {Node(0, 0), Node(2, 0)}
    
    def test_no_corner_cutting(self):
        grid = Grid.from_rows(["..", "T."])
        neighbors = {n for n, _ in grid.neighbors(Node(0, 0), 8)}
        assert Node(1, 1) not in neighbors
        assert neighbors == {Node(0, 1)}
    
    def test_invalid_direction_count(self, open_grid):
        with pytest.raises(ValidationError):
            open_grid.neighbors(Node(0, 0), 6)
