"""Grid coordinate value object."""
import numbers
from dataclasses import dataclass
from typing import Tuple

from ...shared.exceptions import InvalidPositionError


@dataclass(frozen=True, order=True)
class Node:
    """A cell position on the grid.
    
    Nodes are plain coordinates: search cost, priority and predecessor are
    kept in arrays owned by the frontier and the search engine, so the same
    Node can be shared freely between runs.
    
    Raises:
        InvalidPositionError: If a coordinate is not an integer
    """
    row: int
    col: int
    
    def __post_init__(self):
        for value in (self.row, self.col):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidPositionError(
                    f"Cell coordinates must be integers, got ({self.row!r}, {self.col!r})",
                    position=(self.row, self.col)
                )
        # numpy integers from array lookups hash fine but repr badly
        object.__setattr__(self, 'row', int(self.row))
        object.__setattr__(self, 'col', int(self.col))
    
    @classmethod
    def of(cls, cell) -> 'Node':
        """Coerce a Node or a (row, col) pair to a Node."""
        if isinstance(cell, Node):
            return cell
        try:
            row, col = cell
        except (TypeError, ValueError) as e:
            raise InvalidPositionError(f"Expected a (row, col) pair, got {cell!r}",
                                       position=cell) from e
        return cls(row, col)
    
    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)
    
    def offset(self, d_row: int, d_col: int) -> 'Node':
        return Node(self.row + d_row, self.col + d_col)
    
    def is_adjacent(self, other: 'Node', direction_count: int = 8) -> bool:
        """True if other is one orthogonal (or, for 8 directions, diagonal) step away."""
        d_row = abs(self.row - other.row)
        d_col = abs(self.col - other.col)
        if direction_count == 4:
            return d_row + d_col == 1
        return max(d_row, d_col) == 1
    
    def __iter__(self):
        yield self.row
        yield self.col
