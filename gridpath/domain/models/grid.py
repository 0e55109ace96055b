"""Static map representation used by every search."""
import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .node import Node
from ...shared.exceptions import GridError
from ...shared.utils.validation_utils import validate_direction_count

logger = logging.getLogger(__name__)

DEFAULT_IMPASSABLE = frozenset({'T', 'W', '@'})
DEFAULT_WEIGHTED = frozenset({'S'})
DEFAULT_EDGE_WEIGHT = 2.0

ORTHOGONAL_COST = 1.0
DIAGONAL_COST = math.sqrt(2.0)

ORTHOGONAL_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_MOVES = ((-1, -1), (-1, 1), (1, -1), (1, 1))

Cell = Union[Node, Tuple[int, int]]


def _symbol_array(symbols) -> np.ndarray:
    return np.array(sorted(symbols), dtype='<U1')


class Grid:
    """Rectangular map of one-character cell symbols.

    Passability and terrain weight are derived once from the symbols and kept
    in read-only numpy arrays, so a Grid can be shared by any number of
    searches without copying.
    """

    def __init__(self, cells: Union[np.ndarray, Sequence[Sequence[str]]],
                 impassable: Iterable[str] = DEFAULT_IMPASSABLE,
                 edge_weight: float = DEFAULT_EDGE_WEIGHT,
                 weighted: Iterable[str] = DEFAULT_WEIGHTED):
        """Build a grid from a 2-D symbol array.

        Args:
            cells: 2-D array (or nested sequences) of single-character symbols,
                   indexed [row][col]
            impassable: Symbols that can never be entered
            edge_weight: Multiplier applied to steps entering weighted terrain
            weighted: Symbols of heavy terrain (e.g. shallow water)

        Raises:
            GridError: If the cells are empty or ragged, a symbol is not a single
                character, or the weight is below 1
        """
        self.impassable = frozenset(impassable)
        self.weighted = frozenset(weighted)
        self.edge_weight_value = float(edge_weight)
        self.cells = self._to_array(cells)

        if self.edge_weight_value < 1.0:
            raise GridError(
                f"Edge weight must be >= 1, got {edge_weight}",
                grid_shape=self.cells.shape
            )

        self.rows, self.cols = self.cells.shape
        self.passable = ~np.isin(self.cells, _symbol_array(self.impassable))
        self.weights = np.where(
            np.isin(self.cells, _symbol_array(self.weighted)), self.edge_weight_value, 1.0
        )

        for array in (self.cells, self.passable, self.weights):
            array.flags.writeable = False

        logger.debug(f"Grid {self.rows}x{self.cols}: "
                     f"{int(self.passable.sum())} passable cells")

    @staticmethod
    def _to_array(cells) -> np.ndarray:
        if isinstance(cells, np.ndarray):
            if cells.ndim != 2:
                raise GridError(f"Grid must be two-dimensional, got {cells.ndim} dimensions",
                                grid_shape=cells.shape)
            array = cells.astype(str)
        else:
            rows = [list(row) for row in cells]
            if not rows:
                raise GridError("Grid has no rows", grid_shape=(0, 0))
            widths = {len(row) for row in rows}
            if len(widths) != 1:
                raise GridError(
                    f"Grid rows differ in length: {sorted(widths)}",
                    grid_shape=(len(rows), max(widths))
                )
            array = np.array(rows, dtype=str).reshape(len(rows), widths.pop())

        if array.size == 0:
            raise GridError("Grid extents must be positive", grid_shape=array.shape)
        wide = np.char.str_len(array) != 1
        if wide.any():
            bad = sorted({str(s) for s in array[wide]})
            raise GridError(f"Cell symbols must be single characters, got {bad}",
                            grid_shape=array.shape)
        return array.astype('<U1')

    @classmethod
    def from_rows(cls, rows: Sequence[str], **kwargs) -> 'Grid':
        """Build a grid from a list of equal-length strings."""
        return cls([list(row) for row in rows], **kwargs)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def is_passable(self, symbol: str) -> bool:
        """Whether a cell symbol can be entered."""
        return symbol not in self.impassable

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_passable_cell(self, cell: Cell) -> bool:
        """Whether the cell lies inside the grid and can be entered."""
        row, col = cell
        return self.in_bounds(cell) and bool(self.passable[row, col])

    def symbol_at(self, cell: Cell) -> str:
        row, col = cell
        return str(self.cells[row, col])

    def edge_weight(self, cell: Cell) -> float:
        """Terrain multiplier for entering the cell (1.0 unless heavy terrain)."""
        row, col = cell
        return float(self.weights[row, col])

    def step_cost(self, neighbor: Cell, base_cost: float) -> float:
        """Cost of a step of the given base length into neighbor."""
        return base_cost * self.edge_weight(neighbor)

    def neighbors(self, cell: Cell, direction_count: int = 4) -> List[Tuple[Node, float]]:
        """Passable neighbours of a cell with their base step costs.

        Args:
            cell: Cell to expand
            direction_count: 4 for orthogonal moves, 8 to add diagonals

        Returns:
            List of (neighbor, base_step_cost); diagonals cost sqrt(2) and are
            only produced when both orthogonal cells they pass between are
            passable
        """
        validate_direction_count(direction_count)
        row, col = cell
        result = []

        for d_row, d_col in ORTHOGONAL_MOVES:
            r, c = row + d_row, col + d_col
            if 0 <= r < self.rows and 0 <= c < self.cols and self.passable[r, c]:
                result.append((Node(r, c), ORTHOGONAL_COST))

        if direction_count == 8:
            for d_row, d_col in DIAGONAL_MOVES:
                r, c = row + d_row, col + d_col
                if not (0 <= r < self.rows and 0 <= c < self.cols) or not self.passable[r, c]:
                    continue
                # No corner cutting
                if self.passable[row, c] and self.passable[r, col]:
                    result.append((Node(r, c), DIAGONAL_COST))

        return result

    def passable_cells(self) -> np.ndarray:
        """(N, 2) array of (row, col) indices of every passable cell."""
        return np.argwhere(self.passable)

    def find_symbol(self, symbol: str) -> Optional[Node]:
        """First cell holding the symbol in row-major order, if any."""
        matches = np.argwhere(self.cells == symbol)
        if len(matches) == 0:
            return None
        return Node(*matches[0])

    def __repr__(self) -> str:
        return (f"Grid({self.rows}x{self.cols}, impassable={sorted(self.impassable)}, "
                f"weighted={sorted(self.weighted)}, edge_weight={self.edge_weight_value})")
