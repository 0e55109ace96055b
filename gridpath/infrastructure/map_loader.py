"""Map file parsing into symbol arrays and Grids.

Two layouts are understood: the MovingAI benchmark format

    type octile
    height 4
    width 6
    map
    ..@@..
    ...

and a bare block of equal-length rows with no header.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from ..domain.models.grid import Grid, DEFAULT_IMPASSABLE, DEFAULT_WEIGHTED, DEFAULT_EDGE_WEIGHT
from ..shared.exceptions import MapLoadError

logger = logging.getLogger(__name__)

HEADER_KEYS = ("type", "height", "width")


def _parse_header(lines: List[str], file_path: Optional[str]) -> Tuple[Dict[str, str], int]:
    header = {}
    for index, line in enumerate(lines):
        stripped = line.strip()
        if stripped == "map":
            return header, index + 1
        parts = stripped.split(None, 1)
        if len(parts) != 2 or parts[0] not in HEADER_KEYS:
            raise MapLoadError(f"Unexpected header line {index + 1}: {line!r}",
                               file_path=file_path)
        header[parts[0]] = parts[1].strip()
    raise MapLoadError("Header has no 'map' line", file_path=file_path)


def parse_map(text: str, file_path: Optional[str] = None) -> np.ndarray:
    """Parse map text into a 2-D array of one-character symbols.

    Args:
        text: File contents
        file_path: Source path, used in error reports only

    Returns:
        numpy array of dtype '<U1' indexed [row, col]

    Raises:
        MapLoadError: If the text is empty, ragged or disagrees with its header
    """
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MapLoadError("Map is empty", file_path=file_path)

    header = {}
    body = lines
    if lines[0].split(None, 1)[0] in HEADER_KEYS + ("map",):
        header, body_start = _parse_header(lines, file_path)
        body = lines[body_start:]

    rows = list(body)
    if not rows:
        raise MapLoadError("Map has no rows", file_path=file_path)

    widths = {len(row) for row in rows}
    if len(widths) != 1 or 0 in widths:
        raise MapLoadError(f"Map rows are not rectangular: widths {sorted(widths)}",
                           file_path=file_path)
    width = widths.pop()

    try:
        expected = (int(header.get("height", len(rows))), int(header.get("width", width)))
    except ValueError as e:
        raise MapLoadError(f"Invalid map dimensions in header: {e}", file_path=file_path) from e
    if expected != (len(rows), width):
        raise MapLoadError(
            f"Header declares {expected[0]}x{expected[1]} but body is {len(rows)}x{width}",
            file_path=file_path
        )

    return np.array([list(row) for row in rows], dtype='<U1')


def load_map(path: Union[str, Path]) -> np.ndarray:
    """Read and parse a map file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MapLoadError(f"Failed to read map file: {e}", file_path=str(path)) from e

    cells = parse_map(text, file_path=str(path))
    logger.info(f"Loaded map {path.name}: {cells.shape[0]}x{cells.shape[1]}")
    return cells


def load_grid(path: Union[str, Path],
              impassable: Iterable[str] = DEFAULT_IMPASSABLE,
              weighted: Iterable[str] = DEFAULT_WEIGHTED,
              edge_weight: float = DEFAULT_EDGE_WEIGHT) -> Grid:
    """Load a map file straight into a Grid."""
    return Grid(load_map(path), impassable=impassable, edge_weight=edge_weight,
                weighted=weighted)
