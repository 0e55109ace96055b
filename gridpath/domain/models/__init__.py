"""Domain models."""
from .grid import Grid, ORTHOGONAL_COST, DIAGONAL_COST
from .node import Node
from .path import Path, Route

__all__ = ['Grid', 'ORTHOGONAL_COST', 'DIAGONAL_COST', 'Node', 'Path', 'Route']
