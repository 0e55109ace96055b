"""Pathfinding scenario: a grid, start and goal, and the results of runs on them."""
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

import numpy as np

from ..algorithms.best_first import NO_PATH
from ..algorithms.variants import PathfindingAlgorithm, create_search
from ..domain.models.grid import Grid
from ..domain.models.node import Node
from ..domain.models.path import Route
from ..infrastructure.map_loader import load_grid
from ..shared.configuration.settings import ApplicationSettings
from ..shared.exceptions import ConfigurationError, InvalidPositionError
from ..shared.utils.logging_utils import get_context_logger
from ..shared.utils.validation_utils import validate_direction_count

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of one algorithm run on a scenario."""
    name: str
    steps: int
    cost: float
    route: Route
    explored: List[Node] = field(default_factory=list)
    expanded: int = 0
    elapsed_seconds: float = 0.0

    @property
    def found(self) -> bool:
        return self.steps != NO_PATH

    def summary(self) -> str:
        if not self.found:
            return f"{self.name}: no path found ({self.expanded} cells expanded)"
        return (f"{self.name}: shortest path length {self.steps}, cost {self.cost:.3f}, "
                f"{self.expanded} cells expanded in {self.elapsed_seconds * 1000:.2f} ms")


class Scenario:
    """Start and goal positions on a grid, plus results of algorithm runs.

    Each run builds its own engine, so results for different algorithms
    never share search state.
    """

    def __init__(self, grid: Grid, start=None, goal=None, direction_count: int = 4,
                 max_expansions: Optional[int] = None):
        if grid is None:
            raise ConfigurationError("Scenario requires a grid")
        validate_direction_count(direction_count)
        self.grid = grid
        self.start: Optional[Node] = Node.of(start) if start is not None else None
        self.goal: Optional[Node] = Node.of(goal) if goal is not None else None
        self.direction_count = direction_count
        self.max_expansions = max_expansions
        self.results: Dict[str, SearchResult] = {}

    @classmethod
    def from_settings(cls, settings: ApplicationSettings,
                      rng: Optional[np.random.Generator] = None) -> 'Scenario':
        """Load the configured map and positions.

        Raises:
            ConfigurationError: If no map is configured or positions are missing
        """
        scenario_settings = settings.scenario
        search_settings = settings.search
        if not scenario_settings.map_file:
            raise ConfigurationError("No map file configured", error_code="NO_MAP")

        grid = load_grid(
            scenario_settings.map_file,
            impassable=search_settings.impassable,
            weighted=search_settings.weighted_terrain,
            edge_weight=search_settings.edge_weight,
        )
        scenario = cls(grid, scenario_settings.start, scenario_settings.goal,
                       direction_count=search_settings.direction_count,
                       max_expansions=search_settings.max_expansions)

        if scenario_settings.random_positions:
            if rng is None:
                rng = np.random.default_rng(scenario_settings.random_seed)
            scenario.randomize_positions(rng)
        elif scenario.start is None or scenario.goal is None:
            raise ConfigurationError("Start and goal positions are required",
                                     error_code="NO_POSITIONS")
        return scenario

    def _position_is_valid(self, cell: Optional[Node]) -> bool:
        return cell is not None and self.grid.is_passable_cell(cell)

    def start_is_valid(self) -> bool:
        """True if the start is inside the grid and passable."""
        return self._position_is_valid(self.start)

    def goal_is_valid(self) -> bool:
        return self._position_is_valid(self.goal)

    def randomize_positions(self, rng: Optional[np.random.Generator] = None):
        """Place start and goal on two distinct random passable cells.

        Raises:
            ConfigurationError: If the grid has fewer than two passable cells
        """
        rng = rng or np.random.default_rng()
        candidates = self.grid.passable_cells()
        if len(candidates) < 2:
            raise ConfigurationError("Grid needs at least two passable cells for random positions")

        first, second = rng.choice(len(candidates), size=2, replace=False)
        self.start = Node(*candidates[first])
        self.goal = Node(*candidates[second])
        self.results.clear()
        logger.info(f"Random positions: start {self.start.as_tuple()}, goal {self.goal.as_tuple()}")

    def run_algorithm(self, algorithm: Union[str, PathfindingAlgorithm],
                      name: Optional[str] = None) -> SearchResult:
        """Run one algorithm on a fresh engine and keep its result.

        Raises:
            InvalidPositionError: If start or goal is missing, out of bounds or impassable
        """
        algorithm = PathfindingAlgorithm.parse(algorithm)
        name = name or algorithm.display_name

        if self.start is None or self.goal is None:
            raise InvalidPositionError("Start and goal must be set before searching")
        if not self.start_is_valid():
            raise InvalidPositionError(
                f"The starting position {self.start.as_tuple()} is not valid",
                field="start", position=self.start.as_tuple()
            )

        context_logger = get_context_logger(__name__, algorithm=name, start=self.start.as_tuple(),
                                            goal=self.goal.as_tuple())
        context_logger.info("Starting search")
        engine = create_search(algorithm, self.grid, max_expansions=self.max_expansions)
        engine.name = name
        steps = engine.search(self.start, self.goal, self.direction_count)

        result = SearchResult(
            name=name,
            steps=steps,
            cost=engine.get_cost(self.goal),
            route=engine.get_route(),
            explored=engine.explored_cells(),
            expanded=engine.expanded_count,
            elapsed_seconds=engine.elapsed_seconds,
        )
        self.results[name] = result

        if result.found:
            context_logger.info(f"Shortest path length {steps}, cost {result.cost:.3f}")
        else:
            context_logger.info("No path found")
        return result

    def run_all(self, algorithms: Iterable[Union[str, PathfindingAlgorithm]]) -> List[SearchResult]:
        return [self.run_algorithm(algorithm) for algorithm in algorithms]

    def came_from(self, name: str) -> List[Node]:
        """Explored cells of a previous run, for overlays; empty if it never ran."""
        result = self.results.get(name)
        return list(result.explored) if result else []

    def costs_agree(self, tolerance: float = 1e-9) -> bool:
        """Whether every run that found a path reported the same cost."""
        costs = [r.cost for r in self.results.values() if r.found]
        return all(math.isclose(c, costs[0], abs_tol=tolerance) for c in costs)
