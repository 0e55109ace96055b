"""Repeated-run timing of pathfinding algorithms on a scenario."""
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Union

import numpy as np
import psutil

from .scenario import Scenario
from ..algorithms.variants import PathfindingAlgorithm, create_search
from ..shared.exceptions import InvalidPositionError
from ..shared.utils.validation_utils import validate_positive_number

logger = logging.getLogger(__name__)


@dataclass
class TimingStats:
    """Wall-clock statistics for one algorithm at one repetition count."""
    algorithm: str
    runs: int
    mean_ms: float
    median_ms: float
    min_ms: float
    max_ms: float
    std_ms: float

    @classmethod
    def from_samples(cls, algorithm: str, samples_seconds: Sequence[float]) -> 'TimingStats':
        samples = np.asarray(samples_seconds, dtype=np.float64) * 1000.0
        return cls(
            algorithm=algorithm,
            runs=len(samples),
            mean_ms=float(samples.mean()),
            median_ms=float(np.median(samples)),
            min_ms=float(samples.min()),
            max_ms=float(samples.max()),
            std_ms=float(samples.std()),
        )


@dataclass
class PerformanceReport:
    """Collected timings plus process memory before and after the runs."""
    stats: List[TimingStats] = field(default_factory=list)
    rss_before_mb: float = 0.0
    rss_after_mb: float = 0.0
    total_seconds: float = 0.0

    def for_algorithm(self, algorithm: str) -> List[TimingStats]:
        return [s for s in self.stats if s.algorithm == algorithm]

    def __str__(self) -> str:
        lines = [
            f"{'algorithm':<12}{'runs':>6}{'mean ms':>12}{'median ms':>12}"
            f"{'min ms':>12}{'max ms':>12}{'std ms':>10}"
        ]
        for s in self.stats:
            lines.append(
                f"{s.algorithm:<12}{s.runs:>6}{s.mean_ms:>12.3f}{s.median_ms:>12.3f}"
                f"{s.min_ms:>12.3f}{s.max_ms:>12.3f}{s.std_ms:>10.3f}"
            )
        lines.append(f"RSS {self.rss_before_mb:.1f} MB -> {self.rss_after_mb:.1f} MB, "
                     f"total {self.total_seconds:.2f} s")
        return "\n".join(lines)


def _rss_mb() -> float:
    return psutil.Process().memory_info().rss / (1024 * 1024)


class PerformanceTester:
    """Times search, cost lookup and path retrieval on fresh engines."""

    def __init__(self, scenario: Scenario):
        self.scenario = scenario

    def time_once(self, algorithm: PathfindingAlgorithm) -> float:
        """Seconds for one search + get_cost + path reconstruction."""
        scenario = self.scenario
        engine = create_search(algorithm, scenario.grid, max_expansions=scenario.max_expansions)
        began = time.perf_counter()
        steps = engine.search(scenario.start, scenario.goal, scenario.direction_count)
        engine.get_cost(scenario.goal)
        engine.get_path().shortest_path(scenario.goal, scenario.start, steps)
        return time.perf_counter() - began

    def run(self, algorithms: Iterable[Union[str, PathfindingAlgorithm]],
            run_counts: Iterable[int]) -> PerformanceReport:
        """Time every algorithm once per repetition count.

        Args:
            algorithms: Algorithms to compare
            run_counts: Repetition counts, e.g. [10, 50, 100]

        Raises:
            InvalidPositionError: If the scenario start or goal is not usable
            ValidationError: If a run count is not positive
        """
        algorithms = [PathfindingAlgorithm.parse(a) for a in algorithms]
        run_counts = list(run_counts)
        for count in run_counts:
            validate_positive_number(count, "run count")
        if not (self.scenario.start_is_valid() and self.scenario.goal_is_valid()):
            raise InvalidPositionError("Scenario start and goal must be valid for performance tests")

        report = PerformanceReport(rss_before_mb=_rss_mb())
        began = time.perf_counter()
        for count in run_counts:
            for algorithm in algorithms:
                samples = [self.time_once(algorithm) for _ in range(count)]
                stats = TimingStats.from_samples(algorithm.display_name, samples)
                report.stats.append(stats)
                logger.info(f"{stats.algorithm} x{count}: mean {stats.mean_ms:.3f} ms")
        report.total_seconds = time.perf_counter() - began
        report.rss_after_mb = _rss_mb()
        return report

    def compare(self, algorithms: Iterable[Union[str, PathfindingAlgorithm]],
                runs: int) -> Dict[str, TimingStats]:
        """Single repetition count, keyed by algorithm display name."""
        report = self.run(algorithms, [runs])
        return {s.algorithm: s for s in report.stats}
