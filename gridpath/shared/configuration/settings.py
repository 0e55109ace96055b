"""Application settings dataclasses.

Values arrive from hand-edited JSON, so every ``validate()`` checks types
before comparing and reports problems as messages instead of raising.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
KNOWN_ALGORITHMS = ("dijkstra", "astar")
DIRECTION_COUNTS = (4, 8)

# Per-expansion and per-drop debug lines from the search core drown
# everything else at DEBUG
DEFAULT_COMPONENT_LEVELS = {"gridpath.algorithms": "INFO"}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_symbol_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(
        isinstance(symbol, str) and len(symbol) == 1 for symbol in value
    )


def _is_log_level(value: Any) -> bool:
    return isinstance(value, str) and value.upper() in LOG_LEVELS


@dataclass
class SearchSettings:
    """Grid interpretation and search options."""
    direction_count: int = 4
    impassable: List[str] = field(default_factory=lambda: ["T", "W", "@"])
    weighted_terrain: List[str] = field(default_factory=lambda: ["S"])
    edge_weight: float = 2.0
    algorithms: List[str] = field(default_factory=lambda: ["dijkstra", "astar"])
    max_expansions: Optional[int] = None
    
    def validate(self) -> List[str]:
        errors = []
        if not _is_int(self.direction_count) or self.direction_count not in DIRECTION_COUNTS:
            errors.append(f"direction_count must be 4 or 8, got {self.direction_count!r}")
        if not _is_number(self.edge_weight) or self.edge_weight < 1:
            errors.append(f"edge_weight must be a number >= 1, got {self.edge_weight!r}")
        for name in ("impassable", "weighted_terrain"):
            if not _is_symbol_list(getattr(self, name)):
                errors.append(f"{name} must be a list of single characters, "
                              f"got {getattr(self, name)!r}")
        if not isinstance(self.algorithms, (list, tuple)) or not self.algorithms:
            errors.append(f"algorithms must be a non-empty list, got {self.algorithms!r}")
        else:
            errors.extend(f"Unknown algorithm: {name!r}" for name in self.algorithms
                          if name not in KNOWN_ALGORITHMS)
        if self.max_expansions is not None and (
                not _is_int(self.max_expansions) or self.max_expansions <= 0):
            errors.append(f"max_expansions must be a positive integer, got {self.max_expansions!r}")
        return errors


@dataclass
class ScenarioSettings:
    """Map selection and start/goal positions."""
    map_file: Optional[str] = None
    start: Optional[List[int]] = None
    goal: Optional[List[int]] = None
    random_positions: bool = False
    random_seed: Optional[int] = None
    
    def validate(self) -> List[str]:
        errors = []
        if self.map_file is not None and not isinstance(self.map_file, str):
            errors.append(f"map_file must be a path string, got {self.map_file!r}")
        for name, cell in (("start", self.start), ("goal", self.goal)):
            if cell is None:
                continue
            if (not isinstance(cell, (list, tuple)) or len(cell) != 2
                    or not all(_is_int(v) for v in cell)):
                errors.append(f"{name} must be a [row, col] pair of integers, got {cell!r}")
        if not isinstance(self.random_positions, bool):
            errors.append(f"random_positions must be true or false, got {self.random_positions!r}")
        if self.random_seed is not None and not _is_int(self.random_seed):
            errors.append(f"random_seed must be an integer, got {self.random_seed!r}")
        if not self.random_positions and self.map_file and (self.start is None or self.goal is None):
            errors.append("start and goal are required unless random_positions is enabled")
        return errors


@dataclass
class PerformanceSettings:
    """Repeated-run timing options."""
    run_counts: List[int] = field(default_factory=lambda: [10, 10, 20, 30, 50])
    
    def validate(self) -> List[str]:
        if not isinstance(self.run_counts, (list, tuple)) or not self.run_counts:
            return [f"run_counts must be a non-empty list, got {self.run_counts!r}"]
        return [f"run counts must be positive integers, got {n!r}"
                for n in self.run_counts if not _is_int(n) or n <= 0]


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/gridpath.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    component_levels: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_COMPONENT_LEVELS)
    )
    
    def validate(self) -> List[str]:
        errors = []
        if not _is_log_level(self.level):
            errors.append(f"Unknown log level: {self.level!r}")
        if not isinstance(self.component_levels, dict):
            errors.append(f"component_levels must be a mapping, got {self.component_levels!r}")
        else:
            errors.extend(f"Unknown log level for {component}: {level!r}"
                          for component, level in self.component_levels.items()
                          if not _is_log_level(level))
        for name in ("format_string", "date_format", "log_file"):
            if not isinstance(getattr(self, name), str):
                errors.append(f"{name} must be a string, got {getattr(self, name)!r}")
        for name in ("console_output", "file_output"):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"{name} must be true or false, got {getattr(self, name)!r}")
        if not _is_number(self.max_file_size_mb) or self.max_file_size_mb <= 0:
            errors.append(f"max_file_size_mb must be positive, got {self.max_file_size_mb!r}")
        if not _is_int(self.backup_count) or self.backup_count < 0:
            errors.append(f"backup_count must be a non-negative integer, got {self.backup_count!r}")
        return errors


@dataclass
class ApplicationSettings:
    """Top-level settings container."""
    version: str = "1.0.0"
    config_version: int = 1
    search: SearchSettings = field(default_factory=SearchSettings)
    scenario: ScenarioSettings = field(default_factory=ScenarioSettings)
    performance: PerformanceSettings = field(default_factory=PerformanceSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    
    def validate(self) -> Dict[str, List[str]]:
        """Validate every category.
        
        Returns:
            Mapping of category name to a (possibly empty) list of error messages
        """
        return {
            "search": self.search.validate(),
            "scenario": self.scenario.validate(),
            "performance": self.performance.validate(),
            "logging": self.logging.validate(),
        }
