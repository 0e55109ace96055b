#!/usr/bin/env python3
"""
gridpath - Main Entry Point
Shortest paths on grid maps with Dijkstra and A*
"""

import sys
import logging
import argparse
from typing import Dict, List, Optional

from gridpath.application import Scenario, PerformanceTester
from gridpath.infrastructure.map_loader import load_grid
from gridpath.presentation import render, legend
from gridpath.shared.configuration import initialize_config, ConfigManager
from gridpath.shared.exceptions import GridPathException, ConfigurationError, ValidationError
from gridpath.shared.utils.logging_utils import setup_logging

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_CONFIG_ERROR = 2


def _raise_on_errors(errors: Dict[str, List[str]]):
    problems = [f"{category}: {e}" for category, items in errors.items() for e in items]
    if problems:
        raise ConfigurationError("Invalid configuration: " + "; ".join(problems))


def setup_environment(config_path: Optional[str] = None,
                      log_level: Optional[str] = None) -> ConfigManager:
    """Load configuration and configure logging.

    Raises:
        ConfigurationError: If an explicitly named config file cannot be read,
            or the loaded settings are invalid
    """
    config = initialize_config(config_path)
    if config_path and config.loaded_from is None:
        raise ConfigurationError(f"Cannot load configuration file {config_path}",
                                 error_code="CONFIG_LOAD")
    settings = config.get_settings()
    if log_level:
        settings.logging.level = log_level

    # scenario settings are completed from the command line afterwards
    errors = config.validate()
    errors.pop("scenario")
    _raise_on_errors(errors)

    setup_logging(settings.logging)
    return config


def _apply_arguments(config: ConfigManager, args: argparse.Namespace):
    """Command line values override the configuration file."""
    scenario_updates = {}
    if args.map:
        scenario_updates['map_file'] = args.map
    if args.start:
        scenario_updates['start'] = args.start
    if args.goal:
        scenario_updates['goal'] = args.goal
    if args.random:
        scenario_updates['random_positions'] = True
    if args.seed is not None:
        scenario_updates['random_seed'] = args.seed
    config.update_scenario_settings(**scenario_updates)

    search_updates = {}
    if args.directions:
        search_updates['direction_count'] = args.directions
    if args.algorithm:
        search_updates['algorithms'] = (
            ['dijkstra', 'astar'] if args.algorithm == 'all' else [args.algorithm]
        )
    if args.max_expansions is not None:
        search_updates['max_expansions'] = args.max_expansions
    config.update_search_settings(**search_updates)

    _raise_on_errors(config.validate())


def run_search(args: argparse.Namespace) -> int:
    """Run the configured algorithms once and report path length and cost."""
    config = setup_environment(args.config, args.log_level)
    _apply_arguments(config, args)
    settings = config.get_settings()

    scenario = Scenario.from_settings(settings)
    results = scenario.run_all(settings.search.algorithms)

    for result in results:
        print(result.summary())

    if args.render:
        explored = scenario.came_from(results[0].name) if args.explored else None
        print(render(scenario.grid, [r.route for r in results], explored,
                     scenario.start, scenario.goal))
        print(legend([r.name for r in results]))

    if not all(result.found for result in results):
        return EXIT_NO_PATH
    if not scenario.costs_agree():
        logging.warning("Algorithms disagree on the shortest path cost")
    return EXIT_OK


def run_benchmark(args: argparse.Namespace) -> int:
    """Time the configured algorithms over repeated fresh runs."""
    config = setup_environment(args.config, args.log_level)
    _apply_arguments(config, args)
    if args.runs:
        config.update_performance_settings(run_counts=args.runs)
    settings = config.get_settings()

    scenario = Scenario.from_settings(settings)
    print("Beginning performance tests on the algorithms.")
    report = PerformanceTester(scenario).run(settings.search.algorithms,
                                             settings.performance.run_counts)
    print(report)
    return EXIT_OK


def show_map(args: argparse.Namespace) -> int:
    """Print a map file with the configured terrain interpretation."""
    config = setup_environment(args.config, args.log_level)
    search = config.get_settings().search
    grid = load_grid(args.map, impassable=search.impassable,
                     weighted=search.weighted_terrain, edge_weight=search.edge_weight)
    print(grid)
    print(render(grid))
    return EXIT_OK


def _add_scenario_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('map', nargs='?', help='Map file (MovingAI .map or plain rows)')
    parser.add_argument('--start', nargs=2, type=int, metavar=('ROW', 'COL'))
    parser.add_argument('--goal', nargs=2, type=int, metavar=('ROW', 'COL'))
    parser.add_argument('--random', action='store_true',
                        help='Pick random passable start and goal cells')
    parser.add_argument('--seed', type=int, help='Seed for --random')
    parser.add_argument('--directions', type=int, choices=(4, 8))
    parser.add_argument('--algorithm', choices=('dijkstra', 'astar', 'all'))
    parser.add_argument('--max-expansions', type=int,
                        help='Give up after this many expanded cells')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gridpath',
        description="gridpath - shortest paths on grid maps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s run maps/arena.map --start 3 4 --goal 20 31
  %(prog)s run maps/arena.map --random --seed 7 --directions 8 --render
  %(prog)s bench maps/arena.map --random --runs 10 50 100
  %(prog)s show maps/arena.map
        """
    )
    parser.add_argument('--config', help='Path to JSON configuration file')
    parser.add_argument('--log-level', choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'))

    subparsers = parser.add_subparsers(dest='mode', help='Operation mode')

    run_parser = subparsers.add_parser('run', help='Find shortest paths')
    _add_scenario_arguments(run_parser)
    run_parser.add_argument('--render', action='store_true', help='Print the map with paths')
    run_parser.add_argument('--explored', action='store_true',
                            help='With --render, mark cells explored by the first algorithm')
    run_parser.set_defaults(handler=run_search)

    bench_parser = subparsers.add_parser('bench', help='Time repeated runs')
    _add_scenario_arguments(bench_parser)
    bench_parser.add_argument('--runs', nargs='+', type=int, help='Repetition counts')
    bench_parser.set_defaults(handler=run_benchmark)

    show_parser = subparsers.add_parser('show', help='Print a map')
    show_parser.add_argument('map', help='Map file')
    show_parser.set_defaults(handler=show_map)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, 'handler', None):
        parser.print_help()
        return EXIT_CONFIG_ERROR

    try:
        return args.handler(args)
    except (ConfigurationError, ValidationError) as e:
        logging.error(f"Refusing to run: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except GridPathException as e:
        logging.error(f"gridpath failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
