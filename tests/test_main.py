"""Tests for the command line entry point."""
import json

import pytest

import main


pytestmark = pytest.mark.usefixtures("restore_root_logger")


@pytest.fixture
def write_config(tmp_path):
    def write(data):
        path = tmp_path / "gridpath.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path
    return write


@pytest.fixture
def cli(write_config):
    """Run main() with an isolated, empty config file."""
    config = write_config({})

    def run(*argv):
        return main.main(["--config", str(config), "--log-level", "WARNING", *argv])
    return run


@pytest.fixture
def walled_map(tmp_path):
    path = tmp_path / "walled.map"
    path.write_text(".....\n..T..\n.T.T.\n..T..\n.....\n", encoding="utf-8")
    return path


class TestRun:
    """run subcommand"""
    
    def test_path_found(self, cli, map_file, capsys):
        assert cli("run", str(map_file), "--start", "0", "0", "--goal", "3", "5") == main.EXIT_OK
        out = capsys.readouterr().out
        assert "Dijkstra: shortest path length 8" in out
        assert "A*: shortest path length 8" in out
    
    def test_render(self, cli, map_file, capsys):
        assert cli("run", str(map_file), "--start", "0", "0", "--goal", "3", "5",
                   "--algorithm", "astar", "--render", "--explored") == main.EXIT_OK
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[1].startswith("A")
        assert lines[4].endswith("B")
        assert "A start" in lines[-1]
    
    def test_random_positions(self, cli, map_file, capsys):
        assert cli("run", str(map_file), "--random", "--seed", "3", "--directions", "8") in (
            main.EXIT_OK, main.EXIT_NO_PATH
        )
        assert "Dijkstra" in capsys.readouterr().out
    
    def test_no_path(self, cli, walled_map, capsys):
        assert cli("run", str(walled_map), "--start", "0", "0", "--goal", "2", "2") == main.EXIT_NO_PATH
        assert "no path found" in capsys.readouterr().out
    
    def test_invalid_start(self, cli, map_file, capsys):
        assert cli("run", str(map_file), "--start", "9", "9", "--goal", "0", "0") == main.EXIT_CONFIG_ERROR
        assert "Error" in capsys.readouterr().err
    
    def test_impassable_goal(self, cli, map_file):
        assert cli("run", str(map_file), "--start", "0", "0", "--goal", "1", "1") == main.EXIT_CONFIG_ERROR
    
    def test_missing_positions(self, cli, map_file):
        assert cli("run", str(map_file)) == main.EXIT_CONFIG_ERROR
    
    def test_missing_map_file(self, cli, tmp_path):
        assert cli("run", str(tmp_path / "nope.map"), "--start", "0", "0",
                   "--goal", "1", "1") == main.EXIT_CONFIG_ERROR
    
    def test_zero_max_expansions_rejected(self, cli, map_file):
        assert cli("run", str(map_file), "--start", "0", "0", "--goal", "3", "5",
                   "--max-expansions", "0") == main.EXIT_CONFIG_ERROR


class TestOtherModes:
    
    def test_bench(self, cli, map_file, capsys):
        assert cli("bench", str(map_file), "--start", "0", "0", "--goal", "3", "5",
                   "--runs", "2") == main.EXIT_OK
        out = capsys.readouterr().out
        assert "Beginning performance tests" in out
        assert "Dijkstra" in out and "A*" in out
    
    def test_show(self, cli, map_file, capsys):
        assert cli("show", str(map_file)) == main.EXIT_OK
        assert "Grid(" in capsys.readouterr().out
    
    def test_no_mode(self, capsys):
        assert main.main([]) == main.EXIT_CONFIG_ERROR


class TestConfigFileErrors:
    """Bad configuration files exit with status 2 before any search"""
    
    @pytest.mark.parametrize("mode", ["run", "show"])
    def test_mistyped_value(self, write_config, map_file, mode, capsys):
        config = write_config({"search": {"edge_weight": "heavy"}})
        argv = ["--config", str(config), mode, str(map_file)]
        if mode == "run":
            argv += ["--start", "0", "0", "--goal", "3", "5"]
        assert main.main(argv) == main.EXIT_CONFIG_ERROR
        assert "edge_weight" in capsys.readouterr().err
    
    def test_unknown_log_level(self, write_config, map_file):
        config = write_config({"logging": {"level": "VERBOSE"}})
        assert main.main(["--config", str(config), "show", str(map_file)]) == main.EXIT_CONFIG_ERROR
    
    def test_malformed_file(self, write_config, map_file):
        config = write_config("{not json")
        assert main.main(["--config", str(config), "--log-level", "WARNING",
                          "show", str(map_file)]) == main.EXIT_CONFIG_ERROR
    
    def test_missing_file(self, tmp_path, map_file):
        assert main.main(["--config", str(tmp_path / "absent.json"), "--log-level", "WARNING",
                          "show", str(map_file)]) == main.EXIT_CONFIG_ERROR
    
    def test_positions_from_config(self, write_config, map_file, capsys):
        config = write_config({"scenario": {"map_file": str(map_file), "start": [0, 0],
                                            "goal": [3, 5]}})
        assert main.main(["--config", str(config), "--log-level", "WARNING", "run"]) == main.EXIT_OK
        assert "shortest path length 8" in capsys.readouterr().out
