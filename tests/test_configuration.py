"""Tests for configuration management and logging setup."""
import json
import logging

import pytest

from gridpath.shared.configuration import ConfigManager, ApplicationSettings
from gridpath.shared.configuration.settings import LoggingSettings, SearchSettings
from gridpath.application import Scenario
from gridpath.shared.exceptions import ConfigurationError
from gridpath.shared.utils.logging_utils import setup_logging, get_context_logger


class TestConfigManager:
    """Loading, saving and validating settings"""
    
    def test_defaults_without_file(self, tmp_path):
        path = tmp_path / "gridpath.json"
        manager = ConfigManager(path)
        settings = manager.get_settings()
        assert settings.search.direction_count == 4
        assert settings.search.impassable == ["T", "W", "@"]
        assert settings.performance.run_counts == [10, 10, 20, 30, 50]
        assert not path.exists()
    
    def test_create_default(self, tmp_path):
        path = tmp_path / "config" / "gridpath.json"
        ConfigManager(path, create_default=True)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["search"]["edge_weight"] == 2.0
        assert data["scenario"]["map_file"] is None
    
    def test_save_and_load(self, tmp_path):
        path = tmp_path / "gridpath.json"
        manager = ConfigManager(path)
        manager.update_search_settings(direction_count=8, algorithms=["astar"])
        manager.update_scenario_settings(start=[1, 2], goal=[3, 4])
        assert manager.save()
        
        reloaded = ConfigManager(path).get_settings()
        assert reloaded.search.direction_count == 8
        assert reloaded.search.algorithms == ["astar"]
        assert reloaded.scenario.start == [1, 2]
    
    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "gridpath.json"
        path.write_text(json.dumps({"search": {"edge_weight": 4.0}, "bogus": 1}), encoding="utf-8")
        settings = ConfigManager(path).get_settings()
        assert settings.search.edge_weight == 4.0
        assert settings.search.direction_count == 4
        assert not hasattr(settings, "bogus")
    
    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "gridpath.json"
        path.write_text("{not json", encoding="utf-8")
        manager = ConfigManager(path)
        assert not manager.load()
        assert manager.get_settings().search.direction_count == 4
    
    def test_load_missing_file(self, tmp_path):
        assert not ConfigManager(tmp_path / "a.json").load(tmp_path / "b.json")
    
    def test_unknown_update_is_ignored(self, tmp_path):
        manager = ConfigManager(tmp_path / "gridpath.json")
        manager.update_search_settings(colour="red")
        assert not hasattr(manager.get_settings().search, "colour")
    
    def test_validation(self, tmp_path):
        manager = ConfigManager(tmp_path / "gridpath.json")
        manager.update_search_settings(direction_count=6, edge_weight=0.5, algorithms=["bfs"])
        manager.update_performance_settings(run_counts=[5, 0])
        errors = manager.validate()
        assert len(errors["search"]) == 3
        assert len(errors["performance"]) == 1
        assert errors["logging"] == []
    
    def test_scenario_requires_positions_with_map(self):
        settings = ApplicationSettings()
        settings.scenario.map_file = "arena.map"
        assert settings.scenario.validate()
        settings.scenario.random_positions = True
        assert settings.scenario.validate() == []
    
    def test_mistyped_values_are_reported(self):
        settings = ApplicationSettings()
        settings.search.edge_weight = "heavy"
        settings.search.impassable = "TW"
        settings.scenario.start = ["a", 0]
        settings.performance.run_counts = ["10"]
        settings.logging.level = 5
        settings.logging.component_levels = {"gridpath.algorithms": None}
        errors = settings.validate()
        assert len(errors["search"]) == 2
        assert len(errors["scenario"]) == 1
        assert len(errors["performance"]) == 1
        assert len(errors["logging"]) == 2
    
    def test_non_object_file_is_not_loaded(self, tmp_path):
        path = tmp_path / "gridpath.json"
        path.write_text("[1, 2]", encoding="utf-8")
        manager = ConfigManager(path)
        assert manager.loaded_from is None
    
    def test_loaded_from(self, tmp_path):
        path = tmp_path / "gridpath.json"
        path.write_text("{}", encoding="utf-8")
        assert ConfigManager(path).loaded_from == path.resolve()
        assert ConfigManager(tmp_path / "other.json").loaded_from is None
    
    def test_reset(self, tmp_path):
        manager = ConfigManager(tmp_path / "gridpath.json")
        manager.update_search_settings(direction_count=8)
        manager.update_logging_settings(level="DEBUG")
        manager.reset_category_to_defaults("search")
        assert manager.get_settings().search == SearchSettings()
        assert manager.get_settings().logging.level == "DEBUG"
        manager.reset_category_to_defaults("nothing")
        manager.reset_to_defaults()
        assert manager.get_settings().logging.level == "INFO"
    
    def test_config_info(self, tmp_path):
        path = tmp_path / "gridpath.json"
        info = ConfigManager(path).get_config_info()
        assert info["config_path"] == str(path.resolve())
        assert info["config_exists"] is False
        assert info["version"] == "1.0.0"
        assert all(not errors for errors in info["validation_errors"].values())


class TestLogging:
    """Root logger configuration"""
    
    def test_console_and_file_handlers(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "gridpath.log"
        settings = LoggingSettings(level="DEBUG", file_output=True, log_file=str(log_file),
                                   component_levels={"gridpath.algorithms": "WARNING"})
        setup_logging(settings)
        
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert logging.getLogger("gridpath.algorithms").level == logging.WARNING
        
        logging.getLogger("gridpath.test").info("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
    
    def test_console_only(self, restore_root_logger):
        setup_logging(LoggingSettings(level="WARNING"))
        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.WARNING
        assert logging.getLogger("gridpath.algorithms").level == logging.INFO
    
    @pytest.mark.parametrize("settings", [
        LoggingSettings(level="VERBOSE"),
        LoggingSettings(component_levels={"gridpath.algorithms": "LOUD"}),
    ])
    def test_unknown_level_keeps_current_setup(self, settings, restore_root_logger):
        before = list(restore_root_logger.handlers)
        with pytest.raises(ConfigurationError):
            setup_logging(settings)
        assert restore_root_logger.handlers == before
    
    def test_search_context_labels_messages(self, open_grid, caplog):
        scenario = Scenario(open_grid, (0, 0), (2, 2))
        with caplog.at_level(logging.INFO, logger="gridpath.application.scenario"):
            scenario.run_algorithm("astar")
        assert "[algorithm=A* start=(0, 0) goal=(2, 2)] Starting search" in caplog.text
    
    def test_context_logger(self, caplog):
        context_logger = get_context_logger("gridpath.test", algorithm="A*")
        with caplog.at_level(logging.INFO, logger="gridpath.test"):
            context_logger.info("Starting search")
        assert "[algorithm=A*] Starting search" in caplog.text
