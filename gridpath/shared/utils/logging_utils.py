"""Logging setup for gridpath runs.

Logs go to stderr so that path summaries, rendered maps and benchmark tables
on stdout stay machine-readable.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, List

from ..configuration.settings import LoggingSettings
from ..exceptions import ConfigurationError


def _resolve_level(name, owner: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level for {owner}: {name!r}",
                                 error_code="LOG_LEVEL")
    return level


def setup_logging(settings: LoggingSettings) -> None:
    """Configure the root logger from settings.
    
    Every level is resolved before any handler is touched, so a bad level
    leaves the current logging setup in place.
    
    Raises:
        ConfigurationError: If the root or a component level is unknown
    """
    root_level = _resolve_level(settings.level, "root")
    component_levels = {
        component: _resolve_level(level, component)
        for component, level in settings.component_levels.items()
    }
    
    formatter = logging.Formatter(fmt=settings.format_string, datefmt=settings.date_format)
    handlers: List[logging.Handler] = []
    if settings.console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    
    file_error = None
    if settings.file_output:
        try:
            Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                filename=settings.log_file,
                maxBytes=int(settings.max_file_size_mb * 1024 * 1024),
                backupCount=settings.backup_count,
                encoding='utf-8'
            ))
        except OSError as e:
            file_error = e
    
    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(root_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    
    for component, level in component_levels.items():
        logging.getLogger(component).setLevel(level)
    
    if file_error is not None:
        root_logger.error(f"File logging disabled, cannot open {settings.log_file}: {file_error}")
    root_logger.debug(f"gridpath logging at {logging.getLevelName(root_level)}, "
                      f"components {settings.component_levels}")


class SearchLogAdapter(logging.LoggerAdapter):
    """Prefixes records with the run they belong to, e.g. ``[algorithm=A*]``."""
    
    def process(self, msg, kwargs):
        if self.extra:
            context = " ".join(f"{key}={value}" for key, value in self.extra.items())
            return f"[{context}] {msg}", kwargs
        return msg, kwargs


def get_context_logger(name: str, **context) -> SearchLogAdapter:
    """Logger for one search run; context values label every message."""
    return SearchLogAdapter(logging.getLogger(name), context)
