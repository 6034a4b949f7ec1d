"""Utility modules for WordPress translation export."""

from .config_loader import ExportConfig, load_config, get_project_root
from .logging import setup_logging, get_logger

__all__ = [
    "ExportConfig",
    "load_config",
    "get_project_root",
    "setup_logging",
    "get_logger",
]
