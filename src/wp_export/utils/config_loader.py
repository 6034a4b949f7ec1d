"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict


def get_project_root() -> Path:
    """Get the project root directory."""
    current = Path(__file__).resolve()
    # Navigate up from src/wp_export/utils to project root
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


def load_config(config_path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        config_path: Path to the YAML config file (absolute or relative to project root)

    Returns:
        Dictionary containing the configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    path = Path(config_path)
    if not path.is_absolute():
        path = get_project_root() / path

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class BaseConfig(BaseModel):
    """Base configuration model with common functionality."""

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "BaseConfig":
        """Load configuration from a YAML file."""
        config_dict = load_config(path)
        return cls(**config_dict)


class ExportConfig(BaseConfig):
    """Settings identifying the application that generates export files."""

    app_name: str = "Polylang"
    app_version: str = "3.6"
    product_name: str = "Polylang Pro"
    product_url: str = "https://polylang.pro/"
    site_url: str = ""

    @property
    def project_id_version(self) -> str:
        """Value of the ``Project-Id-Version`` header."""
        return f"{self.app_name}/{self.app_version}"
