"""
Configuration management for ginger
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ginger.constants import constants
from ginger.ginger_types.exceptions import InvalidConfigError

DEFAULTS_FILE = Path(__file__).parent / "defaults.yaml"


class WalkOptions(BaseModel):
    """Options that steer the tree walk"""
    model_config = ConfigDict(frozen=True)

    root: str = "."
    """Directory the walk starts from"""
    sort_entries: bool = True
    """Visit entries in name order instead of listing order"""
    exclude_dirs: List[str] = Field(default_factory=list)
    """Directory names that are never entered"""


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads and manages ginger configuration"""

    SECTIONS = ("files", "walk", "logging")

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration loader

        Args:
            config_file: Optional user YAML merged over the packaged defaults.
                Falls back to the file named by GINGER_CONFIG.

        Raises:
            FileNotFoundError: The user file does not exist
            InvalidConfigError: The user file is not valid YAML or has
                options of the wrong shape
        """
        with open(DEFAULTS_FILE, 'r', encoding="utf-8") as f:
            self.config = yaml.safe_load(f) or {}

        if config_file is None and os.environ.get(constants.CONFIG_FILE_ENV):
            config_file = Path(os.environ[constants.CONFIG_FILE_ENV])

        self.config_file = Path(config_file) if config_file is not None else None
        if self.config_file is not None:
            if not self.config_file.exists():
                raise FileNotFoundError(f"Config file not found: {self.config_file}")
            self.config = _merge(self.config, self._load_user_config(self.config_file))

        for section in self.SECTIONS:
            if not isinstance(self.config.get(section) or {}, dict):
                raise InvalidConfigError(self.config_file, f"{section} must be a mapping")

        try:
            self.walk_options = WalkOptions(**(self.config.get("walk") or {}))
        except ValidationError as e:
            error = e.errors()[0]
            location = ".".join(["walk", *map(str, error["loc"])])
            raise InvalidConfigError(self.config_file, f"{location}: {error['msg']}") from e

    @staticmethod
    def _load_user_config(config_file: Path) -> Dict[str, Any]:
        with open(config_file, 'r', encoding="utf-8") as f:
            try:
                user_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                problem = getattr(e, "problem", None) or str(e).splitlines()[0]
                mark = getattr(e, "problem_mark", None)
                if mark is not None:
                    problem = f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
                raise InvalidConfigError(config_file, problem) from e

        if not isinstance(user_config, dict):
            raise InvalidConfigError(config_file, "top level must be a mapping")
        return user_config

    def get_option(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value

        Args:
            section: Top level section (files, walk, logging)
            key: Option key
            default: Default value if not found

        Returns:
            Option value
        """
        return (self.config.get(section) or {}).get(key, default)

    def get_walk_options(self) -> WalkOptions:
        """Get the walk section as a validated model"""
        return self.walk_options

    def get_all_configs(self) -> Dict[str, Any]:
        """Get all configuration data"""
        return copy.deepcopy(self.config)


__all__ = ["ConfigLoader", "WalkOptions"]
