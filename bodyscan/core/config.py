"""Shared YAML configuration for measurement thresholds and ranges"""

import os
from pathlib import Path
from typing import Any, Optional
import yaml


CONFIG_ENV_VAR = "BODYSCAN_CONFIG"
CONFIG_FILENAME = "config.yaml"


class Config:
    """
    Process-wide configuration with dot-notation access.

    Config() returns the shared instance. Passing a path loads that file
    into the shared instance; Config.reset() discards it so the next
    Config() reads from disk again.
    """

    _instance: Optional["Config"] = None

    def __new__(cls, config_path: Optional[str] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None):
        if self._initialized and config_path is None:
            return

        self._load(config_path or self._find_config())
        self._initialized = True

    @staticmethod
    def _find_config() -> str:
        """$BODYSCAN_CONFIG, else the nearest config.yaml above this module."""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return override

        for directory in list(Path(__file__).resolve().parents)[:4]:
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return str(candidate)

        raise FileNotFoundError(f"{CONFIG_FILENAME} not found")

    def _load(self, config_path: str) -> None:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"{config_path}: top level must be a mapping")

        self._config = data
        self._config_path = str(config_path)

    def reload(self) -> None:
        """Re-read the current file, dropping runtime set() calls."""
        self._load(self._config_path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dotted key.

        Example:
            config.get("calibration.max_height_cm", 300.0)
            config.get("measurement.ranges.neck_width")
        """
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """Override a dotted key in memory; intermediate sections are created."""
        *parents, leaf = key.split(".")
        node = self._config
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value

    def save(self, path: Optional[str] = None) -> None:
        with open(path or self._config_path, "w") as f:
            yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)

    def section(self, name: str) -> dict:
        """Top-level section as a dict, empty if absent."""
        value = self._config.get(name)
        return value if isinstance(value, dict) else {}

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    @property
    def path(self) -> str:
        return self._config_path

    @property
    def app(self) -> dict:
        return self.section("app")

    @property
    def calibration(self) -> dict:
        return self.section("calibration")

    @property
    def measurement(self) -> dict:
        return self.section("measurement")

    @property
    def thigh(self) -> dict:
        return self.section("thigh")

    @property
    def framing(self) -> dict:
        return self.section("framing")

    @property
    def height(self) -> dict:
        return self.section("height")

    def __repr__(self) -> str:
        return f"Config({self._config_path})"
