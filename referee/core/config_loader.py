"""YAML configuration loading.

Updates:
    v0.1.0 - 2025-11-09 - Cached loader rooted at ``REFEREE_CONFIG_PATH``.
"""

from __future__ import annotations

import functools
import os
from pathlib import Path
from typing import Any, Dict

import yaml

# Shipped as package data next to the code.
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def default_config_dir() -> Path:
    """Return the configuration directory, honouring ``REFEREE_CONFIG_PATH``."""

    override = os.environ.get("REFEREE_CONFIG_PATH")
    return Path(override).resolve() if override else DEFAULT_CONFIG_DIR


class ConfigLoader:
    """Reads named YAML documents from a configuration directory."""

    def __init__(self, base_path: Path | None = None) -> None:
        """Bind the loader to a directory.

        Args:
            base_path (Path | None): Directory override; defaults to
                :func:`default_config_dir`.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """

        self._base_path = Path(base_path) if base_path else default_config_dir()
        if not self._base_path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {self._base_path}")

    @property
    def base_path(self) -> Path:
        return self._base_path

    def path_for(self, name: str) -> Path:
        candidate = self._base_path / name
        if candidate.suffix not in {".yaml", ".yml"}:
            candidate = candidate.with_suffix(".yaml")
        return candidate

    @functools.lru_cache(maxsize=None)
    def load(self, name: str) -> Dict[str, Any]:
        """Parse ``<name>.yaml`` into a dictionary, cached per loader and name.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the document is not a mapping.
        """

        path = self.path_for(name)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping at the top level.")
        return data

    def load_optional(self, name: str) -> Dict[str, Any]:
        """Like :meth:`load` but returns an empty mapping for a missing file."""

        if not self.path_for(name).exists():
            return {}
        return self.load(name)
