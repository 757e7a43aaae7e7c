"""Configuration service for The Referee.

Updates:
    v0.1.0 - 2025-11-09 - Settings and preset accessors over the YAML loader.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader

DEFAULT_SCORE_PRECISION = 2


@dataclass(slots=True, frozen=True)
class OutputConfig:
    """Presentation settings for rendered comparisons."""

    score_precision: int = DEFAULT_SCORE_PRECISION
    show_pros_cons: bool = True


class ConfigService:
    """Loads and exposes configuration for Referee components."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._loader.load("settings")
        self._presets = self._loader.load_optional("presets")

    @property
    def config_path(self) -> Path:
        return self._loader.base_path

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        return self._section(self._settings, "app")

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return the logging section, stamped with the application name."""
        logging_section = self._section(self._settings, "logging")
        logging_section.setdefault("service", self.app_metadata.get("name"))
        return logging_section

    @property
    def output_config(self) -> OutputConfig:
        """Return rendering preferences with defaults for missing keys."""

        section = self._section(self._settings, "output")
        precision = section.get("score_precision", DEFAULT_SCORE_PRECISION)
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError("output.score_precision must be a non-negative integer.")
        return OutputConfig(
            score_precision=precision,
            show_pros_cons=bool(section.get("show_pros_cons", True)),
        )

    @property
    def presets(self) -> dict[str, dict[str, Any]]:
        """Return named example requests with environment variables expanded."""

        section = self._presets.get("presets", {})
        if not isinstance(section, dict):
            return {}
        return {
            str(name): self._expand_env_values(payload)
            for name, payload in section.items()
            if isinstance(payload, dict)
        }

    def get_preset(self, name: str) -> dict[str, Any]:
        """Return one preset request payload.

        Raises:
            KeyError: If no preset is registered under ``name``.
        """

        presets = self.presets
        if name not in presets:
            available = ", ".join(sorted(presets)) or "(none configured)"
            raise KeyError(f"Preset '{name}' not found. Available presets: {available}.")
        return presets[name]

    def summary(self) -> dict[str, Any]:
        """Return the effective configuration as a JSON-ready mapping."""

        output = self.output_config
        return {
            "config_path": str(self.config_path),
            "app": self.app_metadata,
            "logging": self.logging_config,
            "output": {
                "score_precision": output.score_precision,
                "show_pros_cons": output.show_pros_cons,
            },
            "presets": sorted(self.presets),
        }

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()

    @staticmethod
    def _section(document: dict[str, Any], key: str) -> dict[str, Any]:
        section = document.get(key, {})
        return dict(section) if isinstance(section, dict) else {}

    @staticmethod
    def _expand_env_values(value: Any) -> Any:
        if isinstance(value, dict):
            return {key: ConfigService._expand_env_values(entry) for key, entry in value.items()}
        if isinstance(value, list):
            return [ConfigService._expand_env_values(item) for item in value]
        if isinstance(value, str):
            return os.path.expandvars(value)
        return value
