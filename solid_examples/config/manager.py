"""Configuration management for the SOLID examples."""
from __future__ import annotations
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from solid_examples.config.defaults import DEFAULT_CONFIG
from solid_examples.config.schemas import AppConfig, LoggingConfig, SrpConfig
from solid_examples.config.utils.env_expansion import expand_config_env_vars
from solid_examples.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled from three sources, later ones winning:
    - Built-in defaults
    - An optional JSON configuration file
    - Environment variables referenced through ``${VAR:default}`` placeholders

    The result is validated against ``AppConfig`` on first access and cached.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    def _load_file(self) -> Dict[str, Any]:
        if not self._config_file:
            return {}

        path = Path(self._config_file)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a JSON object"
            )
        logger.debug("Loaded configuration file %s", path)
        return data

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the merged, environment-expanded configuration dictionary."""
        merged = deep_merge(DEFAULT_CONFIG, self._load_file())
        return expand_config_env_vars(merged)

    def get_app_config(self) -> AppConfig:
        """Get the validated application configuration."""
        if self._app_config is None:
            raw = self.get_raw_config()
            try:
                self._app_config = AppConfig.model_validate(raw)
            except ValidationError as e:
                fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
                raise ConfigurationError(
                    f"Invalid configuration: {', '.join(fields)}", fields
                ) from e
        return self._app_config

    def get_logging_config(self) -> LoggingConfig:
        return self.get_app_config().logging

    def get_srp_config(self) -> SrpConfig:
        return self.get_app_config().srp

    def get_example_options(self, name: str) -> Dict[str, Any]:
        """Get the keyword options for the named example's ``run`` function."""
        return self.get_app_config().get_example_options(name)

    def override(self, **values: Any) -> None:
        """
        Apply dotted-key overrides on top of the loaded configuration.

        Args:
            values: Mapping such as ``{"srp.output_dir": "/tmp"}``; ``None``
                values are ignored
        """
        raw = self.get_app_config().model_dump(mode="json")
        for dotted_key, value in values.items():
            if value is None:
                continue
            target = raw
            *parents, leaf = dotted_key.split(".")
            for part in parents:
                target = target.setdefault(part, {})
            target[leaf] = value
        try:
            self._app_config = AppConfig.model_validate(raw)
        except ValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration override: {', '.join(fields)}", fields
            ) from e
