"""Configuration loading from files and environment."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from pydantic import BaseModel

from solidkit._package import ENV_PREFIX
from solidkit.config.schemas import AppConfig
from solidkit.domain.base.exceptions import ConfigurationError

DEFAULT_CONFIG_LOCATIONS = (
    "solidkit.yaml",
    "solidkit.yml",
    "solidkit.json",
    "config/solidkit.yaml",
    "config/solidkit.json",
)
NESTING_SEPARATOR = "__"


class ConfigurationLoader:
    """Loads raw configuration dictionaries from JSON/YAML files and the environment."""

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_file: Path to the configuration file

        Returns:
            Raw configuration dictionary

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {config_file} must be a mapping, got {type(data).__name__}"
            )
        return data

    def load_configuration(self, search_root: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the first default location that exists."""
        root = Path(search_root) if search_root else Path.cwd()
        for location in DEFAULT_CONFIG_LOCATIONS:
            candidate = root / location
            if candidate.is_file():
                return self.load_from_file(str(candidate))
        return {}

    def apply_environment_overrides(
        self,
        config_data: Dict[str, Any],
        environ: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration data.

        SOLIDKIT_WIRING__RECORD_STORE=mysql sets config["wiring"]["record_store"].
        Values are parsed as YAML scalars so numbers and booleans keep their
        type, except for string fields of AppConfig, which keep the raw value.

        Args:
            config_data: Raw configuration dictionary
            environ: Environment mapping, defaults to os.environ

        Returns:
            New configuration dictionary with overrides applied
        """
        environ = os.environ if environ is None else environ
        result = copy.deepcopy(config_data)

        for key, raw_value in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            path = [part.lower() for part in key[len(ENV_PREFIX):].split(NESTING_SEPARATOR) if part]
            if not path:
                continue

            target = result
            for part in path[:-1]:
                existing = target.get(part)
                if not isinstance(existing, dict):
                    existing = {}
                    target[part] = existing
                target = existing
            if _is_string_field(path):
                target[path[-1]] = raw_value
            else:
                target[path[-1]] = self._parse_scalar(raw_value)

        return result

    @staticmethod
    def _parse_scalar(raw_value: str) -> Any:
        try:
            return yaml.safe_load(raw_value)
        except yaml.YAMLError:
            return raw_value


def _is_string_field(path: List[str]) -> bool:
    """Whether a lower-cased key path names a str field of AppConfig."""
    model: Any = AppConfig
    for depth, part in enumerate(path):
        field = model.model_fields.get(part) if isinstance(model, type) else None
        if field is None:
            return False
        if depth == len(path) - 1:
            return field.annotation is str
        model = field.annotation
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            return False
    return False
