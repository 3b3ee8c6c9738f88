"""Unified configuration management for the application."""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from solidkit.config.loader import ConfigurationLoader
from solidkit.config.schemas import AppConfig, LoggingConfig, WiringConfig
from solidkit.domain.base.exceptions import ConfigurationError
from solidkit.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Provides:
    - Type safety through pydantic models
    - JSON and YAML configuration files
    - Environment variable overrides (SOLIDKIT_ prefix)
    - Lazy, lock-protected loading
    """

    _TYPE_MAPPING = {
        'LoggingConfig': 'logging',
        'WiringConfig': 'wiring',
        'VariantOptions': 'variants',
    }

    def __init__(self, config_file: Optional[str] = None,
                 environ: Optional[Dict[str, str]] = None,
                 loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader or ConfigurationLoader()
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)
            logger.debug(f"Loaded configuration file {self._config_file}")
        else:
            config_data = self._loader.load_configuration()

        config_data = self._loader.apply_environment_overrides(config_data, self._environ)

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            logger.error(f"Invalid configuration: {fields}")
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        """Create typed configuration instance."""
        config_name = config_type.__name__
        if config_name in self._TYPE_MAPPING:
            return getattr(self.app_config, self._TYPE_MAPPING[config_name])
        raise ValueError(f"Unknown configuration type: {config_name}")

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.get_typed(LoggingConfig)

    def get_wiring_config(self) -> WiringConfig:
        """Get wiring configuration."""
        return self.get_typed(WiringConfig)

    def get_variant_options(self, variant_name: str) -> Dict[str, Any]:
        """Get construction options for a named variant."""
        return self.app_config.variant_options(variant_name)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()


__all__ = ["ConfigurationManager"]
