# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Configuration manager for typed parameters.

This module provides the central ConfigManager class that handles:
- Environment variable loading with type conversion
- Configuration validation and cross-field checks
- Environment profile application
- Thread-safe configuration access
- Runtime configuration updates
"""

import json
import logging
import os
import threading
from typing import Any, Optional

import yaml

from .defaults import (
    DEFAULT_CONFIG,
    ENV_VAR_MAPPING,
    ENV_VAR_TYPES,
    FALSY_ENV_VALUES,
    TRUTHY_ENV_VALUES,
    get_profile_overrides,
)
from .schema import ConfigSchema, DiagnosticsConfig, EncodingConfig, SourcesConfig
from .validation import ConfigValidationError, ConfigValidator

logger = logging.getLogger(__name__)


def convert_env_value(env_var: str, env_value: str) -> Any:
    """Convert a raw environment variable value to its configured type.

    Raises:
        ValueError: If the value cannot be converted
    """
    var_type = ENV_VAR_TYPES.get(env_var, str)
    if var_type is bool:
        normalized = env_value.strip().lower()
        if normalized in TRUTHY_ENV_VALUES:
            return True
        if normalized in FALSY_ENV_VALUES:
            return False
        raise ValueError(f"expected one of {TRUTHY_ENV_VALUES + FALSY_ENV_VALUES[:-1]}")
    return var_type(env_value)


class ConfigManager:
    """Thread-safe configuration manager with environment variable support.

    Features:
    - Environment variable loading with TPR_ prefix
    - Type conversion and validation
    - Environment profiles (development, staging, production)
    - Runtime configuration updates
    - Validation with warnings and recommendations
    """

    _instance: Optional["ConfigManager"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ConfigManager":
        """Singleton pattern implementation."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize configuration manager."""
        if hasattr(self, "_initialized"):
            return

        self._config_lock = threading.RLock()
        self._config: ConfigSchema = DEFAULT_CONFIG.model_copy(deep=True)
        self._validator = ConfigValidator()
        self._loaded_from_env = False
        self._initialization_errors: list[str] = []

        # Load configuration on first initialization
        try:
            self._load_configuration()
        except ConfigValidationError as e:
            logger.exception("Failed to load configuration")
            self._initialization_errors.append(str(e))

        self._initialized = True

    def _load_configuration(self) -> None:
        """Load configuration from environment variables."""
        with self._config_lock:
            config_data = DEFAULT_CONFIG.model_dump()

            explicit_paths = self._load_from_environment(config_data)

            # Profile values never override explicit environment variables
            self._apply_environment_profile(config_data, explicit_paths)

            try:
                new_config = ConfigSchema(**config_data)
                self._validator.validate_config(new_config)
            except Exception as e:
                logger.exception("Configuration validation failed")
                raise ConfigValidationError(f"Invalid configuration: {e}") from e

            self._config = new_config
            logger.debug("Configuration loaded successfully")
            if self._validator.warnings:
                logger.warning("Configuration warnings: %s", self._validator.warnings)
            if self._validator.recommendations:
                logger.info(
                    "Configuration recommendations: %s",
                    self._validator.recommendations,
                )

    def _load_from_environment(self, config_data: dict[str, Any]) -> set[str]:
        """Load configuration from environment variables with TPR_ prefix.

        Returns:
            Configuration paths that were set from the environment
        """
        explicit_paths: set[str] = set()

        for env_var, config_path in ENV_VAR_MAPPING.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue
            try:
                converted_value = convert_env_value(env_var, env_value)
            except (ValueError, TypeError) as e:
                logger.warning("Invalid value for %s='%s': %s", env_var, env_value, e)
                continue

            self._set_nested_value(config_data, config_path, converted_value)
            explicit_paths.add(config_path)

        if explicit_paths:
            self._loaded_from_env = True
            logger.debug(
                "Loaded %d configuration values from environment variables",
                len(explicit_paths),
            )
        return explicit_paths

    def _apply_environment_profile(
        self,
        config_data: dict[str, Any],
        explicit_paths: set[str],
    ) -> None:
        """Apply environment-specific configuration overrides."""
        environment = config_data.get("environment", "production")
        profile_overrides = get_profile_overrides(environment)

        applied = False
        for config_path, value in profile_overrides.items():
            if config_path in explicit_paths:
                continue
            # Payload logging needs failure logging
            if (
                config_path == "diagnostics.include_payloads"
                and value
                and not config_data["diagnostics"]["log_failures"]
            ):
                logger.debug(
                    "Skipped %s profile value for %s: failure logging is disabled",
                    environment,
                    config_path,
                )
                continue
            self._set_nested_value(config_data, config_path, value)
            applied = True
        if applied:
            logger.debug("Applied %s environment profile", environment)

    def _set_nested_value(self, data: dict[str, Any], path: str, value: Any) -> None:
        """Set a nested dictionary value using dot notation path."""
        keys = path.split(".")
        current = data

        # Navigate to the parent of the target key
        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    @property
    def config(self) -> ConfigSchema:
        """Get current configuration (thread-safe)."""
        with self._config_lock:
            result: ConfigSchema = self._config.model_copy(deep=True)
            return result

    @property
    def diagnostics(self) -> DiagnosticsConfig:
        """Get failure logging configuration."""
        return self._config.diagnostics

    @property
    def encoding(self) -> EncodingConfig:
        """Get JSON encoding configuration."""
        return self._config.encoding

    @property
    def sources(self) -> SourcesConfig:
        """Get environment and query string helper configuration."""
        return self._config.sources

    def update_config(self, **kwargs: Any) -> None:
        """Update configuration at runtime (thread-safe).

        Args:
            **kwargs: Configuration values to update using double underscore notation

        Example:
            config.update_config(
                diagnostics__include_payloads=True,
                encoding__json_sort_keys=True,
            )
        """
        with self._config_lock:
            config_data = self._config.model_dump()

            for key, value in kwargs.items():
                config_path = key.replace("__", ".")
                self._set_nested_value(config_data, config_path, value)

            try:
                new_config = ConfigSchema(**config_data)
                self._validator.validate_config(new_config)
            except Exception as e:
                logger.exception("Configuration update failed")
                raise ConfigValidationError(f"Invalid configuration update: {e}") from e

            self._config = new_config
            logger.info("Configuration updated: %s", list(kwargs.keys()))

    def reload_configuration(self) -> None:
        """Reload configuration from the environment."""
        logger.debug("Reloading configuration...")
        self._loaded_from_env = False
        self._initialization_errors.clear()
        self._load_configuration()

    def get_config_summary(self) -> dict[str, Any]:
        """Get configuration summary."""
        validation_summary = self._validator.get_validation_summary()

        return {
            "config_version": self._config.config_version,
            "environment": self._config.environment,
            "debug_mode": self._config.debug_mode,
            "loaded_from_env": self._loaded_from_env,
            "initialization_errors": self._initialization_errors,
            "validation": validation_summary,
            "diagnostics_summary": {
                "log_failures": self._config.diagnostics.log_failures,
                "failure_log_level": self._config.diagnostics.failure_log_level,
                "include_payloads": self._config.diagnostics.include_payloads,
            },
        }

    def export_config(self, format: str = "json") -> str:
        """Export current configuration to JSON or YAML format."""
        config_dict = self._config.model_dump()

        if format.lower() == "yaml":
            return str(yaml.safe_dump(config_dict, default_flow_style=False, indent=2))
        if format.lower() == "json":
            return json.dumps(config_dict, indent=2)
        raise ValueError(f"Unsupported export format: {format}")

    def get_env_var_help(self) -> dict[str, str]:
        """Get help text for all supported environment variables."""
        help_text = {}

        for env_var, config_path in ENV_VAR_MAPPING.items():
            var_type = ENV_VAR_TYPES.get(env_var, str)
            help_text[env_var] = f"Type: {var_type.__name__}, Path: {config_path}"

        return help_text


# Global configuration instance
config = ConfigManager()
