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

"""Configuration validation utilities for typed parameters.

This module provides cross-field validation for the library settings and
collects warnings for combinations that are legal but risky.
"""

from typing import Any

from pydantic import ValidationError

from .schema import ConfigSchema


class ConfigValidationError(Exception):
    """Configuration validation error with detailed context."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConfigValidator:
    """Configuration validator with cross-field and exposure checks."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.recommendations: list[str] = []

    def validate_config(self, config: ConfigSchema) -> None:
        """Perform validation of configuration.

        Args:
            config: Configuration to validate

        Raises:
            ConfigValidationError: If validation fails
        """
        self.warnings.clear()
        self.recommendations.clear()

        try:
            # Re-run field validation on values assigned after construction
            ConfigSchema.model_validate(config.model_dump())

            self._validate_cross_field_constraints(config)
            self._validate_exposure_constraints(config)

        except ValidationError as e:
            error_dicts = [
                {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                for error in e.errors()
            ]
            raise ConfigValidationError("Configuration validation failed", error_dicts) from e

    def _validate_cross_field_constraints(self, config: ConfigSchema) -> None:
        """Validate constraints that span multiple configuration fields."""
        diagnostics = config.diagnostics
        if diagnostics.include_payloads and not diagnostics.log_failures:
            raise ConfigValidationError(
                "include_payloads requires log_failures to be enabled",
            )

        if config.debug_mode and diagnostics.log_failures and diagnostics.failure_log_level == "DEBUG":
            self.recommendations.append(
                "Debug mode is enabled but failures are logged at DEBUG. "
                "Consider INFO so they show up with a default log configuration.",
            )

    def _validate_exposure_constraints(self, config: ConfigSchema) -> None:
        """Warn about settings that can leak parameter values."""
        if config.environment == "production" and config.diagnostics.include_payloads:
            self.warnings.append(
                "Payload logging is enabled in production environment. "
                "Parameter values such as tokens will be written to logs.",
            )

        if config.environment == "production" and config.debug_mode:
            self.warnings.append(
                "Debug mode is enabled in production environment. "
                "This may expose sensitive information.",
            )

        if config.encoding.json_sort_keys:
            self.recommendations.append(
                "Sorted JSON keys change the stringified form of existing values. "
                "Make sure consumers compare parsed values rather than raw text.",
            )

    def get_validation_summary(self) -> dict[str, Any]:
        """Get summary of validation results including warnings and recommendations."""
        return {
            "status": "valid",
            "warnings": self.warnings,
            "recommendations": self.recommendations,
            "warning_count": len(self.warnings),
            "recommendation_count": len(self.recommendations),
        }
