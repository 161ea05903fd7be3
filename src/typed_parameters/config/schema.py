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

"""Configuration schema definitions for typed parameters.

This module defines the library settings using Pydantic models for type
safety and validation. None of these settings change parse/stringify
results except the JSON encoding options.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiagnosticsConfig(BaseModel):
    """Configuration for failure logging."""

    log_failures: bool = Field(
        default=True,
        description="Log every aggregated parameter failure before raising",
    )
    failure_log_level: str = Field(
        default="DEBUG",
        pattern="^(DEBUG|INFO|WARNING|ERROR)$",
        description="Log level used for parameter failures",
    )
    # Payloads may carry secrets such as API tokens
    include_payloads: bool = Field(
        default=False,
        description="Attach raw serialized/parsed payloads to failure log records",
    )

    @field_validator("failure_log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class EncodingConfig(BaseModel):
    """Configuration for JSON parameter encoding."""

    json_ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in JSON parameter text",
    )
    json_sort_keys: bool = Field(
        default=False,
        description="Sort object keys in JSON parameter text",
    )


class SourcesConfig(BaseModel):
    """Configuration for environment and query string helpers."""

    environ_prefix: str = Field(
        default="",
        pattern="^[A-Za-z0-9_]*$",
        max_length=64,
        description="Prefix prepended to parameter names when reading or writing environment variables",
    )


class ConfigSchema(BaseModel):
    """Complete configuration schema for typed parameters."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    diagnostics: DiagnosticsConfig = Field(
        default_factory=DiagnosticsConfig,
        description="Failure logging configuration",
    )

    encoding: EncodingConfig = Field(
        default_factory=EncodingConfig,
        description="JSON encoding configuration",
    )

    sources: SourcesConfig = Field(
        default_factory=SourcesConfig,
        description="Environment and query string helper configuration",
    )

    # Environment-specific settings
    environment: str = Field(
        default="production",
        pattern="^(development|staging|production)$",
        description="Environment mode for configuration profiles",
    )

    debug_mode: bool = Field(default=False, description="Enable debug mode with additional logging")

    config_version: str = Field(default="1.0.0", description="Configuration schema version")
