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

"""Default configuration values for typed parameters.

The defaults make the library work out-of-the-box without any environment
variable configuration.
"""

from typing import Any

from .schema import ConfigSchema

# Default configuration instance
DEFAULT_CONFIG = ConfigSchema()

ENV_VAR_PREFIX = "TPR_"

# Environment variable mapping for easy reference
ENV_VAR_MAPPING = {
    # Diagnostics
    "TPR_LOG_FAILURES": "diagnostics.log_failures",
    "TPR_FAILURE_LOG_LEVEL": "diagnostics.failure_log_level",
    "TPR_INCLUDE_PAYLOADS": "diagnostics.include_payloads",
    # Encoding
    "TPR_JSON_ENSURE_ASCII": "encoding.json_ensure_ascii",
    "TPR_JSON_SORT_KEYS": "encoding.json_sort_keys",
    # Sources
    "TPR_ENVIRON_PREFIX": "sources.environ_prefix",
    # Environment settings
    "TPR_ENVIRONMENT": "environment",
    "TPR_DEBUG_MODE": "debug_mode",
    "TPR_CONFIG_VERSION": "config_version",
}

# Type mapping for environment variable conversion
ENV_VAR_TYPES: dict[str, type] = {
    # Boolean types
    "TPR_LOG_FAILURES": bool,
    "TPR_INCLUDE_PAYLOADS": bool,
    "TPR_JSON_ENSURE_ASCII": bool,
    "TPR_JSON_SORT_KEYS": bool,
    "TPR_DEBUG_MODE": bool,
    # String types (default)
    "TPR_FAILURE_LOG_LEVEL": str,
    "TPR_ENVIRON_PREFIX": str,
    "TPR_ENVIRONMENT": str,
    "TPR_CONFIG_VERSION": str,
}

TRUTHY_ENV_VALUES = ("true", "1", "yes", "on")
FALSY_ENV_VALUES = ("false", "0", "no", "off", "")

# Configuration profiles for different environments
ENVIRONMENT_PROFILES: dict[str, dict[str, Any]] = {
    "development": {
        "debug_mode": True,
        "diagnostics.include_payloads": True,
        "diagnostics.failure_log_level": "INFO",
    },
    "staging": {
        "debug_mode": False,
        "diagnostics.include_payloads": False,
    },
    "production": {
        "debug_mode": False,
        "diagnostics.include_payloads": False,
    },
}


def get_profile_overrides(environment: str) -> dict[str, Any]:
    """Get configuration overrides for a specific environment profile."""
    return ENVIRONMENT_PROFILES.get(environment, {})
