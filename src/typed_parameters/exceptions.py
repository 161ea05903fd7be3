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

"""Custom exceptions for typed parameters."""

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from .formatting import format_parameter_error_message


class TypedParametersError(Exception):
    """Base exception for all typed parameters errors."""

    ERROR_CATEGORY = "GENERAL"
    ERROR_CODE = "TPR_0000"

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        recovery_suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.user_message = user_message or "An error occurred"
        self.error_code = error_code or self.ERROR_CODE
        self.error_category = self.ERROR_CATEGORY
        self.context = context or {}
        self.recovery_suggestion = recovery_suggestion
        self.timestamp = datetime.now(timezone.utc)


class ParameterError(TypedParametersError):
    """Required and validation failures aggregated over one parse/stringify call.

    Attributes:
        required_error_parameter_names: Names missing a required value, in
            declaration order
        validation_error_parameter_map: Name to validation messages, in
            declaration order
        serialized: Stringified payload of the failing call
        parsed: Parsed payload of the failing call
    """

    ERROR_CATEGORY = "CLIENT_ERROR"
    ERROR_CODE = "TPR_1000"

    def __init__(
        self,
        required_error_parameter_names: Sequence[str],
        validation_error_parameter_map: Mapping[str, Sequence[str]],
        serialized: Any = None,
        parsed: Any = None,
    ) -> None:
        self.required_error_parameter_names = list(required_error_parameter_names)
        self.validation_error_parameter_map = {
            name: list(errors) for name, errors in validation_error_parameter_map.items()
        }
        self.serialized = serialized
        self.parsed = parsed

        message = format_parameter_error_message(
            self.required_error_parameter_names,
            self.validation_error_parameter_map,
        )
        context = {
            "required": self.required_error_parameter_names,
            "invalid": list(self.validation_error_parameter_map),
        }
        super().__init__(
            message,
            user_message=message,
            error_code=self.ERROR_CODE,
            context=context,
            recovery_suggestion="Provide every required parameter and fix the rejected values",
        )

    @property
    def parameter_names(self) -> list[str]:
        """Every failing parameter name, required failures first."""
        names = list(self.required_error_parameter_names)
        names.extend(
            name for name in self.validation_error_parameter_map if name not in names
        )
        return names


class ParameterDecodeError(TypedParametersError, ValueError):
    """A stringified value could not be decoded by its construct."""

    ERROR_CATEGORY = "CLIENT_ERROR"
    ERROR_CODE = "TPR_1001"

    def __init__(
        self,
        serialized: str,
        original_error: Exception | None = None,
        parameter_name: str | None = None,
    ) -> None:
        self.serialized = serialized
        self.original_error = original_error
        self.parameter_name = parameter_name
        context: dict[str, Any] = {}
        if original_error:
            context["original_error"] = str(original_error)
        super().__init__(
            self._build_message(),
            user_message="Parameter value could not be decoded",
            error_code=self.ERROR_CODE,
            context=context,
            recovery_suggestion="Check that the value is well-formed JSON",
        )

    def _build_message(self) -> str:
        subject = f"{self.parameter_name!r}" if self.parameter_name else "parameter"
        detail = f": {self.original_error}" if self.original_error else ""
        return f"Failed to decode {subject}{detail}"

    def for_parameter(self, parameter_name: str) -> "ParameterDecodeError":
        """Attach the failing parameter name and refresh the message."""
        self.parameter_name = parameter_name
        self.context["parameter"] = parameter_name
        self.args = (self._build_message(),)
        return self


class ParameterEncodeError(TypedParametersError, ValueError):
    """A typed value could not be stringified by its construct."""

    ERROR_CATEGORY = "CLIENT_ERROR"
    ERROR_CODE = "TPR_1002"

    def __init__(
        self,
        value: Any,
        original_error: Exception | None = None,
        parameter_name: str | None = None,
    ) -> None:
        self.value = value
        self.original_error = original_error
        self.parameter_name = parameter_name
        context: dict[str, Any] = {"value_type": type(value).__name__}
        if original_error:
            context["original_error"] = str(original_error)
        super().__init__(
            self._build_message(),
            user_message="Parameter value could not be encoded",
            error_code=self.ERROR_CODE,
            context=context,
            recovery_suggestion="Pass a JSON-serializable dict or list",
        )

    def _build_message(self) -> str:
        subject = f"{self.parameter_name!r}" if self.parameter_name else "parameter"
        detail = f": {self.original_error}" if self.original_error else ""
        return f"Failed to encode {subject} of type {type(self.value).__name__}{detail}"

    def for_parameter(self, parameter_name: str) -> "ParameterEncodeError":
        """Attach the failing parameter name and refresh the message."""
        self.parameter_name = parameter_name
        self.context["parameter"] = parameter_name
        self.args = (self._build_message(),)
        return self


class ParameterDefinitionError(TypedParametersError):
    """The parameter builder returned an unusable definition."""

    ERROR_CATEGORY = "CONFIGURATION_ERROR"
    ERROR_CODE = "TPR_2000"

    def __init__(self, message: str, parameter_name: str | None = None) -> None:
        context = {"parameter": parameter_name} if parameter_name is not None else {}
        super().__init__(
            message,
            user_message="Invalid parameter definition",
            error_code=self.ERROR_CODE,
            context=context,
            recovery_suggestion="Return a mapping of parameter names to constructs from the builder",
        )
        self.parameter_name = parameter_name
