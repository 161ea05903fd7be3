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

"""Typed parameters engine.

:class:`TypedParameters` holds a fixed, ordered mapping of parameter names to
constructs and converts between the stringified form (text, as found in
environment variables or query strings) and the parsed form (native values).

Both directions share one failure policy: every missing required parameter and
every rejected value across the whole call is collected, then reported at once
in a single :class:`~typed_parameters.exceptions.ParameterError`. Passing
``should_validate=False`` turns that reporting off; decode and encode errors
still propagate because no value can be produced without them.

Example:
    >>> parameters = TypedParameters(lambda pt: {
    ...     "name": pt.string(required=True),
    ...     "age": pt.number(required=True, default_value=0),
    ... })
    >>> parameters.parse({"name": "a"})
    {'name': 'a', 'age': 0}
    >>> parameters.stringify({"name": "a", "age": 5})
    {'name': 'a', 'age': '5'}
"""

from collections.abc import Callable, Iterator, Mapping
import copy
import logging
from types import MappingProxyType
from typing import Any

from .config import config
from .constructs import PARAMETER_TYPES, ParameterConstruct, ParameterTypes
from .exceptions import (
    ParameterDecodeError,
    ParameterDefinitionError,
    ParameterEncodeError,
    ParameterError,
    TypedParametersError,
)
from .validation import normalize_validation_errors

logger = logging.getLogger(__name__)

ParameterDefinitions = Mapping[str, ParameterConstruct[Any]]
DefineParameters = Callable[[ParameterTypes], ParameterDefinitions]
ParsedParameters = dict[str, Any]
StringifiedParameters = dict[str, str]


class TypedParameters:
    """Parse and stringify a fixed set of typed parameters.

    Args:
        define_parameters: Builder receiving the construct factory table and
            returning a mapping of parameter name to construct. Called once.

    Raises:
        ParameterDefinitionError: If the builder result is not a mapping of
            non-empty string names to constructs
    """

    def __init__(self, define_parameters: DefineParameters) -> None:
        definitions = define_parameters(PARAMETER_TYPES)
        self._constructs: Mapping[str, ParameterConstruct[Any]] = MappingProxyType(
            self._check_definitions(definitions),
        )
        logger.debug("Defined %d typed parameters", len(self._constructs))

    @staticmethod
    def _check_definitions(definitions: Any) -> dict[str, ParameterConstruct[Any]]:
        if not isinstance(definitions, Mapping):
            raise ParameterDefinitionError(
                f"Parameter builder must return a mapping, got {type(definitions).__name__}",
            )

        checked: dict[str, ParameterConstruct[Any]] = {}
        for name, construct in definitions.items():
            if not isinstance(name, str) or not name:
                raise ParameterDefinitionError(
                    f"Parameter names must be non-empty strings, got {name!r}",
                )
            if not isinstance(construct, ParameterConstruct):
                raise ParameterDefinitionError(
                    f"Parameter {name!r} must be a ParameterConstruct, "
                    f"got {type(construct).__name__}",
                    parameter_name=name,
                )
            checked[name] = construct
        return checked

    @property
    def constructs(self) -> Mapping[str, ParameterConstruct[Any]]:
        """Read-only view of the declared constructs, in declaration order."""
        return self._constructs

    @property
    def names(self) -> tuple[str, ...]:
        """Declared parameter names, in declaration order."""
        return tuple(self._constructs)

    def __contains__(self, name: object) -> bool:
        return name in self._constructs

    def __iter__(self) -> Iterator[str]:
        return iter(self._constructs)

    def __len__(self) -> int:
        return len(self._constructs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self._constructs)})"

    def parse(
        self,
        stringified_parameters: Mapping[str, str | None],
        should_validate: bool = True,
    ) -> ParsedParameters:
        """Convert stringified parameters to their parsed form.

        Each parameter resolves independently: the parsed input text if present,
        otherwise the default value, otherwise nothing.

        Args:
            stringified_parameters: Name to text; names may be missing or None
            should_validate: Report missing required parameters and run validators

        Returns:
            Name to parsed value for every parameter that resolved

        Raises:
            ParameterError: If validating and any parameter is missing or invalid
            ParameterDecodeError: If a construct cannot decode its input text
        """
        required_errors: list[str] = []
        validation_errors: dict[str, list[str]] = {}
        result: ParsedParameters = {}

        for name, construct in self._constructs.items():
            serialized = stringified_parameters.get(name)
            value = None
            if isinstance(serialized, str):
                value = self._call_construct(construct.parse, serialized, name, "parse")

            if value is None and construct.default_value is not None:
                value = copy.deepcopy(construct.default_value)

            if value is None:
                if should_validate and construct.required:
                    required_errors.append(name)
                continue

            result[name] = value

            if should_validate and construct.validate is not None:
                errors = normalize_validation_errors(construct.validate(value))
                if errors:
                    validation_errors[name] = errors

        if required_errors or validation_errors:
            self._raise_parameter_error(
                "parse",
                ParameterError(
                    required_errors,
                    validation_errors,
                    serialized=dict(stringified_parameters),
                    parsed=result,
                ),
            )

        return result

    def stringify(
        self,
        parsed_parameters: Mapping[str, Any],
        should_validate: bool = True,
    ) -> StringifiedParameters:
        """Convert parsed parameters to their stringified form.

        Validation runs against the typed input value before serialization.
        Default values are stringified as-is and are not validated.
        Without validation this never raises: a value that cannot be encoded
        falls back to the default, or the parameter is left out.

        Args:
            parsed_parameters: Name to parsed value; names may be missing or None
            should_validate: Report missing required parameters and run validators

        Returns:
            Name to text for every parameter that resolved

        Raises:
            ParameterError: If validating and any parameter is missing or invalid
            ParameterEncodeError: If validating and a construct cannot encode its value
        """
        required_errors: list[str] = []
        validation_errors: dict[str, list[str]] = {}
        result: StringifiedParameters = {}

        for name, construct in self._constructs.items():
            value = parsed_parameters.get(name)

            if should_validate and value is not None and construct.validate is not None:
                errors = normalize_validation_errors(construct.validate(value))
                if errors:
                    validation_errors[name] = errors

            serialized = None
            if value is not None:
                serialized = self._stringify_value(construct, value, name, should_validate)

            if serialized is None and construct.default_value is not None:
                serialized = self._stringify_value(
                    construct,
                    construct.default_value,
                    name,
                    should_validate,
                )

            if serialized is None:
                if should_validate and construct.required:
                    required_errors.append(name)
                continue

            result[name] = serialized

        if required_errors or validation_errors:
            self._raise_parameter_error(
                "stringify",
                ParameterError(
                    required_errors,
                    validation_errors,
                    serialized=result,
                    parsed=dict(parsed_parameters),
                ),
            )

        return result

    def _call_construct(
        self,
        converter: Callable[[Any], Any],
        argument: Any,
        name: str,
        operation: str,
    ) -> Any:
        """Run a construct's parse or stringify, tagging codec errors with the name."""
        try:
            return converter(argument)
        except (ParameterDecodeError, ParameterEncodeError) as e:
            e.for_parameter(name)
            self._log_failure(operation, e)
            raise

    def _stringify_value(
        self,
        construct: ParameterConstruct[Any],
        value: Any,
        name: str,
        should_validate: bool,
    ) -> str | None:
        try:
            return self._call_construct(construct.stringify, value, name, "stringify")
        except ParameterEncodeError:
            if should_validate:
                raise
            return None

    def _raise_parameter_error(self, operation: str, error: ParameterError) -> None:
        self._log_failure(operation, error)
        raise error

    def _log_failure(self, operation: str, error: TypedParametersError) -> None:
        diagnostics = config.diagnostics
        if not diagnostics.log_failures:
            return

        extra: dict[str, Any] = {
            "error_code": error.error_code,
            "error_category": error.error_category,
            "context": error.context,
            "operation": operation,
        }
        if diagnostics.include_payloads and isinstance(error, ParameterError):
            extra["serialized"] = error.serialized
            extra["parsed"] = error.parsed

        logger.log(
            logging.getLevelName(diagnostics.failure_log_level),
            "%s failed: %s",
            operation,
            error,
            extra=extra,
        )
