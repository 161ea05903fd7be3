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

"""Parameter constructs and the built-in construct factories.

A construct describes how one parameter moves between its parsed form (a
native Python value) and its stringified form (plain text suitable for an
environment variable or a query string):

    - stringify: value -> text
    - parse: text -> value
    - required: whether a missing value is an error
    - default_value: value used when no input is given
    - validate: optional check returning zero or more messages

Builders receive the factory table :data:`PARAMETER_TYPES`:

    >>> parameters = TypedParameters(lambda pt: {
    ...     "TOKEN": pt.string(required=True),
    ...     "RETRIES": pt.number(required=False, default_value=3),
    ... })
"""

from collections.abc import Callable
from dataclasses import dataclass
import json
import math
from typing import Any, Generic, TypeVar

from .config import config
from .exceptions import ParameterDecodeError, ParameterDefinitionError, ParameterEncodeError
from .validation import ParameterValidate

T = TypeVar("T")
S = TypeVar("S", bound=str)
N = TypeVar("N", int, float)

J = TypeVar("J", dict[str, Any], list[Any])

BOOLEAN_TRUE = "true"
BOOLEAN_FALSE = "false"
JSON_SEPARATORS = (",", ":")
RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


@dataclass(frozen=True)
class ParameterConstruct(Generic[T]):
    """Immutable descriptor of a single parameter.

    Attributes:
        stringify: Converts a parsed value to its text form
        parse: Converts any text to a parsed value
        required: Whether a missing value is reported as an error
        default_value: Value used when the input has none (None means no default)
        validate: Optional check returning None, a message or a list of messages

    Note:
        A construct with a default value is never reported as missing,
        regardless of ``required``.
    """

    stringify: Callable[[T], str]
    parse: Callable[[str], T]
    required: bool
    default_value: T | None = None
    validate: ParameterValidate[T] | None = None

    def __post_init__(self) -> None:
        if not callable(self.stringify) or not callable(self.parse):
            raise ParameterDefinitionError("stringify and parse must be callable")
        if not isinstance(self.required, bool):
            raise ParameterDefinitionError(
                f"required must be a bool, got {type(self.required).__name__}",
            )
        if self.validate is not None and not callable(self.validate):
            raise ParameterDefinitionError("validate must be callable or None")


def create_parameter_construct(
    *,
    stringify: Callable[[T], str],
    parse: Callable[[str], T],
    required: bool,
    default_value: T | None = None,
    validate: ParameterValidate[T] | None = None,
) -> ParameterConstruct[T]:
    """Build a construct from a caller-supplied stringify/parse pair."""
    return ParameterConstruct(
        stringify=stringify,
        parse=parse,
        required=required,
        default_value=default_value,
        validate=validate,
    )


def _identity(value: str) -> str:
    return value


def create_string_parameter_construct(
    *,
    required: bool,
    default_value: str | None = None,
    validate: ParameterValidate[str] | None = None,
) -> ParameterConstruct[str]:
    """String parameter; both directions are the identity."""
    return create_parameter_construct(
        stringify=_identity,
        parse=_identity,
        required=required,
        default_value=default_value,
        validate=validate,
    )


def create_union_string_parameter_construct(
    *,
    required: bool,
    default_value: S | None = None,
    validate: ParameterValidate[S] | None = None,
) -> ParameterConstruct[S]:
    """String parameter restricted to a literal set for type checkers only.

    Runtime behavior is identical to :func:`create_string_parameter_construct`;
    pair it with :func:`typed_parameters.validation.one_of` to enforce the set.
    """
    return create_string_parameter_construct(  # type: ignore[return-value]
        required=required,
        default_value=default_value,
        validate=validate,  # type: ignore[arg-type]
    )


def stringify_number(value: int | float) -> str:
    """Render a number as decimal text.

    Integral floats drop their fractional part so ``5.0`` and ``5`` share the
    text ``"5"``. Non-finite values render as ``NaN``, ``Infinity`` and
    ``-Infinity``.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)


def parse_number(serialized: str) -> int | float:
    """Coerce text to a number.

    Blank text is ``0``, integral text is an ``int``, other numeric text is a
    ``float`` and anything else is ``nan``. Never raises.

    Unsigned ``0x``, ``0o`` and ``0b`` literals are read in their radix. The
    only accepted spellings of infinity are ``Infinity``, ``+Infinity`` and
    ``-Infinity``; ``inf`` and ``nan`` are not numbers.
    """
    text = serialized.strip()
    if not text:
        return 0
    radix = RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        digits = text[2:]
        if not (digits.isascii() and digits.isalnum()):
            return math.nan
        try:
            return int(digits, radix)
        except ValueError:
            return math.nan
    body = text.lstrip("+-")
    if body[:1].isalpha() and body != "Infinity":
        return math.nan
    # int() and float() accept digit group underscores
    if "_" in text:
        return math.nan
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def create_number_parameter_construct(
    *,
    required: bool,
    default_value: int | float | None = None,
    validate: ParameterValidate[int | float] | None = None,
) -> ParameterConstruct[int | float]:
    """Numeric parameter; unparseable text becomes ``nan`` rather than an error."""
    return create_parameter_construct(
        stringify=stringify_number,
        parse=parse_number,
        required=required,
        default_value=default_value,
        validate=validate,
    )


def create_union_number_parameter_construct(
    *,
    required: bool,
    default_value: N | None = None,
    validate: ParameterValidate[N] | None = None,
) -> ParameterConstruct[N]:
    """Numeric parameter restricted to a literal set for type checkers only."""
    return create_number_parameter_construct(  # type: ignore[return-value]
        required=required,
        default_value=default_value,
        validate=validate,  # type: ignore[arg-type]
    )


def stringify_boolean(value: bool) -> str:
    return BOOLEAN_TRUE if value else BOOLEAN_FALSE


def parse_boolean(serialized: str) -> bool:
    # Anything other than the exact literal "true" is False, never an error
    return serialized == BOOLEAN_TRUE


def create_boolean_parameter_construct(
    *,
    required: bool,
    default_value: bool | None = None,
    validate: ParameterValidate[bool] | None = None,
) -> ParameterConstruct[bool]:
    """Boolean parameter serialized as the literals ``true`` and ``false``."""
    return create_parameter_construct(
        stringify=stringify_boolean,
        parse=parse_boolean,
        required=required,
        default_value=default_value,
        validate=validate,
    )


def stringify_json(value: Any) -> str:
    """Encode a value as compact JSON.

    Raises:
        ParameterEncodeError: If the value is not JSON serializable
    """
    encoding = config.encoding
    try:
        return json.dumps(
            value,
            separators=JSON_SEPARATORS,
            ensure_ascii=encoding.json_ensure_ascii,
            sort_keys=encoding.json_sort_keys,
        )
    except (TypeError, ValueError) as e:
        raise ParameterEncodeError(value, e) from e


def parse_json(serialized: str) -> Any:
    """Decode JSON text.

    Raises:
        ParameterDecodeError: If the text is not valid JSON
    """
    try:
        return json.loads(serialized)
    except json.JSONDecodeError as e:
        raise ParameterDecodeError(serialized, e) from e


def create_json_parameter_construct(
    *,
    required: bool,
    default_value: J | None = None,
    validate: ParameterValidate[J] | None = None,
) -> ParameterConstruct[J]:
    """Structured parameter carried as compact JSON text."""
    return create_parameter_construct(
        stringify=stringify_json,
        parse=parse_json,
        required=required,
        default_value=default_value,
        validate=validate,
    )


@dataclass(frozen=True)
class ParameterTypes:
    """Table of construct factories handed to parameter builders."""

    string: Callable[..., ParameterConstruct[str]]
    union_string: Callable[..., ParameterConstruct[Any]]
    number: Callable[..., ParameterConstruct[int | float]]
    union_number: Callable[..., ParameterConstruct[Any]]
    boolean: Callable[..., ParameterConstruct[bool]]
    json: Callable[..., ParameterConstruct[Any]]
    custom: Callable[..., ParameterConstruct[Any]]


PARAMETER_TYPES = ParameterTypes(
    string=create_string_parameter_construct,
    union_string=create_union_string_parameter_construct,
    number=create_number_parameter_construct,
    union_number=create_union_number_parameter_construct,
    boolean=create_boolean_parameter_construct,
    json=create_json_parameter_construct,
    custom=create_parameter_construct,
)
