"""
Validation result handling and reusable validators.

A construct's ``validate`` callable may return ``None``, a single message or a
sequence of messages. Everything downstream works on the normalized list form.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar, Union

T = TypeVar("T")

ValidationResult = Union[str, Sequence[str], None]
ParameterValidate = Callable[[T], ValidationResult]


def normalize_validation_errors(result: ValidationResult) -> list[str]:
    """Normalize a validation result to a list of messages.

    Args:
        result: Value returned by a construct's ``validate``

    Returns:
        Empty list for ``None``, ``""`` or an empty sequence; otherwise the
        messages in the order they were produced.

    Raises:
        TypeError: If the result is not ``None``, a string or a sequence of strings
    """
    if result is None:
        return []
    if isinstance(result, str):
        return [result] if result else []
    if isinstance(result, Sequence) and all(isinstance(error, str) for error in result):
        return list(result)
    raise TypeError(
        f"validate must return None, a string or a sequence of strings, got {result!r}",
    )


def one_of(*allowed: Any, message: str | None = None) -> ParameterValidate[Any]:
    """Build a validator that accepts only the given values.

    Example:
        >>> validate = one_of("v1", "v2")
        >>> validate("v3")
        'the value must be one of v1, v2'
    """
    allowed_values = tuple(allowed)
    error = message or "the value must be one of " + ", ".join(str(v) for v in allowed_values)

    def validate(value: Any) -> str | None:
        return None if value in allowed_values else error

    return validate


def combine_validators(*validators: ParameterValidate[T]) -> ParameterValidate[T]:
    """Run every validator and concatenate their messages in order."""

    def validate(value: T) -> list[str]:
        errors: list[str] = []
        for validator in validators:
            errors.extend(normalize_validation_errors(validator(value)))
        return errors

    return validate
