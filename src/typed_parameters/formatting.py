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

"""Human-readable messages for aggregated parameter failures."""

from collections.abc import Iterable, Mapping, Sequence

MESSAGE_SEPARATOR = ", "


def format_required_errors(parameter_names: Iterable[str]) -> str:
    """Render required failures as ``"a is required, b is required"``."""
    return MESSAGE_SEPARATOR.join(f"{name} is required" for name in parameter_names)


def format_validation_errors(validation_errors: Mapping[str, Sequence[str]]) -> str:
    """Render validation failures as ``"a: message, b: message"``.

    A parameter with several messages contributes one entry per message.
    """
    return MESSAGE_SEPARATOR.join(
        f"{name}: {error}" for name, errors in validation_errors.items() for error in errors
    )


def format_parameter_error_message(
    required_error_parameter_names: Sequence[str],
    validation_error_parameter_map: Mapping[str, Sequence[str]],
) -> str:
    """Combine both failure classes into one sentence-per-class message.

    Args:
        required_error_parameter_names: Names missing a required value
        validation_error_parameter_map: Name to validation messages

    Returns:
        ``"<required>. <validation>."`` when both are present, otherwise the
        non-empty part terminated with a period. Empty when nothing failed.
    """
    required_message = format_required_errors(required_error_parameter_names)
    validation_message = format_validation_errors(validation_error_parameter_map)

    if required_message and validation_message:
        return f"{required_message}. {validation_message}."
    if required_message or validation_message:
        return f"{required_message or validation_message}."
    return ""
