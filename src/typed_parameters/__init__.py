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

"""Typed Parameters.

Declare named, typed parameters once and convert them between native Python
values and plain text for environment variables, query strings or any other
text-only transport. Missing and invalid values are reported together in one
structured error per call.
"""

from .constructs import (
    PARAMETER_TYPES,
    ParameterConstruct,
    ParameterTypes,
    create_boolean_parameter_construct,
    create_json_parameter_construct,
    create_number_parameter_construct,
    create_parameter_construct,
    create_string_parameter_construct,
    create_union_number_parameter_construct,
    create_union_string_parameter_construct,
)
from .engine import (
    DefineParameters,
    ParameterDefinitions,
    ParsedParameters,
    StringifiedParameters,
    TypedParameters,
)
from .exceptions import (
    ParameterDecodeError,
    ParameterDefinitionError,
    ParameterEncodeError,
    ParameterError,
    TypedParametersError,
)
from .sources import from_environ, from_query_string, to_environ, to_query_string
from .validation import (
    ParameterValidate,
    ValidationResult,
    combine_validators,
    normalize_validation_errors,
    one_of,
)

__version__ = "0.1.0"

__all__ = [
    "PARAMETER_TYPES",
    "DefineParameters",
    "ParameterConstruct",
    "ParameterDecodeError",
    "ParameterDefinitionError",
    "ParameterDefinitions",
    "ParameterEncodeError",
    "ParameterError",
    "ParameterTypes",
    "ParameterValidate",
    "ParsedParameters",
    "StringifiedParameters",
    "TypedParameters",
    "TypedParametersError",
    "ValidationResult",
    "combine_validators",
    "create_boolean_parameter_construct",
    "create_json_parameter_construct",
    "create_number_parameter_construct",
    "create_parameter_construct",
    "create_string_parameter_construct",
    "create_union_number_parameter_construct",
    "create_union_string_parameter_construct",
    "from_environ",
    "from_query_string",
    "normalize_validation_errors",
    "one_of",
    "to_environ",
    "to_query_string",
]
