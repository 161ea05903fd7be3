"""Helpers for the two common text transports: environment variables and query strings."""

from collections.abc import Mapping, MutableMapping
import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode

from .config import config
from .engine import ParsedParameters, StringifiedParameters, TypedParameters

logger = logging.getLogger(__name__)


def _resolve_prefix(prefix: str | None) -> str:
    return config.sources.environ_prefix if prefix is None else prefix


def from_environ(
    parameters: TypedParameters,
    environ: Mapping[str, str] | None = None,
    *,
    prefix: str | None = None,
    should_validate: bool = True,
) -> ParsedParameters:
    """Parse declared parameters from environment variables.

    Args:
        parameters: Parameter set to read
        environ: Source mapping, ``os.environ`` when omitted
        prefix: Prepended to each parameter name; the configured
            ``sources.environ_prefix`` when omitted
        should_validate: Forwarded to :meth:`TypedParameters.parse`

    Returns:
        Parsed parameters keyed by parameter name (without the prefix)
    """
    environ = os.environ if environ is None else environ
    prefix = _resolve_prefix(prefix)

    stringified = {
        name: environ[prefix + name] for name in parameters.names if prefix + name in environ
    }
    logger.debug("Read %d of %d parameters from environment", len(stringified), len(parameters))
    return parameters.parse(stringified, should_validate)


def to_environ(
    parameters: TypedParameters,
    parsed_parameters: Mapping[str, Any],
    environ: MutableMapping[str, str] | None = None,
    *,
    prefix: str | None = None,
    should_validate: bool = True,
) -> dict[str, str]:
    """Stringify parameters as environment variable assignments.

    Args:
        parameters: Parameter set to write
        parsed_parameters: Values to stringify
        environ: Updated in place when given (for example ``os.environ``)
        prefix: Prepended to each parameter name; the configured
            ``sources.environ_prefix`` when omitted
        should_validate: Forwarded to :meth:`TypedParameters.stringify`

    Returns:
        Environment variable name to text
    """
    prefix = _resolve_prefix(prefix)
    stringified = parameters.stringify(parsed_parameters, should_validate)
    variables = {prefix + name: text for name, text in stringified.items()}
    if environ is not None:
        environ.update(variables)
    return variables


def to_query_string(
    parameters: TypedParameters,
    parsed_parameters: Mapping[str, Any],
    should_validate: bool = True,
) -> str:
    """Stringify parameters and URL-encode them as a query string."""
    stringified: StringifiedParameters = parameters.stringify(parsed_parameters, should_validate)
    return urlencode(stringified)


def from_query_string(
    parameters: TypedParameters,
    query: str,
    should_validate: bool = True,
) -> ParsedParameters:
    """Decode a URL query string and parse the declared parameters.

    A leading ``?`` is ignored. When a name repeats, the last value wins.
    Names that are not declared are ignored.

    Raises:
        UnicodeDecodeError: If a percent-encoded sequence is not valid UTF-8
    """
    stringified = dict(
        parse_qsl(query.removeprefix("?"), keep_blank_values=True, errors="strict"),
    )
    return parameters.parse(stringified, should_validate)
