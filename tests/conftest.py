"""
Shared pytest configuration and fixtures for typed-parameters tests.

This file contains:
- Common parameter set fixtures used across test modules
- Marker registration
- Environment variable isolation for library configuration
"""

import os
from pathlib import Path
import sys

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typed_parameters import TypedParameters  # noqa: E402
from typed_parameters.config import config as library_config  # noqa: E402
from typed_parameters.config.defaults import ENV_VAR_PREFIX  # noqa: E402


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests crossing a text transport")
    config.addinivalue_line("markers", "concurrent: Tests that use concurrency/parallelism")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location and name."""
    for item in items:
        if "sources" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)

        if any(keyword in item.name.lower() for keyword in ["concurrent", "parallel", "thread"]):
            item.add_marker(pytest.mark.concurrent)


@pytest.fixture(autouse=True)
def default_library_config(monkeypatch):
    """Run every test against the default library configuration."""
    for name in list(os.environ):
        if name.startswith(ENV_VAR_PREFIX):
            monkeypatch.delenv(name)
    library_config.reload_configuration()
    yield
    library_config.reload_configuration()


@pytest.fixture()
def all_required_parameters():
    """Every kind, required, no defaults."""
    return TypedParameters(
        lambda pt: {
            "string_value": pt.string(required=True),
            "union_string_value": pt.union_string(required=True),
            "number_value": pt.number(required=True),
            "union_number_value": pt.union_number(required=True),
            "boolean_value": pt.boolean(required=True),
            "json_value": pt.json(required=True),
            "array_value": pt.json(required=True),
        },
    )


@pytest.fixture()
def all_optional_parameters():
    """Every kind, optional, no defaults."""
    return TypedParameters(
        lambda pt: {
            "string_value": pt.string(required=False),
            "union_string_value": pt.union_string(required=False),
            "number_value": pt.number(required=False),
            "union_number_value": pt.union_number(required=False),
            "boolean_value": pt.boolean(required=False),
            "json_value": pt.json(required=False),
            "array_value": pt.json(required=False),
        },
    )


def _parameters_with_defaults(required):
    return TypedParameters(
        lambda pt: {
            "string_value": pt.string(required=required, default_value="xxxx"),
            "union_string_value": pt.union_string(required=required, default_value="v1"),
            "number_value": pt.number(required=required, default_value=1),
            "union_number_value": pt.union_number(required=required, default_value=0),
            "boolean_value": pt.boolean(required=required, default_value=True),
            "json_value": pt.json(required=required, default_value={"apiKey": "xxxx"}),
            "array_value": pt.json(required=required, default_value=["main", "sub"]),
        },
    )


@pytest.fixture(params=[True, False], ids=["required", "optional"])
def parameters_with_defaults(request):
    """Every kind with a default, once required and once optional."""
    return _parameters_with_defaults(request.param)


@pytest.fixture()
def sample_stringified():
    """Stringified input covering every kind."""
    return {
        "string_value": "xxxx",
        "union_string_value": "v1",
        "number_value": "1",
        "union_number_value": "0",
        "boolean_value": "true",
        "json_value": '{"apiKey":"xxxx"}',
        "array_value": '["main", "sub"]',
    }


@pytest.fixture()
def sample_parsed():
    """Parsed values matching ``sample_stringified``."""
    return {
        "string_value": "xxxx",
        "union_string_value": "v1",
        "number_value": 1,
        "union_number_value": 0,
        "boolean_value": True,
        "json_value": {"apiKey": "xxxx"},
        "array_value": ["main", "sub"],
    }
