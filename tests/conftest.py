"""
Pytest configuration for gai_anthropic tests.

Registers markers, the --run-e2e option for live API tests, an in-memory
OpenTelemetry exporter for span assertions, and the file tools used by the
tool-calling scenarios.
"""

from __future__ import annotations

import functools
import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from gai_anthropic import Tool, ToolParameter

from tests.fakes import TESTDATA

_EXPORTER = InMemorySpanExporter()
_PROVIDER = TracerProvider()
_PROVIDER.add_span_processor(SimpleSpanProcessor(_EXPORTER))
trace.set_tracer_provider(_PROVIDER)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run end-to-end tests with real API calls",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "e2e: mark test as end-to-end (requires real API keys, use --run-e2e to run)"
    )
    config.addinivalue_line("markers", "anthropic: mark test as requiring Anthropic API key")


def pytest_collection_modifyitems(config, items):
    """Skip e2e tests unless --run-e2e is passed."""
    if config.getoption("--run-e2e"):
        return

    skip_e2e = pytest.mark.skip(reason="Need --run-e2e option to run end-to-end tests")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """In-memory exporter receiving every finished span, cleared per test."""
    _EXPORTER.clear()
    yield _EXPORTER
    _EXPORTER.clear()


def read_file(root: Path, args: Dict[str, Any]) -> str:
    """Read a file below root, as a caller-side tool implementation would."""
    path = (root / args["path"]).resolve()
    if root.resolve() not in path.parents:
        raise ValueError(f"path escapes root: {args['path']}")
    return path.read_text()


def list_dir(root: Path, args: Dict[str, Any]) -> str:
    """List text files below root as a JSON array."""
    return json.dumps(sorted(p.name for p in root.iterdir() if p.suffix == ".txt"))


@pytest.fixture
def tool_functions() -> Dict[str, Callable[[Dict[str, Any]], str]]:
    """Caller-side implementations of the test tools, rooted at tests/testdata."""
    return {
        "read_file": functools.partial(read_file, TESTDATA),
        "list_dir": functools.partial(list_dir, TESTDATA),
    }


@pytest.fixture
def read_file_tool() -> Tool:
    return Tool(
        name="read_file",
        description="Read a file at the given path.",
        parameters=[
            ToolParameter(name="path", param_type=str, description="File path relative to the root"),
        ],
    )


@pytest.fixture
def list_dir_tool() -> Tool:
    return Tool(
        name="list_dir",
        description="List files in the current directory.",
    )
