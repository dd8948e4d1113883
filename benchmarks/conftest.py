from __future__ import annotations

import importlib.metadata as importlib_metadata
import json
import os
import platform
import sys
from pathlib import Path

import pytest
from jinja2 import Environment as Jinja2Environment
from jinja2 import FileSystemLoader as Jinja2FileSystemLoader

from trellis import Renderer

BASE_DIR = Path(__file__).resolve().parent
VIEW_DIR = BASE_DIR / "views"
JINJA2_TEMPLATE_DIR = BASE_DIR / "templates"
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"

SITE_NAME = "Bench <Site>"


def _version(dist: str) -> str:
    try:
        return importlib_metadata.version(dist)
    except importlib_metadata.PackageNotFoundError:
        return "unknown"


def collect_environment_metadata() -> dict[str, object]:
    """Capture reproducibility metadata for each benchmark run."""
    return {
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "executable": sys.executable,
        },
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "cpu": {
            "processor": platform.processor(),
            "count": os.cpu_count(),
        },
        "trellis": _version("trellis-views"),
        "jinja2": _version("jinja2"),
    }


@pytest.fixture(scope="session")
def environment_metadata() -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    metadata = collect_environment_metadata()
    BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)
    (BENCHMARK_OUTPUT_DIR / "environment.json").write_text(json.dumps(metadata, indent=2))
    return metadata


@pytest.fixture(scope="session")
def renderer(environment_metadata: dict[str, object]) -> Renderer:
    # Skip per-render mtime checks, as a production deployment would.
    renderer = Renderer(VIEW_DIR, auto_reload=False)
    renderer.add_global("site_name", SITE_NAME)
    return renderer


@pytest.fixture(scope="session")
def jinja2_env() -> Jinja2Environment:
    env = Jinja2Environment(
        loader=Jinja2FileSystemLoader(str(JINJA2_TEMPLATE_DIR)),
        autoescape=True,
        auto_reload=False,
    )
    env.globals["site_name"] = SITE_NAME
    return env


@pytest.fixture(scope="session")
def table_context() -> dict[str, object]:
    return {
        "rows": [
            {"id": i, "name": f"User <{i}>", "email": f"user{i}@example.com"}
            for i in range(1000)
        ]
    }


@pytest.fixture(scope="session")
def article_context() -> dict[str, object]:
    return {
        "title": "Layouts & Blocks",
        "tags": ["python", "views", "html", "layouts"],
        "comments": [
            {"author": f"reader{i}", "body": f"Comment #{i} says <hello> & bye"}
            for i in range(50)
        ],
    }
