"""Fixtures for the runnable trellis examples.

Every example directory holds an ``app.py`` that builds a Renderer over its
own ``views/`` tree and renders at import time. ``example_app`` imports that
file afresh for each test, so renderer caches and globals never carry over
between tests.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Import the ``app.py`` sitting next to the requesting test module."""
    app_file = Path(request.path).with_name("app.py")
    loader_spec = importlib.util.spec_from_file_location(f"trellis_example_{app_file.parent.name}", app_file)
    assert loader_spec is not None and loader_spec.loader is not None
    app = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(app)
    return app
