"""Pytest configuration and fixtures for trellis tests."""

import re
import textwrap
from pathlib import Path

import pytest

from trellis import Renderer

# The view tree shared by most tests: a plain view, a view wrapped in a
# two-level layout chain, and the partials the outer layout renders.
VIEWS = {
    "views/single.py": """
        echo("<p>Content</p>")
        echo(globals().get("banner", ""))
    """,
    "views/nested.py": """
        this.layout("layouts/_sub")
        this.block("title", "Page Title")

        this.begin_block("menu")
        echo("<nav>Menu</nav>")
        this.end_block()

        echo("<p>Content</p>")
    """,
    "views/late_block.py": """
        this.layout("layouts/main")
        echo("<p>Body</p>")
        this.block("title", "Declared Late")
    """,
    "layouts/_sub.py": """
        this.layout("layouts/main")
        echo("<main>Sub", this.render_block("content"), "</main>")
    """,
    "layouts/main.py": """
        echo("<html><head><title>", this.render_block("title"), "</title></head><body>")
        echo(this.render("layouts/_header"))
        echo(this.render_block("menu"))
        echo(this.render_block("content"))
        echo(this.render("layouts/_footer"))
        echo("</body></html>")
    """,
    "layouts/_header.py": """
        echo("<header>Header</header>")
    """,
    "layouts/_footer.py": """
        echo("<footer>Footer</footer>")
    """,
}

NESTED_OUTPUT = (
    "<html><head><title>PageTitle</title></head><body><header>Header</header>"
    "<nav>Menu</nav><main>Sub<p>Content</p></main><footer>Footer</footer></body></html>"
)


def write_views(root: Path, views: dict[str, str]) -> Path:
    """Write dedented view sources under *root* and return it."""
    for name, source in views.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip())
    return root


def squash(output: str) -> str:
    """Remove all whitespace so assertions ignore formatting."""
    return re.sub(r"\s", "", output)


@pytest.fixture
def view_dir(tmp_path):
    """Directory holding the shared view tree."""
    return write_views(tmp_path / "views_root", VIEWS)


@pytest.fixture
def renderer(view_dir):
    """Renderer over the shared view tree."""
    return Renderer(view_dir)


@pytest.fixture
def make_renderer(tmp_path):
    """Build a Renderer over a fresh tree of the given views."""
    counter = 0

    def factory(views: dict[str, str], **options) -> Renderer:
        nonlocal counter
        counter += 1
        root = write_views(tmp_path / f"tree{counter}", views)
        return Renderer(root, **options)

    return factory


def assert_contains(output: str, *expected_parts: str) -> None:
    """Assert rendered output contains all expected parts.

    Args:
        output: The rendered output.
        expected_parts: Strings that should all be present in the output.
    """
    for part in expected_parts:
        assert part in output, (
            f"Rendered output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {output!r}"
        )
