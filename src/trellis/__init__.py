"""Trellis: minimal server-side view renderer with layouts and blocks.

Views are plain Python files executed with their variables as globals and
a runtime object bound to ``this``. A view writes output with ``echo()``,
sets named blocks, and may ask to be wrapped in a layout view, which
receives the view's output as the ``"content"`` block.

Quickstart:
    >>> from trellis import Renderer
    >>> renderer = Renderer("views/")
    >>> renderer.render("pages/home", title="Home")
    '<html>...<h1>Home</h1>...</html>'

A view and its layout:
    ```python
    # views/pages/home.py
    this.layout("layouts/main")
    this.block("title", title)
    echo("<h1>", this.esc(title), "</h1>")

    # views/layouts/main.py
    echo("<html><head><title>", this.render_block("title"), "</title></head>")
    echo("<body>", this.render_block("content"), "</body></html>")
    ```

Architecture:
Renderer.render() → ViewLoader.resolve() → CompiledView.execute() in an
OutputBuffer frame → (layout requested? repeat with the layout) → str

Pipeline pieces:
1. **ViewLoader**: view name → file path, default extension appended
2. **CompiledView**: cached code object, executed in a fresh namespace
3. **ViewRuntime** (``this``): blocks, layouts, sub-views, escaping,
   extension functions
4. **RenderContext**: per-render blocks, pending layout and capture frames,
   published via ContextVar

Thread-Safety:
Each ``render()`` call gets its own RenderContext; the Renderer's globals
and extension registry are copy-on-write. One Renderer can serve
concurrent renders.

"""

from trellis.environment import (
    AssetNotFoundError,
    DuplicateGlobalError,
    ErrorCode,
    ExtensionRegistry,
    LayoutDepthError,
    NestedBlockError,
    RenderDepthError,
    Renderer,
    ReservedBlockNameError,
    UnclosedBlockError,
    UndefinedFunctionError,
    UnmatchedEndBlockError,
    ViewDirectoryNotFoundError,
    ViewError,
    ViewLoader,
    ViewNotFoundError,
    ViewRuntimeError,
)
from trellis.extensions import AssetExtension, Extension
from trellis.render_context import (
    RenderContext,
    get_render_context,
    get_render_context_required,
    render_context,
)
from trellis.utils.html import html_escape
from trellis.view import CONTENT_BLOCK, BlockStore, CompiledView, OutputBuffer, ViewRuntime

__version__ = "0.1.0"

__all__ = [
    "CONTENT_BLOCK",
    "AssetExtension",
    "AssetNotFoundError",
    "BlockStore",
    "CompiledView",
    "DuplicateGlobalError",
    "ErrorCode",
    "Extension",
    "ExtensionRegistry",
    "LayoutDepthError",
    "NestedBlockError",
    "OutputBuffer",
    "RenderContext",
    "RenderDepthError",
    "Renderer",
    "ReservedBlockNameError",
    "UnclosedBlockError",
    "UndefinedFunctionError",
    "UnmatchedEndBlockError",
    "ViewDirectoryNotFoundError",
    "ViewError",
    "ViewLoader",
    "ViewNotFoundError",
    "ViewRuntime",
    "ViewRuntimeError",
    "__version__",
    "get_render_context",
    "get_render_context_required",
    "html_escape",
    "render_context",
]
