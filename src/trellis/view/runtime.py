"""The object bound to ``this`` inside views.

Every operation a view can perform goes through its ViewRuntime: writing
output, setting and reading blocks, requesting a layout, rendering
sub-views, escaping, and calling extension functions. Unknown public
attributes are looked up in the renderer's extension registry, so an
extension function reads like a method:

    ```python
    this.layout("layouts/main")
    this.block("title", "Pricing")

    this.begin_block("scripts")
    echo('<script src="', this.asset("js/pricing.js"), '"></script>')
    this.end_block()

    echo("<h1>", this.esc(product.name), "</h1>")
    ```

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from trellis.utils.html import html_escape

if TYPE_CHECKING:
    from trellis.environment.core import Renderer
    from trellis.render_context import RenderContext


class ViewRuntime:
    """View-facing API for one render chain.

    Attributes:
        renderer: Renderer that started the render
        context: Per-render state shared by the chain's views
    """

    __slots__ = ("context", "renderer")

    def __init__(self, renderer: Renderer, context: RenderContext):
        self.renderer = renderer
        self.context = context

    def echo(self, *parts: Any) -> None:
        """Write *parts* to the current capture frame."""
        self.context.output.write(*parts)

    def block(self, name: str, content: str) -> None:
        """Set block *name* unless already set.

        Raises:
            ReservedBlockNameError: If *name* is "content"
        """
        self.context.blocks.set(name, content)

    def begin_block(self, name: str) -> None:
        """Capture following output into block *name* until ``end_block()``.

        Raises:
            NestedBlockError: If a block is already being captured
        """
        self.context.blocks.begin(name)

    def end_block(self) -> None:
        """Finish the capture started by ``begin_block()``.

        Raises:
            UnmatchedEndBlockError: If no block is being captured
        """
        self.context.blocks.end()

    def render_block(self, name: str, default: str = "") -> str:
        """Content of block *name*, or *default* if it was never set."""
        return self.context.blocks.get(name, default)

    def layout(self, name: str) -> None:
        """Wrap this view's output in layout *name* once the view finishes."""
        self.context.layout = name

    def render(self, view: str, params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> str:
        """Render sub-view *view* and return its output.

        The sub-view sees globals plus *params*, not the caller's variables.
        It shares this render's blocks; a layout it requests applies to the
        sub-view only.
        """
        variables = dict(params) if params else {}
        variables.update(kwargs)
        return self.renderer.render_nested(self.context, view, variables)

    def esc(self, value: Any) -> str:
        """HTML-escape *value*."""
        return html_escape(value)

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call extension function *name*.

        Raises:
            UndefinedFunctionError: If no extension exposes *name*
        """
        return self.renderer.extensions.call(name, *args, **kwargs)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Unset slots also land here (e.g. during copy); never treat them as functions.
        if name.startswith("_") or name in ViewRuntime.__slots__:
            raise AttributeError(name)
        return self.renderer.extensions.resolve(name)

    def __repr__(self) -> str:
        return f"<ViewRuntime view={self.context.view_name!r}>"
