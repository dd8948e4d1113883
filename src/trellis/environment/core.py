"""Trellis Renderer: the application-wide entry point for rendering views.

A Renderer is built once, configured during application setup, then shared
by every render call:

    ```python
    renderer = Renderer("views/")
    renderer.add_global("site_name", "Docs")
    renderer.add_extension(AssetExtension("public/assets", "/assets"))

    html = renderer.render("pages/home", user=user, posts=posts)
    ```

Render Pipeline:
    ```
    render(view, params)
      └─ new RenderContext (blocks, pending layout, capture frames)
           ├─ resolve + compile view         (cached per file, mtime-checked)
           ├─ push frame, exec view          (view may set blocks, request layout)
           ├─ pop frame -> content
           └─ layout requested?
                yes: blocks["content"] = content; repeat with the layout, no params
                no:  return content
    ```

A layout runs after its child has fully executed, so it can read every
block the child set, including blocks set after the ``layout()`` call.

Failure Handling:
Any exception from a view, a layout or the pipeline unwinds the capture
stack to the depth recorded before the failing view started, then
propagates unchanged. There is no partial output.

Thread-Safety:
- Per-render state lives in a fresh RenderContext per ``render()`` call
- ``globals`` and the extension registry are copy-on-write
- The compiled-view cache is updated with single dict assignments

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from trellis.environment.exceptions import (
    DuplicateGlobalError,
    LayoutDepthError,
    UnclosedBlockError,
)
from trellis.environment.loaders import ViewLoader, normalize_view_name
from trellis.environment.registry import ExtensionRegistry
from trellis.extensions.base import Extension
from trellis.render_context import (
    RenderContext,
    get_render_context,
    reset_render_context,
    set_render_context,
)
from trellis.utils.html import html_escape
from trellis.view.core import CompiledView
from trellis.view.runtime import ViewRuntime

logger = logging.getLogger(__name__)


class Renderer:
    """Resolve, execute and compose views from one view directory.

    Attributes:
        loader: ViewLoader for the view directory
        globals: Variables available to every view (read-only mapping view;
            use ``add_global()`` to extend)
        extensions: Registry of extension providers
        max_layout_depth: Maximum layout hops in one render chain
        max_render_depth: Maximum nesting of ``this.render()`` calls
        auto_reload: Recompile cached views whose file changed

    Raises:
        ViewDirectoryNotFoundError: If *view_directory* does not exist

    Example:
        >>> renderer = Renderer("views/")
        >>> renderer.render("views/single")
        '<p>Content</p>'
    """

    def __init__(
        self,
        view_directory: str | Path,
        file_extension: str = "py",
        *,
        max_layout_depth: int = 50,
        max_render_depth: int = 50,
        auto_reload: bool = True,
        encoding: str = "utf-8",
    ):
        self.loader = ViewLoader(view_directory, file_extension, encoding)
        self.extensions = ExtensionRegistry()
        self.max_layout_depth = max_layout_depth
        self.max_render_depth = max_render_depth
        self.auto_reload = auto_reload
        self._globals: dict[str, Any] = {}
        self._cache: dict[str, CompiledView] = {}

    @property
    def view_directory(self) -> Path:
        return self.loader.directory

    @property
    def file_extension(self) -> str:
        return self.loader.file_extension

    @property
    def globals(self) -> Mapping[str, Any]:
        return MappingProxyType(self._globals)

    def add_extension(self, extension: Extension) -> None:
        """Register *extension*; one of the same type is replaced."""
        self.extensions.register(extension)

    def add_global(self, name: str, value: Any) -> None:
        """Make *value* available as *name* in every view.

        Raises:
            DuplicateGlobalError: If *name* was already added
        """
        if name in self._globals:
            raise DuplicateGlobalError(name)
        new = self._globals.copy()
        new[name] = value
        self._globals = new

    def exists(self, view: str) -> bool:
        """Whether *view* resolves to a view file."""
        return self.loader.exists(view)

    def list_views(self) -> list[str]:
        return self.loader.list_views()

    def get_view(self, view: str) -> CompiledView:
        """Resolve and compile *view*, reusing the cached compilation.

        Raises:
            ViewNotFoundError: If the view file does not exist
        """
        path = self.loader.resolve(view)
        key = str(path)
        cached = self._cache.get(key)
        if cached is not None and not self.auto_reload:
            return cached

        mtime = path.stat().st_mtime
        if cached is not None and cached.mtime == mtime:
            return cached

        compiled = CompiledView.from_source(
            normalize_view_name(view),
            path.read_text(self.loader.encoding),
            key,
            mtime,
        )
        self._cache[key] = compiled
        logger.debug(f"Compiled view {compiled.name!r} from {key}")
        return compiled

    def clear_cache(self) -> None:
        """Drop all compiled views."""
        self._cache = {}

    def render(self, view: str, params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> str:
        """Render *view* and any layouts it requests.

        Each call starts a new render chain: blocks and layout requests
        from earlier calls never carry over. Metadata of an enclosing
        ``render_context()`` is inherited.

        Args:
            view: View name, e.g. ``"pages/home"``
            params: Variables for the view; they override globals
            **kwargs: More variables, applied after *params*

        Returns:
            Fully composed output

        Raises:
            ViewNotFoundError: If the view or a requested layout is missing
            ViewRuntimeError: On misuse of blocks, layouts or extensions
            Exception: Anything raised by view code, unchanged
        """
        variables = dict(params) if params else {}
        variables.update(kwargs)

        current = get_render_context()
        ctx = RenderContext(
            max_render_depth=self.max_render_depth,
            _meta=current.metadata() if current is not None else {},
        )
        token = set_render_context(ctx)
        try:
            return self._render_chain(ctx, view, variables)
        finally:
            reset_render_context(token)

    def render_nested(self, ctx: RenderContext, view: str, variables: Mapping[str, Any]) -> str:
        """Render *view* as a sub-view inside the chain owning *ctx*.

        The sub-view shares the chain's blocks and capture stack. The
        caller's pending layout and "content" block are kept aside and
        restored afterwards, so a layout applied to the sub-view wraps only
        the sub-view.

        Raises:
            RenderDepthError: If sub-views nest deeper than max_render_depth
        """
        ctx.check_render_depth(view)
        pending_layout = ctx.layout
        saved_content = ctx.blocks.save_content()
        ctx.render_depth += 1
        try:
            return self._render_chain(ctx, view, variables)
        finally:
            ctx.render_depth -= 1
            ctx.layout = pending_layout
            ctx.blocks.restore_content(saved_content)

    def esc(self, value: Any) -> str:
        """HTML-escape *value*."""
        return html_escape(value)

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call extension function *name* outside a view."""
        return self.extensions.call(name, *args, **kwargs)

    def _render_chain(self, ctx: RenderContext, view: str, variables: Mapping[str, Any]) -> str:
        hops = 0
        while True:
            compiled = self.get_view(view)
            content = self._capture(ctx, compiled, variables)
            layout = ctx.layout
            if not layout:
                return content

            if hops >= self.max_layout_depth:
                raise LayoutDepthError(
                    self.max_layout_depth,
                    layout,
                    view_name=compiled.name,
                    view_stack=[*ctx.view_stack, compiled.name],
                )
            hops += 1
            logger.debug(f"Applying layout {layout!r} to view {compiled.name!r}")

            ctx.blocks.set_content(content)
            ctx.layout = None
            view, variables = layout, {}

    def _capture(self, ctx: RenderContext, compiled: CompiledView, variables: Mapping[str, Any]) -> str:
        """Execute *compiled* in a new capture frame and return its output."""
        depth = ctx.output.depth
        previous_view = ctx.view_name
        ctx.layout = None
        ctx.view_name = compiled.name
        ctx.view_stack.append(compiled.name)
        ctx.output.push()
        try:
            compiled.execute(ViewRuntime(self, ctx), {**self._globals, **variables})
            unclosed = ctx.blocks.opened_above(depth)
            if unclosed is not None:
                raise UnclosedBlockError(unclosed)
            return ctx.output.pop()
        except BaseException:
            dropped = ctx.output.discard_to(depth)
            ctx.blocks.abandon(depth)
            logger.debug(
                f"Render of {' > '.join(ctx.view_stack)} failed; discarded {dropped} output frame(s)"
            )
            raise
        finally:
            ctx.view_stack.pop()
            ctx.view_name = previous_view

    def __repr__(self) -> str:
        return f"<Renderer {str(self.view_directory)!r} extension={self.file_extension!r}>"
