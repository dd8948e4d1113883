"""Trellis RenderContext: per-render state kept off the shared Renderer.

A ``Renderer`` lives for the whole application and is shared by every
render call. The state a render mutates (blocks, the pending layout, the
capture stack) lives here instead, in a fresh ``RenderContext`` created for
each top-level ``Renderer.render()`` call and published through a
ContextVar for the duration of that call.

Benefits:
    - No layout or block state leaks from one render into the next
    - Concurrent renders on one Renderer never share capture frames
    - Extension functions can reach the render in progress via
      ``get_render_context()``

Nested ``this.render()`` calls from inside a view reuse the caller's
context: sub-views and layouts of one chain share blocks and frames.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field

from trellis.view.blocks import BlockStore
from trellis.view.buffer import OutputBuffer


@dataclass
class RenderContext:
    """State of one render chain.

    Thread Safety:
        ContextVars are per thread and per asyncio task, so each concurrent
        render sees only its own RenderContext.

    Attributes:
        output: Capture frames for the chain
        blocks: Blocks set by views of the chain
        layout: Layout requested by the view currently executing
        view_name: View currently executing, for error messages
        view_stack: Views entered so far (layouts and sub-views)
        render_depth: Current nesting of ``this.render()`` calls
        max_render_depth: Limit on ``render_depth``
    """

    output: OutputBuffer = field(default_factory=OutputBuffer)
    blocks: BlockStore = field(init=False)

    layout: str | None = None

    view_name: str | None = None
    view_stack: list[str] = field(default_factory=list)

    # Deep enough for any real partial hierarchy, low enough to stop a view
    # that renders itself long before the interpreter's recursion limit.
    render_depth: int = 0
    max_render_depth: int = 50

    # Framework metadata (request, csrf token, ...)
    _meta: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.blocks = BlockStore(self.output)

    def get_meta(self, key: str, default: object = None) -> object:
        """Get host-application metadata.

        Lets a web framework hand request data to extension functions
        without passing it through every view:

            with render_context() as ctx:
                ctx.set_meta("csrf_token", session.csrf_token())
                html = renderer.render("forms/login")

        Args:
            key: Metadata key
            default: Value to return if key not found
        """
        return self._meta.get(key, default)

    def set_meta(self, key: str, value: object) -> None:
        """Set host-application metadata."""
        self._meta[key] = value

    def metadata(self) -> dict[str, object]:
        """Copy of all metadata, for handing on to a new context."""
        return self._meta.copy()

    def check_render_depth(self, view: str) -> None:
        """Check the sub-render nesting limit before entering *view*.

        Raises:
            RenderDepthError: If render_depth >= max_render_depth
        """
        if self.render_depth >= self.max_render_depth:
            from trellis.environment.exceptions import RenderDepthError

            raise RenderDepthError(self.max_render_depth, view)


# Module-level ContextVar
_render_context: ContextVar[RenderContext | None] = ContextVar(
    "trellis_render_context",
    default=None,
)


def get_render_context() -> RenderContext | None:
    """Current render context (None outside a render)."""
    return _render_context.get()


def get_render_context_required() -> RenderContext:
    """Current render context, for helpers only valid during a render.

    Raises:
        RuntimeError: If not in a render
    """
    ctx = _render_context.get()
    if ctx is None:
        raise RuntimeError("Not in a render context")
    return ctx


@contextmanager
def render_context(
    max_render_depth: int = 50,
    parent_meta: dict[str, object] | None = None,
) -> Iterator[RenderContext]:
    """Context manager making a fresh RenderContext current.

    The previous context (if any) is restored on exit, also when the body
    raises. A top-level ``Renderer.render()`` inside the block starts its own
    context but inherits this one's metadata, so a host application can
    seed request data:

        with render_context() as ctx:
            ctx.set_meta("user", current_user)
            html = renderer.render("dashboard")

    Args:
        max_render_depth: Limit on nested ``this.render()`` calls
        parent_meta: Metadata to start from (copied)

    Yields:
        The new RenderContext
    """
    ctx = RenderContext(
        max_render_depth=max_render_depth,
        _meta=parent_meta.copy() if parent_meta else {},
    )
    token: Token[RenderContext | None] = _render_context.set(ctx)
    try:
        yield ctx
    finally:
        _render_context.reset(token)


def set_render_context(ctx: RenderContext) -> Token[RenderContext | None]:
    """Set *ctx* as current and return the token for ``reset_render_context``."""
    return _render_context.set(ctx)


def reset_render_context(token: Token[RenderContext | None]) -> None:
    """Restore the context that was current before ``set_render_context``."""
    _render_context.reset(token)
