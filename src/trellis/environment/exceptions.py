"""Exceptions for the trellis view renderer.

Exception Hierarchy:
ViewError (base)
├── ViewDirectoryNotFoundError   # Renderer built on a missing directory
├── DuplicateGlobalError         # add_global() called twice for one name
├── ViewNotFoundError            # View name resolves to no regular file
├── AssetNotFoundError           # asset() called for a missing file
└── ViewRuntimeError             # Render-time misuse of the view runtime
    ├── ReservedBlockNameError   # Explicit write to the "content" block
    ├── NestedBlockError         # begin_block() while a block is open
    ├── UnmatchedEndBlockError   # end_block() with no open block
    ├── UnclosedBlockError       # View finished with a block still open
    ├── UndefinedFunctionError   # No extension exposes the function
    ├── LayoutDepthError         # Too many layout hops (layout cycle)
    └── RenderDepthError         # Too many nested sub-view renders

Exceptions raised by view code itself are never wrapped: they propagate
to the caller of ``Renderer.render()`` unchanged, after the output buffer
has been unwound.

Example:
    ```
    T-BLK-002: You cannot nest blocks within other blocks.
      Location: pages/home.py
      Hint: Call end_block() for "menu" before beginning "sidebar"
      Docs: https://trellis.readthedocs.io/en/latest/errors.html#t-blk-002
    ```

"""

from __future__ import annotations

from collections.abc import Iterable
from difflib import get_close_matches
from enum import Enum

from trellis.environment import terminal

_DOCS_BASE = "https://trellis.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes, ``T-{CATEGORY}-{NUMBER}``.

    Categories: CFG (renderer setup), VIEW (view lookup), BLK (blocks),
    EXT (extensions), RUN (render pipeline).
    """

    VIEW_DIRECTORY_NOT_FOUND = "T-CFG-001"
    DUPLICATE_GLOBAL = "T-CFG-002"

    VIEW_NOT_FOUND = "T-VIEW-001"

    RESERVED_BLOCK_NAME = "T-BLK-001"
    NESTED_BLOCK = "T-BLK-002"
    UNMATCHED_END_BLOCK = "T-BLK-003"
    UNCLOSED_BLOCK = "T-BLK-004"

    UNDEFINED_FUNCTION = "T-EXT-001"
    ASSET_NOT_FOUND = "T-EXT-002"

    RUNTIME_ERROR = "T-RUN-001"
    LAYOUT_DEPTH = "T-RUN-002"
    RENDER_DEPTH = "T-RUN-003"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_DOCS_BASE}#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category (e.g., 'config', 'blocks', 'runtime')."""
        prefix = self.value.split("-")[1]
        return {
            "CFG": "config",
            "VIEW": "view",
            "BLK": "blocks",
            "EXT": "extensions",
            "RUN": "runtime",
        }.get(prefix, "unknown")


def did_you_mean(name: str, candidates: Iterable[str]) -> str | None:
    """Closest match for *name* among *candidates*, or None."""
    matches = get_close_matches(name, list(candidates), n=1, cutoff=0.6)
    return matches[0] if matches else None


class ViewError(Exception):
    """Base exception for all trellis errors.

    Attributes:
        code: ErrorCode identifying the failure.
        suggestion: Optional actionable hint shown by ``format_compact()``.
    """

    code: ErrorCode | None = None
    suggestion: str | None = None

    def format_compact(self) -> str:
        """Format the error as a traceback-free terminal diagnostic.

        Returns:
            Multi-line string with error code, message, hint and docs URL.
        """
        parts = [
            terminal.format_error_header(
                self.code.value if self.code else None,
                str(self).splitlines()[0] if str(self) else type(self).__name__,
            )
        ]
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        if self.code:
            parts.append(f"  {terminal.dim_text('Docs:')} {terminal.docs_url(self.code.docs_url)}")
        return "\n".join(parts)


class ViewDirectoryNotFoundError(ViewError):
    """The directory given to ``Renderer`` does not exist."""

    code: ErrorCode | None = ErrorCode.VIEW_DIRECTORY_NOT_FOUND

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f'The specified view directory "{directory}" does not exist.')


class DuplicateGlobalError(ViewError):
    """A global variable name was registered twice.

    Example:
        >>> renderer.add_global("site", "Docs")
        >>> renderer.add_global("site", "Blog")
        DuplicateGlobalError: Unable to add "site" as this global variable has already been added.
    """

    code: ErrorCode | None = ErrorCode.DUPLICATE_GLOBAL

    def __init__(self, name: str):
        self.name = name
        self.suggestion = f'Pass "{name}" as a render() parameter to override it per call'
        super().__init__(
            f'Unable to add "{name}" as this global variable has already been added.'
        )


class ViewNotFoundError(ViewError):
    """A view name resolved to a path that is missing or not a regular file.

    When the loader can list its views, the message carries a
    "Did you mean?" suggestion.
    """

    code: ErrorCode | None = ErrorCode.VIEW_NOT_FOUND

    def __init__(
        self,
        path: str,
        view: str | None = None,
        available: Iterable[str] | None = None,
    ):
        self.path = path
        self.view = view
        message = f'View file "{path}" does not exist or is not a file.'
        if view is not None and available is not None:
            match = did_you_mean(view, available)
            if match:
                self.suggestion = f"Did you mean '{match}'?"
                message += f" Did you mean '{match}'?"
        super().__init__(message)


class AssetNotFoundError(ViewError):
    """``asset()`` was asked for a file that does not exist under the base path."""

    code: ErrorCode | None = ErrorCode.ASSET_NOT_FOUND

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Asset file "{path}" does not exist.')


class ViewRuntimeError(ViewError):
    """Render-time error raised by the view runtime.

    Location defaults to the view currently executing, read from the active
    ``RenderContext`` when there is one.

    Output Format:
        ```
        You must begin a block before you can end it.
          Location: pages/home.py
          View stack: layouts/main.py > pages/home.py
          Suggestion: Pair every end_block() with a preceding begin_block()
        ```

    Attributes:
        message: Error description
        view_name: View executing when the error was raised
        view_stack: Chain of views (layouts and sub-views) leading here
        suggestion: Actionable fix suggestion
    """

    code: ErrorCode | None = ErrorCode.RUNTIME_ERROR

    def __init__(
        self,
        message: str,
        *,
        view_name: str | None = None,
        view_stack: list[str] | None = None,
        suggestion: str | None = None,
    ):
        if view_name is None and view_stack is None:
            from trellis.render_context import get_render_context

            ctx = get_render_context()
            if ctx is not None:
                view_name = ctx.view_name
                view_stack = list(ctx.view_stack)
        self.message = message
        self.view_name = view_name
        self.view_stack = view_stack or []
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.view_name:
            parts.append(f"  Location: {self.view_name}")
        if len(self.view_stack) > 1:
            parts.append(f"  View stack: {' > '.join(self.view_stack)}")
        if self.suggestion:
            parts.append(f"  Suggestion: {self.suggestion}")
        return "\n".join(parts)

    def format_compact(self) -> str:
        """Format runtime error as structured terminal diagnostic."""
        parts = [
            terminal.format_error_header(self.code.value if self.code else None, self.message)
        ]
        if self.view_name:
            parts.append(f"  Location: {terminal.location(self.view_name)}")
        if len(self.view_stack) > 1:
            chain = " > ".join(terminal.location(name) for name in self.view_stack)
            parts.append(f"  {terminal.dim_text('View stack:')} {chain}")
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        if self.code:
            parts.append(f"  {terminal.dim_text('Docs:')} {terminal.docs_url(self.code.docs_url)}")
        return "\n".join(parts)


class ReservedBlockNameError(ViewRuntimeError):
    """A view wrote the block ``"content"``, which only layouts receive."""

    code: ErrorCode | None = ErrorCode.RESERVED_BLOCK_NAME

    def __init__(self, name: str = "content", **kwargs):
        self.name = name
        super().__init__(
            f'The block name "{name}" is reserved.',
            suggestion="Layouts receive the child view's output as \"content\"; pick another name",
            **kwargs,
        )


class NestedBlockError(ViewRuntimeError):
    """``begin_block()`` was called while another block was being captured."""

    code: ErrorCode | None = ErrorCode.NESTED_BLOCK

    def __init__(self, active: str, requested: str, **kwargs):
        self.active = active
        self.requested = requested
        super().__init__(
            "You cannot nest blocks within other blocks.",
            suggestion=f'Call end_block() for "{active}" before beginning "{requested}"',
            **kwargs,
        )


class UnmatchedEndBlockError(ViewRuntimeError):
    """``end_block()`` was called with no block being captured."""

    code: ErrorCode | None = ErrorCode.UNMATCHED_END_BLOCK

    def __init__(self, **kwargs):
        super().__init__(
            "You must begin a block before you can end it.",
            suggestion="Pair every end_block() with a preceding begin_block()",
            **kwargs,
        )


class UnclosedBlockError(ViewRuntimeError):
    """A view finished executing while a block capture was still open."""

    code: ErrorCode | None = ErrorCode.UNCLOSED_BLOCK

    def __init__(self, name: str, **kwargs):
        self.name = name
        super().__init__(
            f'Block "{name}" was begun but never ended.',
            suggestion=f'Add this.end_block() after the content of "{name}"',
            **kwargs,
        )


class UndefinedFunctionError(ViewRuntimeError, AttributeError):
    """No registered extension exposes the called function.

    Also an ``AttributeError``, so ``hasattr(this, "missing")`` is False
    inside a view.

    Example:
        >>> this.assett("app.css")
        UndefinedFunctionError: Calling an undefined function "assett". Did you mean 'asset'?
    """

    code: ErrorCode | None = ErrorCode.UNDEFINED_FUNCTION

    def __init__(self, name: str, available: Iterable[str] = (), **kwargs):
        self.function_name = name
        message = f'Calling an undefined function "{name}".'
        match = did_you_mean(name, available)
        if match:
            message += f" Did you mean '{match}'?"
        super().__init__(
            message,
            suggestion="Register an extension exposing it with Renderer.add_extension()",
            **kwargs,
        )


class LayoutDepthError(ViewRuntimeError):
    """A render chain requested more layouts than ``max_layout_depth``."""

    code: ErrorCode | None = ErrorCode.LAYOUT_DEPTH

    def __init__(self, max_depth: int, layout: str, **kwargs):
        self.max_depth = max_depth
        self.layout = layout
        super().__init__(
            f"Maximum layout depth exceeded ({max_depth}) when applying layout '{layout}'",
            suggestion="Check for circular layouts: A -> B -> A",
            **kwargs,
        )


class RenderDepthError(ViewRuntimeError):
    """Sub-view renders nested deeper than ``max_render_depth``."""

    code: ErrorCode | None = ErrorCode.RENDER_DEPTH

    def __init__(self, max_depth: int, view: str, **kwargs):
        self.max_depth = max_depth
        self.view = view
        super().__init__(
            f"Maximum render depth exceeded ({max_depth}) when rendering '{view}'",
            suggestion="Check for views that render themselves: A -> B -> A",
            **kwargs,
        )
