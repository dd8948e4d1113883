"""Named content fragments for one render chain.

Blocks are write-once: the first value stored under a name wins and later
writes are ignored, so a child view's blocks survive into its layout. The
name ``"content"`` is reserved for the composition loop, which always
overwrites it with the output of the view being wrapped.
"""

from __future__ import annotations

from trellis.environment.exceptions import (
    NestedBlockError,
    ReservedBlockNameError,
    UnmatchedEndBlockError,
)
from trellis.view.buffer import OutputBuffer

CONTENT_BLOCK = "content"


class BlockStore:
    """Write-once block storage with single-level output capture.

    Example:
        >>> out = OutputBuffer()
        >>> blocks = BlockStore(out)
        >>> blocks.begin("menu")
        >>> out.write("<nav>Menu</nav>")
        >>> blocks.end()
        >>> blocks.get("menu")
        '<nav>Menu</nav>'
    """

    __slots__ = ("_active", "_active_depth", "_blocks", "_output")

    def __init__(self, output: OutputBuffer):
        self._output = output
        self._blocks: dict[str, str] = {}
        self._active: str | None = None
        self._active_depth = 0

    @property
    def active(self) -> str | None:
        """Name of the block being captured, or None."""
        return self._active

    def set(self, name: str, content: str) -> None:
        """Store *content* under *name* unless the name is empty or taken.

        Raises:
            ReservedBlockNameError: If *name* is "content"
        """
        if name == CONTENT_BLOCK:
            raise ReservedBlockNameError(name)
        if not name or name in self._blocks:
            return
        self._blocks[name] = content

    def set_content(self, content: str) -> None:
        """Overwrite the reserved "content" block."""
        self._blocks[CONTENT_BLOCK] = content

    def save_content(self) -> str | None:
        """Current "content" block, or None if unset; see ``restore_content()``."""
        return self._blocks.get(CONTENT_BLOCK)

    def restore_content(self, saved: str | None) -> None:
        """Put back a "content" block returned by ``save_content()``."""
        if saved is None:
            self._blocks.pop(CONTENT_BLOCK, None)
        else:
            self._blocks[CONTENT_BLOCK] = saved

    def begin(self, name: str) -> None:
        """Start capturing output into block *name*.

        Raises:
            NestedBlockError: If another block is being captured
        """
        if self._active is not None:
            raise NestedBlockError(self._active, name)
        self._active = name
        self._active_depth = self._output.push()

    def end(self) -> None:
        """Stop capturing and store the captured output.

        The frame is closed and the capture cleared before storing, so a
        reserved or duplicate name leaves no capture open.

        Raises:
            UnmatchedEndBlockError: If no block is being captured
            ReservedBlockNameError: If the block was begun as "content"
        """
        if self._active is None:
            raise UnmatchedEndBlockError()
        name = self._active
        content = self._output.pop()
        self._active = None
        self._active_depth = 0
        self.set(name, content)

    def opened_above(self, depth: int) -> str | None:
        """Name of the active capture if it was begun above frame *depth*.

        A sub-view rendered inside a caller's block sees that block as
        active, but it was opened below the sub-view's own frame.
        """
        if self._active is not None and self._active_depth > depth:
            return self._active
        return None

    def abandon(self, depth: int) -> None:
        """Forget the active capture if its frame sits above *depth*.

        Called after failure cleanup discarded frames down to *depth*.
        """
        if self.opened_above(depth) is not None:
            self._active = None
            self._active_depth = 0

    def get(self, name: str, default: str = "") -> str:
        """Stored content for *name*, or *default*."""
        return self._blocks.get(name, default)

    def names(self) -> list[str]:
        """Stored block names in the order they were first set."""
        return list(self._blocks)

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __repr__(self) -> str:
        return f"<BlockStore blocks={list(self._blocks)!r} active={self._active!r}>"
