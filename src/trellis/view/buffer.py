"""Stack of output capture frames.

Each frame is a StringBuilder: writes append to a list and the frame's text
is produced once with ``''.join(buf)`` when the frame is popped. This is
O(n) in output size, against O(n^2) for repeated string concatenation.

A view's whole output is one frame; ``begin_block()`` pushes another on
top of it. Failure cleanup unwinds with ``discard_to()`` back to the depth
recorded before the view started, so frames never outlive a failed render.
"""

from __future__ import annotations

from typing import Any


class OutputBuffer:
    """LIFO stack of capture frames.

    Example:
        >>> out = OutputBuffer()
        >>> out.push()
        1
        >>> out.write("<p>", "Hi", "</p>")
        >>> out.pop()
        '<p>Hi</p>'
    """

    __slots__ = ("_frames",)

    def __init__(self) -> None:
        self._frames: list[list[str]] = []

    @property
    def depth(self) -> int:
        """Number of open frames."""
        return len(self._frames)

    def push(self) -> int:
        """Open a new frame on top of the stack and return the new depth."""
        self._frames.append([])
        return len(self._frames)

    def write(self, *parts: Any) -> None:
        """Append the string form of each part to the top frame; None writes nothing.

        Raises:
            RuntimeError: If no frame is open
        """
        if not self._frames:
            raise RuntimeError("No output frame is open; write() is only valid during a render")
        append = self._frames[-1].append
        for part in parts:
            if part is None:
                continue
            append(part if isinstance(part, str) else str(part))

    def pop(self) -> str:
        """Close the top frame and return everything written to it.

        Raises:
            RuntimeError: If no frame is open
        """
        if not self._frames:
            raise RuntimeError("No output frame is open")
        return "".join(self._frames.pop())

    def discard_to(self, depth: int) -> int:
        """Drop frames until at most *depth* remain, returning how many were dropped."""
        dropped = 0
        while len(self._frames) > depth:
            self._frames.pop()
            dropped += 1
        return dropped

    def __repr__(self) -> str:
        return f"<OutputBuffer depth={len(self._frames)}>"
