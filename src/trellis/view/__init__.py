"""View execution: capture frames, blocks, compiled views and the ``this`` runtime."""

from trellis.view.blocks import CONTENT_BLOCK, BlockStore
from trellis.view.buffer import OutputBuffer
from trellis.view.core import CompiledView
from trellis.view.runtime import ViewRuntime

__all__ = [
    "CONTENT_BLOCK",
    "BlockStore",
    "CompiledView",
    "OutputBuffer",
    "ViewRuntime",
]
