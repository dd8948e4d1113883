"""Stateless helpers shared by the renderer and views."""

from trellis.utils.html import html_escape

__all__ = ["html_escape"]
