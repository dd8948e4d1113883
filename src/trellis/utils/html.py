"""HTML escaping for view output.

Complexity: O(n) single pass via ``str.translate()``.
"""

from __future__ import annotations

from typing import Any

# Always encodes "&", so existing entities are escaped again.
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def html_escape(value: Any) -> str:
    """Convert HTML special characters in *value* to character references.

    Objects implementing ``__html__`` are trusted and returned as their
    ``__html__()`` output. ``None`` escapes to an empty string.

    Example:
        >>> html_escape('<a href="x">Tom & Jerry\\'s</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;'
    """
    if value is None:
        return ""
    html = getattr(value, "__html__", None)
    if html is not None:
        return str(html())
    return str(value).translate(_ESCAPE_TABLE)
