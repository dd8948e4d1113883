"""Contract for extension providers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Extension(Protocol):
    """Source of functions callable from views.

    Implement ``get_functions()`` returning a mapping of function name to
    callable. Each function is then available in views as ``this.<name>(...)``:

        ```python
        class TextExtension:
            def get_functions(self):
                return {"upper": str.upper, "excerpt": self.excerpt}

            def excerpt(self, text, length=80):
                return text[:length]
        ```

    The mapping is read on every lookup, so providers may compute it lazily
    or return different functions over time.
    """

    def get_functions(self) -> Mapping[str, Callable[..., Any]]: ...
