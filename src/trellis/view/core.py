"""Compiled view: a view file's code object ready for execution.

Views are Python source files. They are compiled once with ``compile()``
and executed with ``exec()`` in a fresh module namespace per render:

    ```python
    # views/pages/home.py
    this.layout("layouts/main")
    this.block("title", f"Welcome, {user.name}")

    echo("<h1>", this.esc(user.name), "</h1>")
    for post in posts:
        echo(this.render("partials/post", post=post))
    ```

Namespace:
    - every merged variable (globals overlaid by per-call params)
    - ``this``: the ViewRuntime for the render in progress
    - ``echo``: shortcut for ``this.echo``

Output flows only through ``echo``; the view's own return value, if any,
is discarded.

"""

from __future__ import annotations

import types
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trellis.view.runtime import ViewRuntime


class CompiledView:
    """A view file compiled to a code object.

    Immutable after construction; one instance serves concurrent renders.

    Attributes:
        name: Logical view name, as passed to ``render()``
        filename: Resolved source path
        mtime: Source modification time at compile time
    """

    __slots__ = ("_code", "filename", "mtime", "name")

    def __init__(self, name: str, filename: str, code: types.CodeType, mtime: float = 0.0):
        self.name = name
        self.filename = filename
        self.mtime = mtime
        self._code = code

    @classmethod
    def from_source(cls, name: str, source: str, filename: str, mtime: float = 0.0) -> CompiledView:
        """Compile *source*; a SyntaxError propagates with *filename* in it."""
        return cls(name, filename, compile(source, filename, "exec"), mtime)

    def execute(self, runtime: ViewRuntime, variables: Mapping[str, Any]) -> None:
        """Run the view with *variables* as module globals and *runtime* as ``this``."""
        namespace: dict[str, Any] = {"__name__": f"trellis.views.{self.name}", "__file__": self.filename}
        namespace.update(variables)
        namespace["this"] = runtime
        namespace["echo"] = runtime.echo
        exec(self._code, namespace)

    def __repr__(self) -> str:
        return f"<CompiledView {self.name!r}>"
