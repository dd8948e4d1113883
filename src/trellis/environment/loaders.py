"""View loader for the trellis Renderer.

Maps logical view names to files under one view directory and reads their
source.

Name Resolution:
    ```
    "/pages/home/"    ->  <directory>/pages/home.py
    "\\pages\\home"   ->  <directory>/pages/home.py
    "pages/home.py"   ->  <directory>/pages/home.py
    "feeds/atom.xml"  ->  <directory>/feeds/atom.xml
    ```
Leading and trailing ``/`` and ``\\`` are stripped, inner backslashes are
treated as ``/``, and the default extension is appended only when the
last path component has none.

Thread-Safety:
The loader holds only immutable configuration; ``resolve()`` and
``get_source()`` are safe for concurrent calls.

"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from trellis.environment.exceptions import ViewDirectoryNotFoundError, ViewNotFoundError

_SEPARATORS = "/\\"


def normalize_view_name(name: str) -> str:
    """Strip outer separators and use ``/`` between components.

    Example:
        >>> normalize_view_name("\\\\/views\\\\single/")
        'views/single'
    """
    name = name.strip(_SEPARATORS).replace("\\", "/")
    return str(PurePosixPath(name)) if name else ""


def normalize_extension(file_extension: str) -> str:
    """Drop leading dots: ``".py"`` and ``"py"`` both give ``"py"``."""
    return file_extension.lstrip(".")


class ViewLoader:
    """Load views from one directory.

    Attributes:
        directory: Absolute view directory
        file_extension: Suffix (without dot) appended to bare view names

    Example:
        >>> loader = ViewLoader("views/")
        >>> loader.resolve("pages/about")
        PosixPath('/srv/app/views/pages/about.py')
        >>> loader.list_views()
        ['layouts/main', 'pages/about', 'pages/home']

    Raises:
        ViewDirectoryNotFoundError: If *directory* does not exist

    """

    __slots__ = ("directory", "encoding", "file_extension")

    def __init__(
        self,
        directory: str | Path,
        file_extension: str = "py",
        encoding: str = "utf-8",
    ):
        raw = str(directory)
        stripped = raw.rstrip(_SEPARATORS) or raw
        path = Path(stripped)
        if not path.is_dir():
            raise ViewDirectoryNotFoundError(stripped)
        self.directory = path.absolute()
        self.file_extension = normalize_extension(file_extension)
        self.encoding = encoding

    def _candidate(self, name: str) -> tuple[str, Path]:
        view = normalize_view_name(name)
        relative = view
        if view and not PurePosixPath(view).suffix and self.file_extension:
            relative = f"{view}.{self.file_extension}"
        return view, self.directory / relative

    def resolve(self, name: str) -> Path:
        """Path of the file for view *name*.

        Raises:
            ViewNotFoundError: If the path is missing or not a regular file
        """
        view, path = self._candidate(name)
        if not path.is_file():
            raise ViewNotFoundError(str(path), view=view, available=self.list_views())
        return path

    def exists(self, name: str) -> bool:
        """Whether *name* resolves to a view file."""
        return self._candidate(name)[1].is_file()

    def get_source(self, name: str) -> tuple[str, str]:
        """Return ``(source, filename)`` for view *name*."""
        path = self.resolve(name)
        return path.read_text(self.encoding), str(path)

    def list_views(self) -> list[str]:
        """Names of all views with the default extension, sorted.

        Names are given without the extension, as they are passed to
        ``render()``.
        """
        if not self.file_extension:
            return sorted(
                p.relative_to(self.directory).as_posix()
                for p in self.directory.rglob("*")
                if p.is_file()
            )
        suffix = f".{self.file_extension}"
        return sorted(
            p.relative_to(self.directory).as_posix()[: -len(suffix)]
            for p in self.directory.rglob(f"*{suffix}")
            if p.is_file()
        )

    def __repr__(self) -> str:
        return f"<ViewLoader {str(self.directory)!r} extension={self.file_extension!r}>"
