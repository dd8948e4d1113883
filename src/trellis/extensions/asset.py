"""Asset URL helper for views.

Exposes ``asset(file)``, which turns a path relative to the published
assets directory into a URL, optionally with a cache-busting timestamp:

    ```python
    renderer.add_extension(AssetExtension("public/assets", "/assets", append_timestamp=True))
    ```

    ```python
    # in a view
    echo(f'<link rel="stylesheet" href="{this.asset("css/app.css")}">')
    # -> /assets/css/app.css?v=1760000000
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from trellis.environment.exceptions import AssetNotFoundError


class AssetExtension:
    """Build URLs for published asset files.

    Attributes:
        base_path: Directory holding the published assets
        base_url: URL prefix the assets are served under
        append_timestamp: Append ``?v=<mtime>`` to every URL
    """

    __slots__ = ("append_timestamp", "base_path", "base_url")

    def __init__(self, base_path: str | Path, base_url: str = "", append_timestamp: bool = False):
        self.base_path = str(base_path).rstrip("/\\")
        self.base_url = base_url.rstrip("/")
        self.append_timestamp = append_timestamp

    def get_functions(self) -> dict[str, Callable[..., Any]]:
        return {"asset": self.asset_file}

    def asset_file(self, file: str) -> str:
        """URL of *file*, with the modification time appended if enabled.

        Raises:
            AssetNotFoundError: If the file does not exist under base_path
        """
        relative = file.lstrip("/")
        url = f"{self.base_url}/{relative}"
        path = Path(f"{self.base_path}/{relative}")

        if not path.exists():
            raise AssetNotFoundError(str(path))

        if self.append_timestamp:
            return f"{url}?v={int(path.stat().st_mtime)}"
        return url
