"""Extension registry for the trellis Renderer.

Maps provider type → provider. Function lookup walks providers in
registration order and the first provider exposing a name wins; a later
provider cannot shadow an earlier one's function.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from trellis.environment.exceptions import UndefinedFunctionError
from trellis.extensions.base import Extension

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """Providers of view functions, keyed by their type.

    Supports:
        - registry.register(AssetExtension(...))
        - registry.resolve("asset")("app.css")
        - AssetExtension in registry
        - registry.get(AssetExtension)

    Registering a second provider of the same type replaces the first in
    place, keeping its position in the lookup order.

    All mutations use copy-on-write for thread-safety.
    """

    __slots__ = ("_providers",)

    def __init__(self) -> None:
        self._providers: dict[type, Extension] = {}

    def register(self, provider: Extension) -> None:
        key = type(provider)
        new = self._providers.copy()
        if key in new:
            logger.debug(f"Replacing extension {key.__qualname__}")
        new[key] = provider
        self._providers = new

    def resolve(self, name: str) -> Callable[..., Any]:
        """First function named *name* across providers.

        Raises:
            UndefinedFunctionError: If no provider exposes *name*
        """
        for provider in self._providers.values():
            functions = provider.get_functions()
            if name in functions:
                return functions[name]
        raise UndefinedFunctionError(name, self.function_names())

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Resolve *name* and call it."""
        return self.resolve(name)(*args, **kwargs)

    def function_names(self) -> list[str]:
        """Exposed function names in lookup order, without duplicates."""
        names: dict[str, None] = {}
        for provider in self._providers.values():
            for name in provider.get_functions():
                names.setdefault(name, None)
        return list(names)

    def get(self, key: type, default: Extension | None = None) -> Extension | None:
        return self._providers.get(key, default)

    def __contains__(self, item: object) -> bool:
        key = item if isinstance(item, type) else type(item)
        return key in self._providers

    def __iter__(self) -> Iterator[Extension]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        names = ", ".join(key.__qualname__ for key in self._providers)
        return f"<ExtensionRegistry [{names}]>"
