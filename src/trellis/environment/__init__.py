"""Renderer setup: loader, extension registry, configuration and errors."""

from trellis.environment.core import Renderer
from trellis.environment.exceptions import (
    AssetNotFoundError,
    DuplicateGlobalError,
    ErrorCode,
    LayoutDepthError,
    NestedBlockError,
    RenderDepthError,
    ReservedBlockNameError,
    UnclosedBlockError,
    UndefinedFunctionError,
    UnmatchedEndBlockError,
    ViewDirectoryNotFoundError,
    ViewError,
    ViewNotFoundError,
    ViewRuntimeError,
)
from trellis.environment.loaders import ViewLoader, normalize_view_name
from trellis.environment.registry import ExtensionRegistry

__all__ = [
    "AssetNotFoundError",
    "DuplicateGlobalError",
    "ErrorCode",
    "ExtensionRegistry",
    "LayoutDepthError",
    "NestedBlockError",
    "RenderDepthError",
    "Renderer",
    "ReservedBlockNameError",
    "UnclosedBlockError",
    "UndefinedFunctionError",
    "UnmatchedEndBlockError",
    "ViewDirectoryNotFoundError",
    "ViewError",
    "ViewLoader",
    "ViewNotFoundError",
    "ViewRuntimeError",
    "normalize_view_name",
]
