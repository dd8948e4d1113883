"""Extensions: named functions made callable from views as ``this.<name>()``."""

from trellis.extensions.asset import AssetExtension
from trellis.extensions.base import Extension

__all__ = ["AssetExtension", "Extension"]
