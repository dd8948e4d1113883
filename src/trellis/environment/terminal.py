"""ANSI colouring for trellis diagnostics.

Colours are applied only when stdout is a TTY, unless overridden by the
``NO_COLOR`` (https://no-color.org/) or ``FORCE_COLOR`` environment variables.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_CODES = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "bright_red": "\033[91m",
    "bright_blue": "\033[94m",
}

Style = Literal[
    "reset", "bold", "dim", "cyan", "green",
    "bright_red", "bright_blue",
]

_ANSI_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _detect_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _detect_colors()


def supports_color() -> bool:
    """Whether diagnostics are coloured in this process."""
    return _USE_COLORS


def colorize(text: str, *styles: Style) -> str:
    """Wrap *text* in the ANSI codes for *styles*.

    Returns *text* unchanged when colours are disabled.

    Example:
        >>> colorize("T-RUN-001", "bright_red", "bold")
        '\033[91m\033[1mT-RUN-001\033[0m'  # colours enabled
    """
    if not _USE_COLORS or not styles:
        return text
    prefix = "".join(_CODES.get(style, "") for style in styles)
    if not prefix:
        return text
    return f"{prefix}{text}{_CODES['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    return _ANSI_RE.sub("", text)


def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def location(text: str) -> str:
    return colorize(text, "cyan")


def hint(text: str) -> str:
    return colorize(text, "green")


def dim_text(text: str) -> str:
    return colorize(text, "dim")


def docs_url(text: str) -> str:
    return colorize(text, "bright_blue")


def format_error_header(code: str | None, message: str) -> str:
    """Prefix *message* with a coloured error code, if any."""
    if code:
        return f"{error_code(code)}: {message}"
    return message
