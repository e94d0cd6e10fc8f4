"""Styling helpers for CLI output.

Everything in ``ignite_cli.lib._util.ansi`` is available from here too, so
command modules only need this one import.
"""

from ignite_cli.lib._util.ansi import (  # noqa: F401  -- re-exports
    GREEN,
    RED,
    color,
    green,
    red,
    supports_color,
    warn,
    yellow,
)

GRAY = "90"
BOLD = "1"


def bold(text: str, enabled: bool) -> str:
    return color(text, BOLD, enabled)


def gray(text: str, enabled: bool) -> str:
    return color(text, GRAY, enabled)


def yes_no(value: bool, enabled: bool) -> str:
    """Render a boolean as ``yes`` (green) or ``no`` (red)."""
    if value:
        return color("yes", GREEN, enabled)
    return color("no", RED, enabled)
