"""ANSI styling shared by the library and the CLI.

``ignite_cli.ui_utils.terminal`` builds on these; library modules import
them from here so they never depend on the presentation layer.
"""

import os
import sys

RESET = "\x1b[0m"
RED = "31"
GREEN = "32"
YELLOW = "33"


def supports_color(stream=None) -> bool:
    """Return True if escape codes should be written to *stream* (default stdout).

    ``NO_COLOR`` disables color unconditionally, a non-zero ``FORCE_COLOR``
    enables it for pipes and files, and otherwise only TTYs get color.
    """
    if "NO_COLOR" in os.environ:
        return False
    if os.environ.get("FORCE_COLOR", "0") != "0":
        return True
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def color(text: str, code: str, enabled: bool) -> str:
    """Return *text* wrapped in the SGR sequence *code*, or unchanged if not *enabled*."""
    return f"\x1b[{code}m{text}{RESET}" if enabled else text


def red(text: str, enabled: bool) -> str:
    return color(text, RED, enabled)


def green(text: str, enabled: bool) -> str:
    return color(text, GREEN, enabled)


def yellow(text: str, enabled: bool) -> str:
    return color(text, YELLOW, enabled)


def warn(message: str) -> None:
    """Report a recoverable problem on stderr without stopping the command."""
    prefix = yellow("Warning:", supports_color(sys.stderr))
    print(f"{prefix} {message}", file=sys.stderr)
