"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ...lib.core.local_config import load_local_config
from ...lib.errors import WrongDirectoryError


def working_dir(args: argparse.Namespace) -> Path:
    """Return the explicit working directory for a parsed command line.

    Raises WrongDirectoryError if ``-C`` names something that is not a directory.
    """
    path = Path(getattr(args, "directory", None) or os.getcwd()).resolve()
    if not path.is_dir():
        raise WrongDirectoryError(f"Working directory {path} does not exist or is not a directory")
    return path


def complete_generator_types(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover
    """Return generator types from ``.ignite`` matching *prefix* for argcomplete."""
    try:
        types = sorted(load_local_config(working_dir(parsed_args)).generators)
    except Exception:
        return []
    if prefix:
        types = [t for t in types if t.startswith(prefix)]
    return types


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*."""
    action.completer = fn  # type: ignore[attr-defined]
