# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""External tool helpers: PATH lookup, npm wrappers and process spawning.

Interactive commands (generators, installs) inherit the parent's stdin,
stdout and stderr. Queries whose output is parsed (``npm ls``, ``npm
outdated``, ``--version`` probes) capture it instead.
"""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any

from ._util.logging_utils import _log_debug
from .core.config import cli_package, conflicting_cli_package, npm_command, yo_command
from .errors import ToolError


def which(tool: str) -> str | None:
    """Return the absolute path of *tool* on PATH, or None."""
    return shutil.which(tool)


def run_inherited(cmd: list[str], cwd: Path | None = None) -> int:
    """Run *cmd* with inherited stdio and return its exit status.

    Raises ToolError if the executable cannot be started at all.
    """
    _log_debug(f"spawn: {' '.join(cmd)} (cwd={cwd})")
    try:
        result = subprocess.run(cmd, cwd=str(cwd) if cwd else None, check=False)
    except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
        raise ToolError(f"Could not run '{cmd[0]}': {e}")
    _log_debug(f"spawn: {cmd[0]} exited with {result.returncode}")
    # A child killed by signal N reports -N; shells report 128 + N.
    if result.returncode < 0:
        return 128 - result.returncode
    return result.returncode


def _run_captured(cmd: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess:
    _log_debug(f"query: {' '.join(cmd)}")
    try:
        return subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise ToolError(f"Could not run '{cmd[0]}': {e}")


def _parse_json_output(text: str) -> dict[str, Any]:
    text = (text or "").strip()
    if not text:
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


# ---------- npm ----------


def npm_install_global(package: str) -> None:
    """``npm install -g <package>``; raises ToolError on failure."""
    rc = run_inherited([npm_command(), "install", "-g", package])
    if rc != 0:
        raise ToolError(f"npm install -g {package} failed (exit {rc})")


def npm_uninstall_global(package: str) -> None:
    """``npm uninstall -g <package>``; raises ToolError on failure."""
    rc = run_inherited([npm_command(), "uninstall", "-g", package])
    if rc != 0:
        raise ToolError(f"npm uninstall -g {package} failed (exit {rc})")


def npm_install_dependency(package: str, cwd: Path) -> None:
    """Install *package* as a dependency of the project in *cwd*."""
    rc = run_inherited([npm_command(), "install", "--save", package], cwd=cwd)
    if rc != 0:
        raise ToolError(f"npm install --save {package} failed (exit {rc})")


def is_global_package_installed(package: str) -> bool:
    """Return True if *package* is installed globally.

    ``npm ls`` exits non-zero when the package is missing, so only the JSON
    output is inspected.
    """
    result = _run_captured([npm_command(), "ls", "-g", "--depth=0", "--json", package])
    deps = _parse_json_output(result.stdout).get("dependencies") or {}
    return isinstance(deps, dict) and package in deps


def global_package_outdated(package: str) -> dict[str, Any]:
    """Return npm's outdated entry for a global *package*, or ``{}`` if current.

    ``npm outdated`` exits 1 whenever something is outdated, so the exit
    status is ignored and only the JSON output is inspected.
    """
    result = _run_captured([npm_command(), "outdated", "-g", "--json", package])
    data = _parse_json_output(result.stdout)
    entry = data.get(package)
    return entry if isinstance(entry, dict) else {}


# ---------- Tool presence ----------


def ensure_yo() -> str:
    """Make sure the yeoman runner is on PATH, installing it globally if not.

    Returns the executable name to spawn. No version pinning and no rollback
    if the install fails halfway.
    """
    yo = yo_command()
    if which(yo):
        return yo
    print(f"{yo} is not installed, installing it globally with npm...")
    npm_install_global("yo")
    if which(yo) is None:
        raise ToolError(f"{yo} is still not on PATH after installing it; check your npm prefix")
    return yo


def ensure_cli_package() -> bool:
    """Replace a conflicting global React Native package with the expected CLI.

    Returns True if a replacement happened.
    """
    conflicting = conflicting_cli_package()
    if not is_global_package_installed(conflicting):
        return False
    expected = cli_package()
    print(f"Found global '{conflicting}' package, replacing it with '{expected}'...")
    npm_uninstall_global(conflicting)
    npm_install_global(expected)
    return True


def tool_version(tool: str, *args: str) -> str | None:
    """Return the first line of ``<tool> --version`` (or *args*), or None.

    Never raises; used by read-only reports.
    """
    cmd = [tool, *(args or ("--version",))]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except (OSError, ValueError):
        return None
    if result.returncode != 0:
        return None
    lines = (result.stdout or "").strip().splitlines()
    return lines[0].strip() if lines else None
