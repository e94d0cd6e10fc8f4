"""Environment report for ``ignite doctor``.

Read-only: every probe swallows its own failures and reports a placeholder,
so the report can always be printed.
"""

import json
import platform
from dataclasses import dataclass
from pathlib import Path

from .core.config import node_command, npm_command, yo_command
from .core.project_model import is_ignite_dir
from .core.version import format_version_string, get_version_info
from .tools import tool_version, which

PLACEHOLDER = "-"


@dataclass
class ToolInfo:
    version: str = PLACEHOLDER
    path: str = PLACEHOLDER


@dataclass
class DoctorReport:
    platform: str
    ignite: str
    python: str
    node: ToolInfo
    npm: ToolInfo
    yo: ToolInfo
    react_native: str
    in_project: bool


def _probe_tool(tool: str) -> ToolInfo:
    path = which(tool)
    if not path:
        return ToolInfo()
    return ToolInfo(version=tool_version(path) or PLACEHOLDER, path=path)


def _platform_string() -> str:
    try:
        return f"{platform.system()} {platform.release()}".strip() or PLACEHOLDER
    except Exception:
        return PLACEHOLDER


def project_react_native_version(cwd: Path) -> str:
    """Return the ``version`` recorded in ``node_modules/react-native/package.json``."""
    pkg = cwd / "node_modules" / "react-native" / "package.json"
    try:
        data = json.loads(pkg.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        return PLACEHOLDER
    version = data.get("version") if isinstance(data, dict) else None
    return version if isinstance(version, str) and version else PLACEHOLDER


def gather_report(cwd: Path) -> DoctorReport:
    version, revision = get_version_info()
    return DoctorReport(
        platform=_platform_string(),
        ignite=format_version_string(version, revision),
        python=platform.python_version(),
        node=_probe_tool(node_command()),
        npm=_probe_tool(npm_command()),
        yo=_probe_tool(yo_command()),
        react_native=project_react_native_version(cwd),
        in_project=is_ignite_dir(cwd),
    )
