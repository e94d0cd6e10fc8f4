"""Informational CLI commands: doctor."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...lib.doctor import DoctorReport, ToolInfo, gather_report
from ...ui_utils.terminal import bold as _bold
from ...ui_utils.terminal import gray as _gray
from ...ui_utils.terminal import supports_color as _supports_color
from ...ui_utils.terminal import yes_no as _yes_no
from ._completers import working_dir


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (doctor)."""
    p_doctor = subparsers.add_parser(
        "doctor",
        help="Show platform, tool versions and project details for bug reports",
    )
    p_doctor.set_defaults(cmd="doctor")


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle doctor. Returns the exit status if handled."""
    if args.cmd == "doctor":
        cmd_doctor(working_dir(args))
        return 0
    return None


def cmd_doctor(cwd: Path) -> None:
    print(format_report(gather_report(cwd), _supports_color()))


def _tool_line(label: str, info: ToolInfo, color_enabled: bool) -> str:
    return f"  {label:<18} {info.version}  {_gray(info.path, color_enabled)}"


def format_report(report: DoctorReport, color_enabled: bool = False) -> str:
    """Render *report* as a fixed-layout text block."""
    lines = [
        _bold("System", color_enabled),
        f"  {'platform':<18} {report.platform}",
        f"  {'ignite':<18} {report.ignite}",
        f"  {'python':<18} {report.python}",
        "",
        _bold("JavaScript", color_enabled),
        _tool_line("node", report.node, color_enabled),
        _tool_line("npm", report.npm, color_enabled),
        _tool_line("yo", report.yo, color_enabled),
        "",
        _bold("Project", color_enabled),
        f"  {'ignite project':<18} {_yes_no(report.in_project, color_enabled)}",
        f"  {'react-native':<18} {report.react_native}",
    ]
    return "\n".join(lines)
