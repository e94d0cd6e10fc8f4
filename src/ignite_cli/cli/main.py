#!/usr/bin/env python3

import argparse
import sys

import argcomplete

from ..lib.core.version import format_version_string, get_version_info
from ..lib.errors import EXIT_INTERRUPTED, IgniteError
from ..ui_utils.terminal import red as _red
from ..ui_utils.terminal import supports_color as _supports_color
from .commands import generate, info, plugin, project

COMMAND_MODULES = (project, generate, plugin, info)


def build_parser() -> argparse.ArgumentParser:
    version, revision = get_version_info()

    parser = argparse.ArgumentParser(
        prog="ignite",
        description="ignite – scaffold and manage React Native projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Quick start:\n"
            "  1. Create:    ignite new MyApp\n"
            "  2. Enter:     cd MyApp\n"
            "  3. Generate:  ignite generate component Button\n"
            "  4. Extend:    ignite add vector-icons\n"
            "\n"
            "Troubleshooting:  ignite doctor\n"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ignite {format_version_string(version, revision)}",
    )
    parser.add_argument(
        "-C",
        "--directory",
        metavar="DIR",
        default=None,
        help="Run as if ignite was started in DIR (default: current directory)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for module in COMMAND_MODULES:
        module.register(sub)
    return parser


def _dispatch(args: argparse.Namespace) -> int:
    for module in COMMAND_MODULES:
        rc = module.dispatch(args)
        if rc is not None:
            return rc
    raise IgniteError(f"Unknown command: {args.cmd}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    try:
        rc = _dispatch(args)
    except IgniteError as e:
        print(f"{_red('Error:', _supports_color(sys.stderr))} {e.message}", file=sys.stderr)
        raise SystemExit(e.exit_code)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        raise SystemExit(EXIT_INTERRUPTED)

    if rc:
        raise SystemExit(rc)


if __name__ == "__main__":
    main()
