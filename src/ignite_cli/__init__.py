# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""ignite: scaffold and extend Ignite React Native projects.

Layout:
- ignite_cli.cli: argparse entry point and one module per command group
- ignite_cli.lib: npm/yo wrappers, registry client, generators, plugins, doctor
- ignite_cli.lib.core: paths, global config, ``.ignite`` file, project rules, version
- ignite_cli.ui_utils: terminal styling
"""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["cli", "lib", "ui_utils"]

try:
    __version__ = version("ignite-cli")
except PackageNotFoundError:
    # Source checkout that was never installed: read pyproject.toml instead.
    import tomllib
    from pathlib import Path

    _pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        with _pyproject.open("rb") as _fh:
            __version__ = tomllib.load(_fh)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
