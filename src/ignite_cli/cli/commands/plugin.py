"""Plugin command: add."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...lib._util.ansi import warn
from ...lib.core.local_config import load_local_config, save_local_config
from ...lib.errors import PluginNotFoundError
from ...lib.plugins import initialize_plugin, plugin_module_name
from ...lib.registry import RegistryClient
from ...lib.tools import ensure_yo, npm_install_dependency
from ._completers import working_dir


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the add subcommand."""
    p_add = subparsers.add_parser(
        "add",
        aliases=["a"],
        help="Install an Ignite plugin (npm module ignite-<plugin>) into the project",
    )
    p_add.set_defaults(cmd="add")
    p_add.add_argument(
        "plugin",
        help="Plugin name without the 'ignite-' prefix (the prefix is always added)",
    )


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle add. Returns the exit status if handled."""
    if args.cmd == "add":
        return cmd_add(working_dir(args), args.plugin)
    return None


def cmd_add(cwd: Path, plugin: str, client: RegistryClient | None = None) -> int:
    """Check the registry, install the plugin, then let it update ``.ignite``.

    The registry check happens before anything is installed; an unknown
    plugin leaves the project untouched.
    """
    ensure_yo()
    module = plugin_module_name(plugin)

    with (client or RegistryClient()) as registry:
        exists = registry.package_exists(module)
    if not exists:
        raise PluginNotFoundError(
            f"There is no Ignite plugin called '{plugin}' "
            f"(expected an npm module named '{module}')"
        )

    print(f"Installing {module}...")
    npm_install_dependency(module, cwd)

    current = load_local_config(cwd)
    if current.warning:
        warn(current.warning)
    new_config = initialize_plugin(module, cwd, current.data)
    if new_config is None:
        print(f"Added {module}")
        return 0

    path = save_local_config(cwd, new_config)
    print(f"Added {module} and updated {path}")
    return 0
