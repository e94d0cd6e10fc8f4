"""Project commands: new, update."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...lib.core.config import generator_namespace, generator_package
from ...lib.core.project_model import ensure_new_project_target, validate_project_name
from ...lib.tools import (
    ensure_cli_package,
    ensure_yo,
    global_package_outdated,
    npm_install_global,
    run_inherited,
)
from ._completers import working_dir


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register project subcommands (new, update)."""
    p_new = subparsers.add_parser(
        "new",
        aliases=["n"],
        help="Create a new React Native project with the Ignite generator",
    )
    p_new.set_defaults(cmd="new")
    p_new.add_argument("project", help="Project name (letters and digits only)")
    p_new.add_argument("--repo", help="Git repository URL of the project template")
    p_new.add_argument("--branch", help="Branch of the template repository to use")
    # Forwarded untouched: a bare --latest becomes "true", anything else is
    # passed through as typed. The value is optional, so a following word is
    # always taken as the value.
    p_new.add_argument(
        "--latest",
        nargs="?",
        const="true",
        default=None,
        metavar="VALUE",
        help=(
            "Ask the generator for the latest template (value forwarded as-is). "
            "Put it after the project name: 'ignite new MyApp --latest'"
        ),
    )

    p_update = subparsers.add_parser(
        "update",
        help="Update the globally installed Ignite generator",
    )
    p_update.set_defaults(cmd="update")


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle new and update. Returns the exit status if handled."""
    if args.cmd == "new":
        return cmd_new(
            working_dir(args),
            args.project,
            repo=args.repo,
            branch=args.branch,
            latest=args.latest,
        )
    if args.cmd == "update":
        return cmd_update()
    return None


def new_project_args(
    project: str,
    repo: str | None = None,
    branch: str | None = None,
    latest: str | None = None,
) -> list[str]:
    """Return generator arguments: the project name, then only the flags supplied."""
    out = [project]
    if repo is not None:
        out += ["--repo", repo]
    if branch is not None:
        out += ["--branch", branch]
    if latest is not None:
        out += ["--latest", latest]
    return out


def cmd_new(
    cwd: Path,
    project: str,
    repo: str | None = None,
    branch: str | None = None,
    latest: str | None = None,
) -> int:
    """Validate, prepare the toolchain, then hand over to the project generator."""
    validate_project_name(project)
    ensure_new_project_target(cwd, project)

    yo = ensure_yo()
    ensure_cli_package()

    print(f"Creating Ignite project {project} in {cwd / project}")
    cmd = [yo, generator_namespace(), *new_project_args(project, repo, branch, latest)]
    rc = run_inherited(cmd, cwd=cwd)
    if rc != 0:
        print(f"Project generator exited with status {rc}")
    return rc


def cmd_update() -> int:
    """Reinstall the global generator package when npm reports it outdated."""
    ensure_yo()
    package = generator_package()
    outdated = global_package_outdated(package)
    if not outdated:
        print(f"{package} is already up to date")
        return 0

    current = outdated.get("current") or "not installed"
    latest = outdated.get("latest") or "latest"
    print(f"Updating {package} ({current} -> {latest})...")
    npm_install_global(package)
    print(f"{package} updated")
    return 0
