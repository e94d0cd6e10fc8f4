"""Generator commands: generate, import."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...lib._util.ansi import warn
from ...lib.core.config import generator_namespace
from ...lib.core.local_config import load_local_config
from ...lib.core.project_model import ensure_ignite_dir
from ...lib.generators import GeneratorRegistry, generator_key
from ...lib.tools import ensure_yo, run_inherited
from ._completers import complete_generator_types, set_completer, working_dir


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register generator subcommands (generate, import)."""
    p_gen = subparsers.add_parser(
        "generate",
        aliases=["g"],
        help="Run a project generator configured in .ignite (e.g. component, screen)",
    )
    p_gen.set_defaults(cmd="generate")
    set_completer(
        p_gen.add_argument("type", help="Generator type as listed under 'generators' in .ignite"),
        complete_generator_types,
    )
    p_gen.add_argument("name", help="Name passed to the generator")

    p_import = subparsers.add_parser(
        "import",
        aliases=["i"],
        help="Run an import sub-generator of the Ignite project generator",
    )
    p_import.set_defaults(cmd="import")
    p_import.add_argument("type", help="Import type (runs 'yo <generator>:<type>')")


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle generate and import. Returns the exit status if handled."""
    if args.cmd == "generate":
        return cmd_generate(working_dir(args), args.type, args.name)
    if args.cmd == "import":
        return cmd_import(working_dir(args), args.type)
    return None


def load_generator_registry(cwd: Path, yo: str) -> GeneratorRegistry:
    """Read ``.ignite`` in *cwd* and build the generator registry from it."""
    result = load_local_config(cwd)
    if result.warning:
        warn(result.warning)
    return GeneratorRegistry.from_config(result.generators, cwd, yo)


def cmd_generate(
    cwd: Path,
    gen_type: str,
    name: str,
    registry: GeneratorRegistry | None = None,
) -> int:
    """Run the generator registered for *gen_type* with *name* as its only argument."""
    ensure_ignite_dir(cwd)
    yo = ensure_yo()
    if registry is None:
        registry = load_generator_registry(cwd, yo)
    return registry.run(generator_key(gen_type), [name])


def cmd_import(cwd: Path, import_type: str) -> int:
    yo = ensure_yo()
    return run_inherited([yo, f"{generator_namespace()}:{import_type}"], cwd=cwd)
