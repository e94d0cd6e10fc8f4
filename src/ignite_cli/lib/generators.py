# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Generator registry.

Generators are looked up by a namespaced key (``ignite:<type>``) in an
explicit registry populated from ``.ignite`` when a command starts. Module
names from the configuration are never imported; each one becomes a
``YeomanGenerator`` handler that spawns ``yo`` for the installed module.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import GeneratorNotInstalledError, UnknownGeneratorError
from .tools import run_inherited

KEY_PREFIX = "ignite"
NODE_MODULES = "node_modules"


def generator_key(gen_type: str) -> str:
    """Return the registry key for a generator type (``component`` -> ``ignite:component``)."""
    return f"{KEY_PREFIX}:{gen_type}"


def yeoman_namespace(module_name: str) -> str:
    """Return the name ``yo`` expects for a generator module.

    ``generator-foo`` -> ``foo``; ``@scope/generator-foo`` -> ``@scope/foo``;
    names without the prefix are used as-is.
    """
    scope, sep, bare = module_name.rpartition("/")
    if bare.startswith("generator-") and len(bare) > len("generator-"):
        bare = bare[len("generator-"):]
    return f"{scope}{sep}{bare}"


class GeneratorHandler(Protocol):
    def run(self, args: list[str]) -> int: ...


@dataclass
class YeomanGenerator:
    """A generator module installed in the project's ``node_modules``."""

    module: str
    cwd: Path
    yo: str = "yo"

    @property
    def module_path(self) -> Path:
        return self.cwd / NODE_MODULES / self.module

    def run(self, args: list[str]) -> int:
        if not self.module_path.is_dir():
            raise GeneratorNotInstalledError(
                f"Generator module '{self.module}' is not installed in {self.cwd / NODE_MODULES} "
                f"(try: npm install --save {self.module})"
            )
        return run_inherited([self.yo, yeoman_namespace(self.module), *args], cwd=self.cwd)


class GeneratorRegistry:
    """Mapping of namespaced generator keys to invocable handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, GeneratorHandler] = {}

    def register(self, key: str, handler: GeneratorHandler) -> None:
        self._handlers[key] = handler

    def get(self, key: str) -> GeneratorHandler:
        try:
            return self._handlers[key]
        except KeyError:
            raise UnknownGeneratorError(key, list(self._handlers)) from None

    def keys(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def run(self, key: str, args: Iterable[str]) -> int:
        return self.get(key).run(list(args))

    @classmethod
    def from_config(cls, generators: Mapping[str, str], cwd: Path, yo: str) -> "GeneratorRegistry":
        """Build a registry with one ``YeomanGenerator`` per configured type."""
        registry = cls()
        for gen_type, module in generators.items():
            registry.register(generator_key(gen_type), YeomanGenerator(module, cwd, yo))
        return registry
