# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Error types raised by the library layer.

Each error carries the process exit status the CLI should terminate with.
Only ``ignite_cli.cli.main.main`` turns these into ``SystemExit``.
"""

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INVALID_NAME = 3
EXIT_DIRECTORY_EXISTS = 4
EXIT_WRONG_DIRECTORY = 5
EXIT_TOOL_FAILED = 6
EXIT_UNKNOWN_GENERATOR = 7
EXIT_PLUGIN_NOT_FOUND = 8
EXIT_REGISTRY_UNAVAILABLE = 9
EXIT_PLUGIN_FAILED = 10
EXIT_INTERRUPTED = 130


class IgniteError(Exception):
    """Base class for all expected ignite failures."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidProjectNameError(IgniteError):
    exit_code = EXIT_INVALID_NAME


class DirectoryExistsError(IgniteError):
    exit_code = EXIT_DIRECTORY_EXISTS


class WrongDirectoryError(IgniteError):
    """Raised when the working directory is (or is not) an Ignite project."""

    exit_code = EXIT_WRONG_DIRECTORY


class ToolError(IgniteError):
    """An external tool (npm, yo, node) could not be installed or run."""

    exit_code = EXIT_TOOL_FAILED


class UnknownGeneratorError(IgniteError):
    """No handler is registered for the requested generator key."""

    exit_code = EXIT_UNKNOWN_GENERATOR

    def __init__(self, key: str, known: list[str] | None = None) -> None:
        known = sorted(known or [])
        hint = f" (known: {', '.join(known)})" if known else " (no generators configured in .ignite)"
        super().__init__(f"Unknown generator '{key}'{hint}")
        self.key = key
        self.known = known


class GeneratorNotInstalledError(IgniteError):
    """A configured generator module is missing from node_modules."""

    exit_code = EXIT_UNKNOWN_GENERATOR


class PluginNotFoundError(IgniteError):
    exit_code = EXIT_PLUGIN_NOT_FOUND


class RegistryError(IgniteError):
    exit_code = EXIT_REGISTRY_UNAVAILABLE


class PluginError(IgniteError):
    """The plugin's initialize hook failed or returned something unusable."""

    exit_code = EXIT_PLUGIN_FAILED
