# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Plugin installation and the ``initialize`` contract.

A plugin is an npm package named ``<prefix><name>`` (``ignite-<name>`` by
default). After installation its ``initialize(currentConfig)`` export is
called through ``node``; the current ``.ignite`` mapping is sent as JSON on
stdin and the return value comes back as JSON on stdout after a marker, so
anything the plugin logs itself does not confuse the parser.
"""

import json
import subprocess
from pathlib import Path
from typing import Any

from ._util.logging_utils import _log_debug
from .core.config import node_command, plugin_prefix
from .errors import PluginError, ToolError

RESULT_MARKER = "__IGNITE_PLUGIN_RESULT__"

_INITIALIZE_SCRIPT = r"""
const target = process.argv[1];
let input = '';
process.stdin.setEncoding('utf8');
process.stdin.on('data', (chunk) => { input += chunk; });
process.stdin.on('end', () => {
  const mod = require(target);
  const init = mod && (mod.initialize || (mod.default && mod.default.initialize));
  if (typeof init !== 'function') { return; }
  Promise.resolve(init(JSON.parse(input || '{}'))).then((out) => {
    if (out !== undefined) {
      process.stdout.write('\n__IGNITE_PLUGIN_RESULT__' + JSON.stringify(out) + '\n');
    }
  }).catch((err) => {
    console.error((err && err.stack) || String(err));
    process.exit(1);
  });
});
"""


def plugin_module_name(plugin: str) -> str:
    """Return the npm module name for *plugin* (``foo`` -> ``ignite-foo``)."""
    return f"{plugin_prefix()}{plugin}"


def _extract_result(stdout: str) -> tuple[bool, Any]:
    """Return ``(found, value)`` for the last marker line in *stdout*."""
    for line in reversed((stdout or "").splitlines()):
        if line.startswith(RESULT_MARKER):
            payload = line[len(RESULT_MARKER):]
            try:
                return True, json.loads(payload)
            except json.JSONDecodeError as e:
                raise PluginError(f"Plugin initialize returned invalid JSON: {e}")
    return False, None


def initialize_plugin(module: str, cwd: Path, config: dict[str, Any]) -> dict[str, Any] | None:
    """Call ``initialize(config)`` on the installed *module*.

    Returns the new configuration mapping, or None when the plugin returned
    nothing (``undefined``/``null``) or exports no ``initialize``.

    Raises:
        PluginError: if the hook throws or returns something other than an object.
        ToolError: if ``node`` cannot be started.
    """
    module_path = cwd / "node_modules" / module
    node = node_command()
    cmd = [node, "-e", _INITIALIZE_SCRIPT, str(module_path)]
    _log_debug(f"plugin: initialize {module} via {node}")
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd),
            input=json.dumps(config),
            capture_output=True,
            text=True,
            check=False,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise ToolError(f"Could not run '{node}': {e}")

    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"exit {result.returncode}"
        raise PluginError(f"Plugin '{module}' initialize failed: {detail}")

    found, value = _extract_result(result.stdout)
    if not found or value is None:
        return None
    if not isinstance(value, dict):
        raise PluginError(
            f"Plugin '{module}' initialize returned {type(value).__name__}, expected an object"
        )
    return value
