# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Per-project ``.ignite`` configuration.

The file maps generator types to generator module names::

    {"generators": {"component": "generator-ignite-component"}}

Loading never raises: a missing or malformed file yields an empty mapping
together with a status and a warning the caller may print.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

LOCAL_CONFIG_NAME = ".ignite"

STATUS_OK = "ok"
STATUS_MISSING = "missing"
STATUS_MALFORMED = "malformed"


@dataclass
class LocalConfigResult:
    """Outcome of reading ``.ignite``."""

    path: Path
    status: str
    data: dict[str, Any] = field(default_factory=dict)
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def generators(self) -> dict[str, str]:
        """Return the ``generators`` section with non-string entries dropped."""
        section = self.data.get("generators", {})
        if not isinstance(section, dict):
            return {}
        return {
            str(k): v.strip()
            for k, v in section.items()
            if isinstance(v, str) and v.strip()
        }


def local_config_path(cwd: Path) -> Path:
    return cwd / LOCAL_CONFIG_NAME


def load_local_config(cwd: Path) -> LocalConfigResult:
    """Parse ``cwd/.ignite`` or fall back to an empty mapping.

    JSON is a subset of YAML for the shapes written here, so a single
    ``yaml.safe_load`` reads both files written by ``save_local_config`` and
    hand-edited YAML.
    """
    path = local_config_path(cwd)
    if not path.is_file():
        return LocalConfigResult(
            path=path,
            status=STATUS_MISSING,
            warning=f"No {LOCAL_CONFIG_NAME} file found in {cwd}, using an empty configuration",
        )
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        return LocalConfigResult(
            path=path,
            status=STATUS_MALFORMED,
            warning=f"Could not parse {path}: {e}; using an empty configuration",
        )
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return LocalConfigResult(
            path=path,
            status=STATUS_MALFORMED,
            warning=f"{path} does not contain a mapping; using an empty configuration",
        )
    return LocalConfigResult(path=path, status=STATUS_OK, data=data)


def save_local_config(cwd: Path, data: dict[str, Any]) -> Path:
    """Overwrite ``cwd/.ignite`` with *data* serialized as JSON."""
    if not isinstance(data, dict):
        raise TypeError(f"local configuration must be a mapping, got {type(data).__name__}")
    path = local_config_path(cwd)
    path.write_text(json.dumps(data, indent=2, sort_keys=False) + "\n", encoding="utf-8")
    return path
