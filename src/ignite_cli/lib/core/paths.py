# SPDX-FileCopyrightText: 2026 ignite-cli contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Where ignite keeps its global config and its debug log.

Both locations can be redirected with an environment variable, which the
test suite relies on to stay away from the real home directory.
"""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "ignite"
CONFIG_DIR_ENV = "IGNITE_CONFIG_DIR"
STATE_DIR_ENV = "IGNITE_STATE_DIR"


def _from_env(var: str) -> Path | None:
    value = os.getenv(var)
    return Path(value).expanduser() if value else None


def config_root() -> Path:
    """``$IGNITE_CONFIG_DIR``, else the platform config dir (``~/.config/ignite`` on Linux)."""
    return _from_env(CONFIG_DIR_ENV) or Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """``$IGNITE_STATE_DIR``, else the platform data dir (``~/.local/share/ignite`` on Linux)."""
    return _from_env(STATE_DIR_ENV) or Path(user_data_dir(APP_NAME))
