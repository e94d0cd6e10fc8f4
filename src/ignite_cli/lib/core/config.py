import os
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .._util.ansi import warn
from .paths import config_root as _config_root_base

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"
DEFAULT_REGISTRY_TIMEOUT = 10.0

_warned_paths: set[str] = set()

# ---------- Config file discovery ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If IGNITE_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) IGNITE_CONFIG_DIR or the platform user config dir, /config.yml
        2) sys.prefix/etc/ignite/config.yml
        3) /etc/ignite/config.yml
    """
    env_file = os.environ.get("IGNITE_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = _config_root_base() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "ignite" / "config.yml"
    etc_cfg = Path("/etc/ignite/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    The explicit IGNITE_CONFIG_FILE override is returned even if missing to
    make intent visible to the user. Otherwise the first existing candidate
    wins; if none exist, the last candidate (/etc/ignite/config.yml) is
    returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    """Parse the global config; an unreadable or broken file counts as empty.

    The warning for a given file is printed once per process, since every
    config getter reloads the file.
    """
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        if str(cfg_path) not in _warned_paths:
            _warned_paths.add(str(cfg_path))
            warn(f"Could not parse {cfg_path}: {e}; using built-in defaults")
        return {}
    return data if isinstance(data, dict) else {}


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``tools: "oops"``),
    returns ``{}`` to avoid ``AttributeError`` in callers that expect ``.get()``.
    """
    cfg = load_global_config()
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


def _section_str(section: str, key: str, default: str) -> str:
    value = get_global_section(section).get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


# ---------- Tools ----------


def yo_command() -> str:
    """Executable used to run yeoman generators (``tools.yo``, default ``yo``)."""
    return _section_str("tools", "yo", "yo")


def npm_command() -> str:
    """Package manager executable (``tools.npm``, default ``npm``)."""
    return _section_str("tools", "npm", "npm")


def node_command() -> str:
    """JavaScript runtime executable (``tools.node``, default ``node``)."""
    return _section_str("tools", "node", "node")


# ---------- Generator and CLI packages ----------


def generator_package() -> str:
    """Global npm package providing the project generator."""
    return _section_str("generator", "package", "generator-react-native-ignite")


def generator_namespace() -> str:
    """Yeoman namespace of the project generator (``yo <namespace>``)."""
    return _section_str("generator", "namespace", "react-native-ignite")


def cli_package() -> str:
    """Global React Native command-line package expected next to ignite."""
    return _section_str("cli", "package", "react-native-cli")


def conflicting_cli_package() -> str:
    """Legacy global package that shadows the expected React Native CLI."""
    return _section_str("cli", "conflicting_package", "react-native")


# ---------- Plugins and registry ----------


def plugin_prefix() -> str:
    """Prefix prepended to plugin names to form the npm module name."""
    return _section_str("plugins", "prefix", "ignite-")


def registry_url() -> str:
    """Base URL of the npm registry, without a trailing slash."""
    return _section_str("registry", "url", DEFAULT_REGISTRY_URL).rstrip("/")


def registry_timeout() -> float | None:
    """Registry request timeout in seconds; ``None`` when disabled (0 or null)."""
    section = get_global_section("registry")
    if "timeout" not in section:
        return DEFAULT_REGISTRY_TIMEOUT
    value = section.get("timeout")
    if value in (None, 0, "0"):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return DEFAULT_REGISTRY_TIMEOUT
