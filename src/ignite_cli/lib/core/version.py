# SPDX-FileCopyrightText: 2026 ignite-cli contributors
# SPDX-License-Identifier: Apache-2.0

"""Version string shown by ``ignite --version`` and ``ignite doctor``.

Installs straight from git (``pip install git+https://...@branch``) also
report the branch or commit they were built from, taken from the
``direct_url.json`` file pip writes for such installs (PEP 610).
"""

import json
from importlib import metadata

DIST_NAME = "ignite-cli"
SHORT_COMMIT = 12


def get_version_info() -> tuple[str, str | None]:
    """Return ``(version, revision)``; revision is None unless installed from VCS."""
    from ignite_cli import __version__

    return __version__, _get_pep610_revision()


def _get_pep610_revision(dist_name: str = DIST_NAME) -> str | None:
    try:
        raw = metadata.distribution(dist_name).read_text("direct_url.json")
    except (metadata.PackageNotFoundError, UnicodeDecodeError, OSError):
        return None
    try:
        vcs_info = json.loads(raw or "{}").get("vcs_info")
    except (json.JSONDecodeError, AttributeError):
        return None
    if not isinstance(vcs_info, dict):
        return None

    requested = vcs_info.get("requested_revision")
    if isinstance(requested, str) and requested.strip():
        return requested.strip()
    commit = vcs_info.get("commit_id")
    if isinstance(commit, str) and commit.strip():
        return commit.strip()[:SHORT_COMMIT]
    return None


def format_version_string(version: str, revision: str | None) -> str:
    """``"0.1.0"`` or, for VCS installs, ``"0.1.0 [main]"``."""
    return f"{version} [{revision}]" if revision else version
