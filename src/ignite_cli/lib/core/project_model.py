"""Project name rules and Ignite-directory detection.

Pure checks with no subprocess I/O. Filesystem access is limited to
existence tests under an explicit working directory.
"""

import re
from pathlib import Path

from ..errors import DirectoryExistsError, InvalidProjectNameError, WrongDirectoryError

PROJECT_NAME_RE = re.compile(r"^[a-z0-9]+$", re.IGNORECASE)
RESERVED_PROJECT_NAMES = frozenset({"React"})
APP_DIR_NAME = "App"


def validate_project_name(name: str) -> None:
    """Ensure *name* is usable as a React Native project name.

    Two independent passes: an alphanumeric pattern (case-insensitive) and
    a case-sensitive reserved-word check, so ``react`` passes while ``React``
    does not.
    """
    if not PROJECT_NAME_RE.fullmatch(name or ""):
        raise InvalidProjectNameError(
            f"Invalid project name '{name}': use letters and digits only (e.g. MyApp)"
        )
    if name in RESERVED_PROJECT_NAMES:
        raise InvalidProjectNameError(
            f"Project name '{name}' is reserved by React Native, please choose another name"
        )


def is_ignite_dir(cwd: Path) -> bool:
    """Return True if *cwd* looks like a generated project (has an ``App`` dir)."""
    return (cwd / APP_DIR_NAME).is_dir()


def ensure_new_project_target(cwd: Path, name: str) -> Path:
    """Check that a new project called *name* can be created under *cwd*.

    Returns the target directory. The check is not atomic with the later
    spawn; the generator itself refuses to overwrite an existing directory.
    """
    target = cwd / name
    if target.exists():
        raise DirectoryExistsError(f"Directory {name} already exists")
    if is_ignite_dir(cwd):
        raise WrongDirectoryError(
            "You're already in an Ignite project directory; "
            "run 'ignite new' from the folder that should contain the project"
        )
    return target


def ensure_ignite_dir(cwd: Path) -> None:
    """Raise unless *cwd* is the root of an Ignite project."""
    if not is_ignite_dir(cwd):
        raise WrongDirectoryError(
            "This is not an Ignite project directory; "
            "run this command from your project root (the folder containing App/)"
        )
