"""Debug log for spawned commands and registry lookups."""

LOG_FILE_NAME = "ignite.log"


def _log_debug(message: str) -> None:
    """Append ``[timestamp] message`` to ``state_root()/ignite.log``.

    Logging must never change the outcome of a command, so every failure
    here (unwritable state dir, full disk, bad path) is ignored.
    """
    try:
        from datetime import datetime

        from ..core.paths import state_root

        target = state_root() / LOG_FILE_NAME
        target.parent.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().isoformat(sep=" ", timespec="seconds")
        with target.open("a", encoding="utf-8") as fh:
            fh.write(f"[{stamp}] {message}\n")
    except Exception:
        pass
