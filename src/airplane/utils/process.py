"""Process-wide helpers."""

from __future__ import annotations

import os
from pathlib import Path

import portalocker

from airplane.logging import get_logger


class AlreadyRunningError(RuntimeError):
    """Another airplane process holds the lock file."""

    def __init__(self, lockfile: Path, pid: int | None) -> None:
        self.lockfile = lockfile
        self.pid = pid
        owner = f"pid {pid}" if pid is not None else "another process"
        super().__init__(f"Airplane is already running in the menu bar ({owner})")


class SingleInstance:
    """Keeps a second menu bar icon from fighting over the same radios.

    The lock file holds the owner's pid so the refusal message can name it.
    """

    def __init__(self, lockfile: Path) -> None:
        self.lockfile = lockfile
        self.logger = get_logger("instance")
        self._lock: portalocker.Lock | None = None

    @property
    def held(self) -> bool:
        return self._lock is not None

    def owner_pid(self) -> int | None:
        try:
            text = self.lockfile.read_text().strip()
        except OSError:
            return None
        return int(text) if text.isdigit() else None

    def acquire(self) -> bool:
        self.lockfile.parent.mkdir(parents=True, exist_ok=True)
        # Append mode: opening must not wipe the pid of a running owner.
        lock = portalocker.Lock(str(self.lockfile), mode="a+", timeout=0, fail_when_locked=True)
        try:
            fh = lock.acquire()
        except portalocker.exceptions.LockException:
            self.logger.warning(f"lock {self.lockfile} held by pid {self.owner_pid()}")
            return False
        fh.truncate(0)
        fh.write(str(os.getpid()))
        fh.flush()
        self._lock = lock
        self.logger.debug(f"acquired {self.lockfile}")
        return True

    def release(self) -> None:
        if self._lock:
            self._lock.release()
            self._lock = None
            self.logger.debug(f"released {self.lockfile}")

    def __enter__(self) -> SingleInstance:
        if not self.acquire():
            raise AlreadyRunningError(self.lockfile, self.owner_pid())
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.release()
