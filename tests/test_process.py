import os

import pytest

from airplane.utils.process import AlreadyRunningError, SingleInstance


def test_lock_is_exclusive(tmp_path):
    lockfile = tmp_path / "run" / "airplane.lock"
    first = SingleInstance(lockfile)
    second = SingleInstance(lockfile)

    assert first.acquire() is True
    assert second.acquire() is False
    first.release()
    assert second.acquire() is True
    second.release()


def test_owner_pid_is_recorded(tmp_path):
    lockfile = tmp_path / "airplane.lock"
    lockfile.write_text("999999")
    guard = SingleInstance(lockfile)
    assert guard.acquire() is True
    assert guard.owner_pid() == os.getpid()
    guard.release()


def test_second_instance_names_the_owner(tmp_path):
    lockfile = tmp_path / "airplane.lock"
    with SingleInstance(lockfile) as held:
        assert held.held
        with pytest.raises(AlreadyRunningError) as excinfo:
            with SingleInstance(lockfile):
                pass
    assert not held.held
    assert excinfo.value.pid == os.getpid()
    assert f"pid {os.getpid()}" in str(excinfo.value)
    assert "already running" in str(excinfo.value)


def test_owner_pid_without_lockfile(tmp_path):
    assert SingleInstance(tmp_path / "missing.lock").owner_pid() is None
