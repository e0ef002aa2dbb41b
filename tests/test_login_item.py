import plistlib

from airplane.config import LoginItemSettings
from airplane.services.login_item import LoginItemManager


def _manager(tmp_path):
    settings = LoginItemSettings(label="com.example.airplane", launch_agents_dir=tmp_path / "LaunchAgents")
    return LoginItemManager(settings, program_arguments=["/usr/bin/python3", "-m", "airplane.main"])


def test_disabled_by_default(tmp_path):
    assert _manager(tmp_path).is_enabled() is False


def test_enable_writes_launch_agent(tmp_path):
    manager = _manager(tmp_path)
    assert manager.set_enabled(True) is True

    with manager.plist_path.open("rb") as fh:
        payload = plistlib.load(fh)
    assert manager.plist_path.name == "com.example.airplane.plist"
    assert payload["Label"] == "com.example.airplane"
    assert payload["ProgramArguments"] == ["/usr/bin/python3", "-m", "airplane.main"]
    assert payload["RunAtLoad"] is True


def test_disable_removes_launch_agent(tmp_path):
    manager = _manager(tmp_path)
    manager.set_enabled(True)
    assert manager.set_enabled(False) is False
    assert not manager.plist_path.exists()
    assert manager.set_enabled(False) is False


def test_unwritable_directory_reports_state(tmp_path):
    blocker = tmp_path / "LaunchAgents"
    blocker.write_text("not a directory")
    manager = _manager(tmp_path)
    assert manager.set_enabled(True) is False
