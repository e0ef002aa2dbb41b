from airplane.config import AirplaneSettings, AppPaths, LoginItemSettings, PollSettings
from airplane.core.app import build_context
from airplane.core.radio import ShellRadioController


def _settings(tmp_path):
    return AirplaneSettings(
        paths=AppPaths(base_dir=tmp_path),
        poll=PollSettings(interval_ms=1000),
        login_item=LoginItemSettings(launch_agents_dir=tmp_path / "LaunchAgents"),
    )


def test_build_context_wires_engine(tmp_path, radios, timer):
    quits = []
    ctx = build_context(_settings(tmp_path), timer, quit_handler=lambda: quits.append(1), radios=radios)

    assert ctx.radios is radios
    assert ctx.engine.radios is radios
    ctx.engine.toggle()
    assert timer.interval_ms == 1000
    ctx.engine.quit()
    assert quits == [1]
    assert ctx.login_items.is_enabled() is False


def test_build_context_defaults_to_shell_radios(tmp_path, timer):
    ctx = build_context(_settings(tmp_path), timer)
    assert isinstance(ctx.radios, ShellRadioController)
    assert ctx.engine.activated is False
