import logging
import os
import sys

import pytest

from playhooks.adapters.process_launcher import SubprocessLauncher
from playhooks.core.config_model import ShellEventsConfig
from playhooks.core.dispatcher import ShellEvents
from playhooks.core.models import TrackId, TrackMetadata

_CHECK_ENV = (
    "import os, sys; "
    "sys.exit(0 if os.environ.get('VOLUME') == '73' "
    "and os.environ.get('PLAYHOOKS_PARENT') == 'kept' else 5)"
)


def test_launch_merges_environment(monkeypatch):
    monkeypatch.setenv("PLAYHOOKS_PARENT", "kept")
    process = SubprocessLauncher().launch([sys.executable, "-c", _CHECK_ENV], {"VOLUME": "73"})
    assert process.wait() == 0


def test_launch_with_explicit_base_env():
    launcher = SubprocessLauncher(base_env={**os.environ, "PLAYHOOKS_PARENT": "kept"})
    process = launcher.launch([sys.executable, "-c", _CHECK_ENV], {"VOLUME": "73"})
    assert process.wait() == 0


def test_launch_reports_exit_code():
    process = SubprocessLauncher().launch([sys.executable, "-c", "raise SystemExit(7)"], {})
    assert process.wait() == 7


def test_launch_missing_executable_raises():
    with pytest.raises(FileNotFoundError):
        SubprocessLauncher().launch(["/nonexistent/playhooks-hook"], {})


def _volume_hook(command, **flags):
    builder = ShellEventsConfig.Builder().set_enabled(True).set_on_volume_changed(command)
    if flags.get("bash"):
        builder.set_execute_with_bash(True)
    return ShellEvents(builder.build())


def test_missing_executable_is_logged_not_raised(caplog):
    events = _volume_hook("/nonexistent/playhooks-hook --flag")
    with caplog.at_level(logging.DEBUG, logger="playhooks"):
        events.on_volume_changed(0.5)
    assert "Failed executing command: /nonexistent/playhooks-hook --flag" in caplog.text


def test_real_process_exit_code_is_logged(tmp_path, caplog):
    script = tmp_path / "hook.py"
    script.write_text("import os, sys\nsys.exit(int(os.environ['VOLUME']) // 10)\n")
    events = _volume_hook(f"{sys.executable} {script}")
    with caplog.at_level(logging.DEBUG, logger="playhooks"):
        events.on_volume_changed(0.73)
    assert f"{script} -> 7" in caplog.text


@pytest.mark.skipif(not os.path.exists("/bin/bash"), reason="requires /bin/bash")
def test_bash_mode_sees_environment(tmp_path):
    out = tmp_path / "volume.txt"
    events = _volume_hook(f'echo "$VOLUME" > {out}', bash=True)
    events.on_volume_changed(1.0)
    assert out.read_text().strip() == "100"


def test_null_byte_in_command_is_logged_not_raised(caplog):
    events = _volume_hook("echo\x00 hi")
    with caplog.at_level(logging.DEBUG, logger="playhooks"):
        events.on_volume_changed(0.5)
    assert "Failed executing command" in caplog.text


def test_null_byte_in_environment_is_logged_not_raised(caplog):
    config = (
        ShellEventsConfig.Builder()
        .set_enabled(True)
        .set_on_metadata_available(f"{sys.executable} -c pass")
        .build()
    )
    bad = TrackMetadata(id=TrackId("spotify:track:x"), name="bad\x00name")
    with caplog.at_level(logging.DEBUG, logger="playhooks"):
        ShellEvents(config).on_metadata_available(bad)
    assert "Failed executing command" in caplog.text
