from playhooks.adapters.config_env import load_shell_events_config
from playhooks.config import Config


def test_empty_environment_gives_defaults():
    config = load_shell_events_config(Config(environ={}))
    assert config.enabled is False
    assert config.execute_with_bash is False
    assert config.on_track_changed == ""


def test_environment_is_mapped_to_config():
    settings = Config(
        environ={
            "PLAYHOOKS_ENABLED": "True",
            "PLAYHOOKS_EXECUTE_WITH_BASH": "1",
            "PLAYHOOKS_ON_TRACK_CHANGED": "notify-send Track",
            "PLAYHOOKS_ON_CONNECTION_DROPPED": "logger dropped",
        }
    )
    config = load_shell_events_config(settings)
    assert config.enabled is True
    assert config.execute_with_bash is True
    assert config.on_track_changed == "notify-send Track"
    assert config.on_connection_dropped == "logger dropped"
    assert config.on_volume_changed == ""


def test_unrecognised_flag_value_is_false():
    settings = Config(environ={"PLAYHOOKS_ENABLED": "enabled"})
    assert load_shell_events_config(settings).enabled is False


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("PLAYHOOKS_ENABLED", "yes")
    monkeypatch.setenv("PLAYHOOKS_ON_PANIC_STATE", "panic-hook")
    config = load_shell_events_config(Config())
    assert config.enabled is True
    assert config.on_panic_state == "panic-hook"


def test_given_settings_are_used_even_when_falsy(monkeypatch):
    class _Settings(Config):
        def __len__(self):
            return 0

    monkeypatch.setattr(
        "playhooks.adapters.config_env.env_config", Config(environ={})
    )
    settings = _Settings(environ={"PLAYHOOKS_ENABLED": "true"})
    assert not settings
    assert load_shell_events_config(settings).enabled is True
