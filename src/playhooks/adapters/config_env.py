"""Env configuration adapter producing a structured ShellEventsConfig."""

from __future__ import annotations

from ..config import Config, config as env_config
from ..core.config_model import COMMAND_FIELDS, ShellEventsConfig


def load_shell_events_config(settings: Config | None = None) -> ShellEventsConfig:
    settings = settings if settings is not None else env_config
    builder = (
        ShellEventsConfig.Builder()
        .set_enabled(settings.ENABLED)
        .set_execute_with_bash(settings.EXECUTE_WITH_BASH)
    )
    for field_name in COMMAND_FIELDS:
        setter = getattr(builder, f"set_{field_name}")
        setter(getattr(settings, field_name.upper()))
    return builder.build()
