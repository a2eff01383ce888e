"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from .models import EventKind


@dataclass(frozen=True)
class ShellEventsConfig:
    enabled: bool = False
    execute_with_bash: bool = False
    on_context_changed: str = ""
    on_track_changed: str = ""
    on_playback_ended: str = ""
    on_playback_paused: str = ""
    on_playback_resumed: str = ""
    on_track_seeked: str = ""
    on_metadata_available: str = ""
    on_volume_changed: str = ""
    on_inactive_session: str = ""
    on_panic_state: str = ""
    on_connection_dropped: str = ""
    on_connection_established: str = ""

    def command_for(self, kind: EventKind) -> str:
        """Return the command configured for ``kind`` ("" when there is none)."""
        if kind.config_field is None:
            return ""
        return getattr(self, kind.config_field)

    @classmethod
    def builder(cls) -> "ShellEventsConfig.Builder":
        return cls.Builder()

    class Builder:
        """Collects settings and produces an immutable ShellEventsConfig.

        Every setter returns the builder so calls can be chained:

            conf = (
                ShellEventsConfig.Builder()
                .set_enabled(True)
                .set_on_volume_changed("notify-send Volume")
                .build()
            )
        """

        def __init__(self):
            self._config = ShellEventsConfig()

        def _set(self, **changes) -> "ShellEventsConfig.Builder":
            self._config = replace(self._config, **changes)
            return self

        def set_enabled(self, enabled: bool) -> "ShellEventsConfig.Builder":
            return self._set(enabled=bool(enabled))

        def set_execute_with_bash(self, execute_with_bash: bool) -> "ShellEventsConfig.Builder":
            return self._set(execute_with_bash=bool(execute_with_bash))

        def set_command(self, kind: EventKind, command: str | None) -> "ShellEventsConfig.Builder":
            if kind.config_field is None:
                raise ValueError(f"No command can be configured for {kind.name}")
            return self._set(**{kind.config_field: command or ""})

        def set_on_context_changed(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.CONTEXT_CHANGED, command)

        def set_on_track_changed(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.TRACK_CHANGED, command)

        def set_on_playback_ended(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.PLAYBACK_ENDED, command)

        def set_on_playback_paused(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.PLAYBACK_PAUSED, command)

        def set_on_playback_resumed(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.PLAYBACK_RESUMED, command)

        def set_on_track_seeked(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.TRACK_SEEKED, command)

        def set_on_metadata_available(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.METADATA_AVAILABLE, command)

        def set_on_volume_changed(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.VOLUME_CHANGED, command)

        def set_on_inactive_session(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.INACTIVE_SESSION, command)

        def set_on_panic_state(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.PANIC_STATE, command)

        def set_on_connection_dropped(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.CONNECTION_DROPPED, command)

        def set_on_connection_established(self, command: str) -> "ShellEventsConfig.Builder":
            return self.set_command(EventKind.CONNECTION_ESTABLISHED, command)

        def build(self) -> "ShellEventsConfig":
            return self._config


COMMAND_FIELDS: tuple[str, ...] = tuple(
    f.name for f in fields(ShellEventsConfig) if f.name.startswith("on_")
)
