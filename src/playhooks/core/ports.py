"""Core ports (interfaces) for playhooks.

These protocols define the boundaries between the dispatcher and the
outside world: the playback engine and network session that emit events,
the metadata they hand over, and the OS facility that starts processes.
They are intentionally small and capability-oriented.
"""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class PlayableId(Protocol):
    """Identifier of a track or episode."""

    def to_uri(self) -> str:
        """Return the stable URI form of the identifier."""


@runtime_checkable
class Metadata(Protocol):
    """Read-only metadata of the item being played."""

    id: PlayableId
    name: str
    artist: str
    album_name: str
    duration: int | None


@runtime_checkable
class PlaybackEventsListener(Protocol):
    """Callbacks fired by the playback engine."""

    def on_context_changed(self, new_uri: str) -> None:
        """The playback context (album, playlist, ...) changed."""

    def on_track_changed(
        self, track_id: PlayableId, metadata: Metadata | None, user_initiated: bool
    ) -> None:
        """A new track started; metadata may not be loaded yet."""

    def on_playback_ended(self) -> None:
        """Playback reached the end of the context."""

    def on_playback_paused(self, position_ms: int) -> None:
        """Playback paused at ``position_ms``."""

    def on_playback_resumed(self, position_ms: int) -> None:
        """Playback resumed at ``position_ms``."""

    def on_track_seeked(self, position_ms: int) -> None:
        """The current track was seeked to ``position_ms``."""

    def on_metadata_available(self, metadata: Metadata) -> None:
        """Metadata for the current track finished loading."""

    def on_playback_halt_state_changed(self, halted: bool, position_ms: int) -> None:
        """Playback stalled or recovered (e.g. buffering)."""

    def on_inactive_session(self, timed_out: bool) -> None:
        """The session became inactive."""

    def on_volume_changed(self, volume: float) -> None:
        """Volume changed; ``volume`` is a fraction in 0.0-1.0."""

    def on_panic_state(self) -> None:
        """The engine entered its unrecoverable error state."""


@runtime_checkable
class ConnectionEventsListener(Protocol):
    """Callbacks fired by the network session."""

    def on_connection_dropped(self) -> None:
        """The connection to the backend was lost."""

    def on_connection_established(self) -> None:
        """The connection to the backend was (re-)established."""


@runtime_checkable
class PlaybackEventSource(Protocol):
    def add_events_listener(self, listener: PlaybackEventsListener) -> None: ...

    def remove_events_listener(self, listener: PlaybackEventsListener) -> None: ...


@runtime_checkable
class ConnectionEventSource(Protocol):
    def add_reconnection_listener(self, listener: ConnectionEventsListener) -> None: ...

    def remove_reconnection_listener(self, listener: ConnectionEventsListener) -> None: ...


@runtime_checkable
class RunningProcess(Protocol):
    """Handle on a launched process."""

    def wait(self) -> int:
        """Block until the process exits and return its exit code."""


@runtime_checkable
class ProcessLauncher(Protocol):
    """Starts external processes."""

    def launch(self, argv: Sequence[str], env: Mapping[str, str]) -> RunningProcess:
        """Start ``argv`` with ``env`` added to the parent environment.

        Raises OSError when the process cannot be started.
        """
