"""Event dispatcher: turns playback and connection events into commands.

Each callback maps its payload to environment variables and hands the
configured command to the ExecutionGateway. Nothing is returned and
nothing is raised back to the event source.
"""

from __future__ import annotations

import logging
import math

from .config_model import ShellEventsConfig
from .gateway import ExecutionGateway
from .models import EventKind
from .ports import (
    ConnectionEventSource,
    Metadata,
    PlayableId,
    PlaybackEventSource,
    ProcessLauncher,
)

logger = logging.getLogger(__name__)


def _bool_env(value: bool) -> str:
    return "true" if value else "false"


def _volume_percent(volume: float) -> int:
    # Half-up: 72.5 -> 73, where round() would give 72.
    return int(math.floor(volume * 100 + 0.5))


def _metadata_env(metadata: Metadata | None) -> dict[str, str]:
    if metadata is None:
        return {"NAME": "", "ARTIST": "", "ALBUM": "", "DURATION": ""}
    return {
        "NAME": metadata.name or "",
        "ARTIST": metadata.artist or "",
        "ALBUM": metadata.album_name or "",
        "DURATION": "" if metadata.duration is None else str(metadata.duration),
    }


class ShellEvents:
    """Runs a configured external command for each playback/connection event.

    Implements both PlaybackEventsListener and ConnectionEventsListener, so a
    single instance can be attached to a player and to its session.
    """

    def __init__(self, config: ShellEventsConfig, launcher: ProcessLauncher | None = None):
        self._config = config
        self._gateway = ExecutionGateway(config, launcher)

    @property
    def config(self) -> ShellEventsConfig:
        return self._config

    def attach(
        self,
        player: PlaybackEventSource | None = None,
        session: ConnectionEventSource | None = None,
    ) -> None:
        """Register on the given event sources."""
        if player is not None:
            player.add_events_listener(self)
        if session is not None:
            session.add_reconnection_listener(self)

    def detach(
        self,
        player: PlaybackEventSource | None = None,
        session: ConnectionEventSource | None = None,
    ) -> None:
        if player is not None:
            player.remove_events_listener(self)
        if session is not None:
            session.remove_reconnection_listener(self)

    def dispatch(self, kind: EventKind, **payload) -> None:
        """Fire the callback for ``kind`` with keyword ``payload``.

        Raises TypeError if ``payload`` does not match the callback.
        """
        callback = getattr(self, f"on_{kind.name.lower()}")
        callback(**payload)

    def _exec(self, kind: EventKind, **env: str) -> None:
        self._gateway.execute(self._config.command_for(kind), env)

    # Playback events

    def on_context_changed(self, new_uri: str) -> None:
        self._exec(EventKind.CONTEXT_CHANGED, CONTEXT_URI=new_uri)

    def on_track_changed(
        self, track_id: PlayableId, metadata: Metadata | None, user_initiated: bool
    ) -> None:
        self._exec(
            EventKind.TRACK_CHANGED,
            TRACK_URI=track_id.to_uri(),
            **_metadata_env(metadata),
            IS_USER=_bool_env(user_initiated),
        )

    def on_playback_ended(self) -> None:
        self._exec(EventKind.PLAYBACK_ENDED)

    def on_playback_paused(self, position_ms: int) -> None:
        self._exec(EventKind.PLAYBACK_PAUSED, POSITION=str(position_ms))

    def on_playback_resumed(self, position_ms: int) -> None:
        self._exec(EventKind.PLAYBACK_RESUMED, POSITION=str(position_ms))

    def on_track_seeked(self, position_ms: int) -> None:
        self._exec(EventKind.TRACK_SEEKED, POSITION=str(position_ms))

    def on_metadata_available(self, metadata: Metadata) -> None:
        self._exec(
            EventKind.METADATA_AVAILABLE,
            TRACK_URI=metadata.id.to_uri(),
            **_metadata_env(metadata),
        )

    def on_playback_halt_state_changed(self, halted: bool, position_ms: int) -> None:
        logger.debug("Playback halt state changed: halted=%s at %s ms", halted, position_ms)

    def on_inactive_session(self, timed_out: bool) -> None:
        self._exec(EventKind.INACTIVE_SESSION)

    def on_volume_changed(self, volume: float) -> None:
        self._exec(EventKind.VOLUME_CHANGED, VOLUME=str(_volume_percent(volume)))

    def on_panic_state(self) -> None:
        self._exec(EventKind.PANIC_STATE)

    # Connection events

    def on_connection_dropped(self) -> None:
        self._exec(EventKind.CONNECTION_DROPPED)

    def on_connection_established(self) -> None:
        self._exec(EventKind.CONNECTION_ESTABLISHED)
