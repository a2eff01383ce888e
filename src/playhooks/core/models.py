"""Value objects shared by the dispatcher, the config and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventKind(Enum):
    """Events the dispatcher listens to.

    The value is the name of the config field holding the command for the
    event. Halt-state changes have no command and map to ``None``.
    """

    CONTEXT_CHANGED = "on_context_changed"
    TRACK_CHANGED = "on_track_changed"
    PLAYBACK_ENDED = "on_playback_ended"
    PLAYBACK_PAUSED = "on_playback_paused"
    PLAYBACK_RESUMED = "on_playback_resumed"
    TRACK_SEEKED = "on_track_seeked"
    METADATA_AVAILABLE = "on_metadata_available"
    PLAYBACK_HALT_STATE_CHANGED = None
    INACTIVE_SESSION = "on_inactive_session"
    VOLUME_CHANGED = "on_volume_changed"
    PANIC_STATE = "on_panic_state"
    CONNECTION_DROPPED = "on_connection_dropped"
    CONNECTION_ESTABLISHED = "on_connection_established"

    @property
    def config_field(self) -> str | None:
        return self.value

    @property
    def cli_name(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_name(cls, name: str) -> "EventKind":
        """Look up a kind by ``volume-changed``, ``volume_changed`` or ``VOLUME_CHANGED``."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown event kind: {name!r}") from None


@dataclass(frozen=True)
class TrackId:
    """Stable identifier of a playable item."""

    uri: str

    def to_uri(self) -> str:
        return self.uri


@dataclass(frozen=True)
class TrackMetadata:
    """Metadata of the item being played.

    Attributes:
        id: Identifier of the item
        name: Track or episode title
        artist: Artist (or show) name
        album_name: Album name
        duration: Duration in milliseconds, None when unknown
    """

    id: TrackId
    name: str = ""
    artist: str = ""
    album_name: str = ""
    duration: int | None = None
