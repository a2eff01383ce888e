#!/usr/bin/env python3
"""playhooks: fire one playback/connection event and run its configured hook.

Commands come from PLAYHOOKS_* environment variables (or a .env file), the
same settings a player embedding ShellEvents would use. Handy for trying a
hook script without starting playback.
"""

from __future__ import annotations

import argparse
import logging

from .adapters.config_env import load_shell_events_config
from .config import config
from .core.dispatcher import ShellEvents
from .core.models import EventKind, TrackId, TrackMetadata
from .core.ports import ProcessLauncher


def _volume(value: str) -> float:
    volume = float(value)
    if not 0.0 <= volume <= 1.0:
        raise argparse.ArgumentTypeError(f"volume must be within 0.0-1.0, got {value}")
    return volume


def _add_metadata_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("uri", help="Track URI, e.g. spotify:track:...")
    parser.add_argument("--name", help="Track name.")
    parser.add_argument("--artist", help="Artist name.")
    parser.add_argument("--album", help="Album name.")
    parser.add_argument("--duration", type=int, help="Duration in milliseconds.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playhooks", description="Run the hook configured for a playback event."
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    events = parser.add_subparsers(dest="event", required=True, metavar="EVENT")

    context = events.add_parser(EventKind.CONTEXT_CHANGED.cli_name)
    context.add_argument("uri", help="New context URI.")

    track = events.add_parser(EventKind.TRACK_CHANGED.cli_name)
    _add_metadata_args(track)
    track.add_argument("--user", action="store_true", help="The change was user initiated.")

    metadata = events.add_parser(EventKind.METADATA_AVAILABLE.cli_name)
    _add_metadata_args(metadata)

    for kind in (EventKind.PLAYBACK_PAUSED, EventKind.PLAYBACK_RESUMED, EventKind.TRACK_SEEKED):
        positioned = events.add_parser(kind.cli_name)
        positioned.add_argument("position", type=int, help="Position in milliseconds.")

    halt = events.add_parser(EventKind.PLAYBACK_HALT_STATE_CHANGED.cli_name)
    halt.add_argument("position", type=int, help="Position in milliseconds.")
    halt.add_argument("--halted", action="store_true")

    inactive = events.add_parser(EventKind.INACTIVE_SESSION.cli_name)
    inactive.add_argument("--timed-out", action="store_true")

    volume = events.add_parser(EventKind.VOLUME_CHANGED.cli_name)
    volume.add_argument("volume", type=_volume, help="Volume as a fraction, 0.0-1.0.")

    for kind in (
        EventKind.PLAYBACK_ENDED,
        EventKind.PANIC_STATE,
        EventKind.CONNECTION_DROPPED,
        EventKind.CONNECTION_ESTABLISHED,
    ):
        events.add_parser(kind.cli_name)

    return parser


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _metadata_from_args(args: argparse.Namespace) -> TrackMetadata | None:
    if all(v is None for v in (args.name, args.artist, args.album, args.duration)):
        return None
    return TrackMetadata(
        id=TrackId(args.uri),
        name=args.name or "",
        artist=args.artist or "",
        album_name=args.album or "",
        duration=args.duration,
    )


def _payload(kind: EventKind, args: argparse.Namespace) -> dict:
    if kind is EventKind.CONTEXT_CHANGED:
        return {"new_uri": args.uri}
    if kind is EventKind.TRACK_CHANGED:
        return {
            "track_id": TrackId(args.uri),
            "metadata": _metadata_from_args(args),
            "user_initiated": args.user,
        }
    if kind is EventKind.METADATA_AVAILABLE:
        return {"metadata": _metadata_from_args(args) or TrackMetadata(id=TrackId(args.uri))}
    if kind in (EventKind.PLAYBACK_PAUSED, EventKind.PLAYBACK_RESUMED, EventKind.TRACK_SEEKED):
        return {"position_ms": args.position}
    if kind is EventKind.PLAYBACK_HALT_STATE_CHANGED:
        return {"halted": args.halted, "position_ms": args.position}
    if kind is EventKind.INACTIVE_SESSION:
        return {"timed_out": args.timed_out}
    if kind is EventKind.VOLUME_CHANGED:
        return {"volume": args.volume}
    return {}


def main(argv: list[str] | None = None, launcher: ProcessLauncher | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.debug or config.DEBUG)

    kind = EventKind.from_name(args.event)
    events = ShellEvents(load_shell_events_config(), launcher)
    if not events.config.enabled:
        logging.getLogger(__name__).info("Hooks are disabled (set PLAYHOOKS_ENABLED=true)")
    events.dispatch(kind, **_payload(kind, args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
