"""Configuration for playhooks, read from the environment (and .env)."""

import os

from dotenv import load_dotenv

load_dotenv()

PREFIX = "PLAYHOOKS_"

_TRUE_VALUES = ("true", "1", "yes", "on")


def _flag(environ, name: str, default: str = "false") -> bool:
    return environ.get(PREFIX + name, default).strip().lower() in _TRUE_VALUES


class Config:
    """Environment-backed settings"""

    def __init__(self, environ=None):
        environ = os.environ if environ is None else environ

        # Master switch and execution mode
        self.ENABLED = _flag(environ, "ENABLED")
        self.EXECUTE_WITH_BASH = _flag(environ, "EXECUTE_WITH_BASH")

        # Commands, one per event ("" = nothing to run)
        self.ON_CONTEXT_CHANGED = environ.get(PREFIX + "ON_CONTEXT_CHANGED", "")
        self.ON_TRACK_CHANGED = environ.get(PREFIX + "ON_TRACK_CHANGED", "")
        self.ON_PLAYBACK_ENDED = environ.get(PREFIX + "ON_PLAYBACK_ENDED", "")
        self.ON_PLAYBACK_PAUSED = environ.get(PREFIX + "ON_PLAYBACK_PAUSED", "")
        self.ON_PLAYBACK_RESUMED = environ.get(PREFIX + "ON_PLAYBACK_RESUMED", "")
        self.ON_TRACK_SEEKED = environ.get(PREFIX + "ON_TRACK_SEEKED", "")
        self.ON_METADATA_AVAILABLE = environ.get(PREFIX + "ON_METADATA_AVAILABLE", "")
        self.ON_VOLUME_CHANGED = environ.get(PREFIX + "ON_VOLUME_CHANGED", "")
        self.ON_INACTIVE_SESSION = environ.get(PREFIX + "ON_INACTIVE_SESSION", "")
        self.ON_PANIC_STATE = environ.get(PREFIX + "ON_PANIC_STATE", "")
        self.ON_CONNECTION_DROPPED = environ.get(PREFIX + "ON_CONNECTION_DROPPED", "")
        self.ON_CONNECTION_ESTABLISHED = environ.get(PREFIX + "ON_CONNECTION_ESTABLISHED", "")

        self.DEBUG = _flag(environ, "DEBUG")


config = Config()
