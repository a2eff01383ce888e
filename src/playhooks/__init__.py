"""playhooks - run external commands on media playback events"""

__version__ = "1.0.0"
__description__ = "Run external commands on media playback events"

__all__ = ["main", "ShellEvents", "ShellEventsConfig", "__version__"]


def __getattr__(name: str):
    """Lazy import so that importing playhooks does not load .env.

    playhooks.config calls load_dotenv() at import time; only the CLI and
    the env adapter need it.
    """
    if name == "ShellEvents":
        from .core.dispatcher import ShellEvents

        return ShellEvents
    if name == "ShellEventsConfig":
        from .core.config_model import ShellEventsConfig

        return ShellEventsConfig
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
