"""
errors.py
---------
Exception types raised by the playback core.
"""


class SceneReelError(Exception):
    """Base class for all SceneReel errors."""


class ConfigurationError(SceneReelError, ValueError):
    """Invalid duration, elapsed time, tick period or config file."""


class StateError(SceneReelError, RuntimeError):
    """Animator bookkeeping reached an impossible state (e.g. double-armed tick)."""
