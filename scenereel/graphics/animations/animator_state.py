"""
animator_state.py
-----------------
Defines the playback states an Animator can be in.
"""

from enum import Enum


class AnimatorState(Enum):
    """Playback states for the animator state machine."""
    IDLE = "idle"           # Never played, or fully reset
    PLAYING = "playing"     # Tick armed, current scene advancing
    PAUSED = "paused"       # Tick disarmed, playback state retained
    DRAINED = "drained"     # Non-looping run out of scenes; resets on next tick
