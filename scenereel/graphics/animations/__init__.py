"""
Animation playback exports.

Provides the Animator state machine, its read-only view and tick sources.
"""

from scenereel.graphics.animations.animator import Animator, create_animator
from scenereel.graphics.animations.animator_state import AnimatorState
from scenereel.graphics.animations.animator_view import AnimatorView
from scenereel.graphics.animations.tick_source import (
    TickSource,
    TickHandle,
    ManualTickSource,
    PygameTimerTickSource,
)

__all__ = [
    'Animator',
    'create_animator',
    'AnimatorState',
    'AnimatorView',
    'TickSource',
    'TickHandle',
    'ManualTickSource',
    'PygameTimerTickSource',
]
