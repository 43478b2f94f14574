"""
SceneReel
---------
Sequences timed scenes of draw callbacks against a single surface.

    animator = create_animator(surface)
    scene = create_scene(duration=3000)
    scene.add_element(lambda view: ...)
    animator.add_scene(scene)
    animator.loop()
"""

from scenereel.core.errors import SceneReelError, ConfigurationError, StateError
from scenereel.graphics.animations import (
    Animator,
    AnimatorState,
    AnimatorView,
    ManualTickSource,
    PygameTimerTickSource,
    TickHandle,
    TickSource,
    create_animator,
)
from scenereel.scenes import Scene, create_scene

__version__ = "0.1.0"

__all__ = [
    'Animator',
    'AnimatorState',
    'AnimatorView',
    'Scene',
    'TickSource',
    'TickHandle',
    'ManualTickSource',
    'PygameTimerTickSource',
    'create_animator',
    'create_scene',
    'SceneReelError',
    'ConfigurationError',
    'StateError',
]
