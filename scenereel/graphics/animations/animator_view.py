"""
animator_view.py
----------------
Read-only window onto a running Animator, handed to every element callback.
"""


class AnimatorView:
    """Exposes the surface and current timing without playback controls."""

    __slots__ = ("_animator",)

    def __init__(self, animator):
        self._animator = animator

    @property
    def surface(self):
        """Drawing target the animator was created with."""
        return self._animator.surface

    @property
    def current_scene(self):
        return self._animator.current_scene

    @property
    def time_elapsed(self):
        scene = self._animator.current_scene
        return scene.time_elapsed if scene is not None else 0

    @property
    def duration(self):
        scene = self._animator.current_scene
        return scene.duration if scene is not None else 0

    @property
    def progress(self) -> float:
        """Elapsed fraction of the current scene, clamped to [0, 1]."""
        duration = self.duration
        if duration <= 0:
            return 1.0
        return min(self.time_elapsed / duration, 1.0)

    @property
    def tick_period(self) -> int:
        return self._animator.tick_period

    def __repr__(self):
        return f"AnimatorView(elapsed={self.time_elapsed}, duration={self.duration})"
