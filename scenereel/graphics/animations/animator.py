"""
animator.py
-----------
Playback state machine that sequences Scenes against one drawing surface.

Responsibilities
----------------
- Own the ordered scene list and all playback state.
- Arm exactly one tick registration while playing; disarm it on pause/reset.
- On every tick advance the current scene, invoke its elements, and move
  to the next scene (or loop / drain) when its duration is reached.

States
------
IDLE     -> never played, or reset
PLAYING  -> tick armed, current scene advancing
PAUSED   -> tick disarmed, queue / current scene / elapsed time retained
DRAINED  -> non-looping playback ran out of scenes; the next tick resets

Element and handler exceptions propagate out of ``step()``; bookkeeping is
left exactly where the failing callback interrupted it.
"""

from typing import List, Optional

from scenereel.core.debug.debug_logger import DebugLogger
from scenereel.core.errors import ConfigurationError, StateError
from scenereel.core.runtime.settings import Timing
from scenereel.graphics.animations.animator_state import AnimatorState
from scenereel.graphics.animations.animator_view import AnimatorView
from scenereel.graphics.animations.tick_source import (
    PygameTimerTickSource,
    TickHandle,
    TickSource,
)
from scenereel.scenes.scene import Scene


class Animator:
    """Plays, pauses, loops and resets a list of Scenes on a surface."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, surface, tick_source: Optional[TickSource] = None,
                 tick_period: int = Timing.TICK_PERIOD):
        """
        Args:
            surface: Drawing target exposed to element callbacks (never inspected)
            tick_source: Periodic tick provider (defaults to a pygame timer source)
            tick_period: Milliseconds added to the scene clock per tick

        Raises:
            ConfigurationError: If tick_period is not a positive integer.
        """
        if isinstance(tick_period, bool) or not isinstance(tick_period, int) or tick_period <= 0:
            raise ConfigurationError(f"tick_period must be a positive integer, got {tick_period!r}")

        self._surface = surface
        self.tick_source = tick_source if tick_source is not None else PygameTimerTickSource()
        self.tick_period = tick_period
        self.view = AnimatorView(self)

        self._scenes: List[Scene] = []

        # Playback state
        self.current_scene: Optional[Scene] = None
        self.remaining_scenes: Optional[List[Scene]] = None
        self.is_playing = False
        self.is_looping = False
        self.tick_handle: Optional[TickHandle] = None

        DebugLogger.state(f"Animator initialized ({tick_period}ms tick)", category="animator")

    def __repr__(self):
        return (f"Animator(state={self.state.value}, scenes={len(self._scenes)}, "
                f"looping={self.is_looping})")

    # ===========================================================
    # Scene List
    # ===========================================================
    @property
    def surface(self):
        return self._surface

    @property
    def scenes(self) -> List[Scene]:
        """Scene template in play order. Playback works on a copy."""
        return self._scenes

    def add_scene(self, scene: Scene) -> None:
        """Append a scene; it plays after every scene added before it."""
        self._scenes.append(scene)

    def add_scenes(self, *scenes: Scene) -> None:
        """Append several scenes, preserving argument order."""
        for scene in scenes:
            self.add_scene(scene)

    def clear_scenes(self) -> None:
        """Drop the template. An in-progress queue keeps its own copy."""
        self._scenes.clear()

    # ===========================================================
    # State
    # ===========================================================
    @property
    def state(self) -> AnimatorState:
        if self.is_playing:
            if self.current_scene is None:
                return AnimatorState.DRAINED
            return AnimatorState.PLAYING
        if self.remaining_scenes is not None:
            return AnimatorState.PAUSED
        return AnimatorState.IDLE

    # ===========================================================
    # Playback Control
    # ===========================================================
    def play(self, options: Optional[dict] = None, **kwargs):
        """
        Start playback, or resume where a pause left off.
        Ignored while already playing.

        Args:
            options: Option mapping; only ``loop`` is recognized
            **kwargs: Same options as keywords (override ``options``)
        """
        if self.is_playing:
            DebugLogger.trace("play() ignored: already playing", category="animator")
            return

        merged = dict(options or {})
        merged.update(kwargs)

        if not self._prepare_for_play(bool(merged.get("loop", False))):
            return

        self._arm_tick()
        DebugLogger.state(
            f"Playing {self.current_scene!r} (looping={self.is_looping})",
            category="animator"
        )

    def loop(self, options: Optional[dict] = None, **kwargs):
        """Same as play(), with ``loop`` forced on."""
        merged = dict(options or {})
        merged.update(kwargs)
        merged["loop"] = True
        self.play(merged)

    def pause(self):
        """Stop ticking but keep all playback state for a later play()."""
        if not self.is_playing:
            DebugLogger.trace("pause() ignored: not playing", category="animator")
            return

        self._disarm_tick()
        self.is_playing = False
        DebugLogger.state(f"Paused at {self.current_scene!r}", category="animator")

    def reset(self):
        """Stop ticking and discard all playback state. Safe from any state."""
        self._disarm_tick()

        if self.current_scene is not None:
            self.current_scene.time_elapsed = 0

        was_active = self.remaining_scenes is not None
        self.current_scene = None
        self.remaining_scenes = None
        self.is_playing = False
        self.is_looping = False

        if was_active:
            DebugLogger.state("Reset to idle", category="animator")

    # ===========================================================
    # Tick
    # ===========================================================
    def step(self):
        """Run one tick. Called by the tick source every ``tick_period`` ms."""
        scene = self.current_scene

        # Drained: previous tick completed the last scene without looping
        if scene is None:
            DebugLogger.state("Scene list drained", category="animator")
            self.reset()
            return

        elapsed = scene.time_elapsed

        if elapsed < scene.duration:
            if elapsed == 0:
                DebugLogger.state(f"Starting {scene!r}", category="scene")
                scene.fire_start()
            self._render(scene)

            # A callback may have reset the animator mid-tick
            if self.current_scene is scene:
                scene.time_elapsed = elapsed + self.tick_period
            return

        # Zero-length traversal: never rendered, start fires with complete
        if elapsed == 0:
            DebugLogger.state(f"Starting {scene!r}", category="scene")
            scene.fire_start()

        DebugLogger.state(f"Completed {scene!r}", category="scene")
        scene.fire_complete()
        scene.time_elapsed = 0

        if self.current_scene is scene:
            self._advance_scene()

    # ===========================================================
    # Internal Helpers
    # ===========================================================
    def _prepare_for_play(self, loop: bool) -> bool:
        """Restore paused state or load the first scene. False if nothing to play."""
        resuming = self.current_scene is not None and self.remaining_scenes is not None

        if not resuming:
            if not self._scenes:
                DebugLogger.warn("play() ignored: animator has no scenes", category="animator")
                return False
            self.remaining_scenes = list(self._scenes)
            self.current_scene = self.remaining_scenes.pop(0)
            self.current_scene.time_elapsed = 0

        self.is_looping = self.is_looping or loop
        self.is_playing = True
        return True

    def _advance_scene(self):
        """Move to the next queued scene, reload the template when looping, or drain."""
        if self.remaining_scenes:
            self.current_scene = self.remaining_scenes.pop(0)
        elif self.is_looping and self._scenes:
            DebugLogger.state("Looping back to the first scene", category="animator")
            self.remaining_scenes = list(self._scenes)
            self.current_scene = self.remaining_scenes.pop(0)
        else:
            self.current_scene = None
            return

        self.current_scene.time_elapsed = 0

    def _render(self, scene: Scene):
        DebugLogger.trace(
            f"Tick {scene.time_elapsed}/{scene.duration}ms, {len(scene.elements)} elements",
            category="tick"
        )
        for element in list(scene.elements):
            element(self.view)

    def _arm_tick(self):
        if self.tick_handle is not None:
            raise StateError("Tick already armed for this animator")
        self.tick_handle = self.tick_source.start(self.step, self.tick_period)

    def _disarm_tick(self):
        if self.tick_handle is None:
            return
        self.tick_source.cancel(self.tick_handle)
        self.tick_handle = None


# ===========================================================
# Factory
# ===========================================================

def create_animator(surface, tick_source: Optional[TickSource] = None, **options) -> Animator:
    """
    Build an Animator bound to ``surface``.

    Args:
        surface: Drawing target
        tick_source: Optional tick provider
        **options: ``tick_period`` is recognized; other keys are ignored
    """
    tick_period = options.get("tick_period", Timing.TICK_PERIOD)
    return Animator(surface, tick_source=tick_source, tick_period=tick_period)
