"""
scene.py
--------
Timed container of per-tick draw callbacks.

Responsibilities
----------------
- Hold the ordered list of element callbacks invoked on every tick.
- Hold the scene duration and the elapsed time of the running traversal.
- Register and fire start / complete handlers in registration order.

A Scene knows nothing about scheduling; the Animator that is currently
running it owns ``time_elapsed`` and decides when the handlers fire.
"""

from numbers import Real
from typing import Callable, List

from scenereel.core.errors import ConfigurationError


ElementCallback = Callable[..., None]
SceneHandler = Callable[["Scene"], None]


def _validate_time(value, field_name: str):
    """Reject non-numeric or negative time values."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f"{field_name} must be a number, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{field_name} must be >= 0, got {value!r}")
    return value


class Scene:
    """A fixed-length run of draw callbacks with start/complete hooks."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, duration=0):
        """
        Args:
            duration: Length of one traversal in milliseconds (>= 0).

        Raises:
            ConfigurationError: If duration is negative or not a number.
        """
        self._duration = _validate_time(duration, "duration")
        self._time_elapsed = 0
        self._elements: List[ElementCallback] = []
        self._start_handlers: List[SceneHandler] = []
        self._complete_handlers: List[SceneHandler] = []

    def __repr__(self):
        return (f"Scene(duration={self._duration}, elapsed={self._time_elapsed}, "
                f"elements={len(self._elements)})")

    # ===========================================================
    # Timing
    # ===========================================================
    @property
    def duration(self):
        """Traversal length; fixed at construction."""
        return self._duration

    @property
    def time_elapsed(self):
        return self._time_elapsed

    @time_elapsed.setter
    def time_elapsed(self, value):
        self._time_elapsed = _validate_time(value, "time_elapsed")

    # ===========================================================
    # Elements
    # ===========================================================
    @property
    def elements(self) -> List[ElementCallback]:
        """Element callbacks in invocation order."""
        return self._elements

    def add_element(self, element: ElementCallback) -> None:
        """
        Append a draw callback. It is called once per tick with the
        running animator's view, after every previously added element.
        """
        self._elements.append(element)

    def add_elements(self, *elements: ElementCallback) -> None:
        """Append several callbacks, preserving argument order."""
        for element in elements:
            self.add_element(element)

    def clear_elements(self) -> None:
        """Drop all elements. Handlers and duration are untouched."""
        self._elements.clear()

    # ===========================================================
    # Events
    # ===========================================================
    def on_start(self, handler: SceneHandler) -> None:
        """Register a handler for the start of each traversal."""
        self._start_handlers.append(handler)

    def on_complete(self, handler: SceneHandler) -> None:
        """Register a handler for the end of each traversal."""
        self._complete_handlers.append(handler)

    def fire_start(self) -> None:
        """Invoke start handlers in registration order."""
        for handler in list(self._start_handlers):
            handler(self)

    def fire_complete(self) -> None:
        """Invoke complete handlers in registration order."""
        for handler in list(self._complete_handlers):
            handler(self)


# ===========================================================
# Factory
# ===========================================================

def create_scene(duration=0) -> Scene:
    """Build a new Scene lasting ``duration`` milliseconds."""
    return Scene(duration=duration)
